from .strategies import StrategyResult


def format_report(part1: StrategyResult, part2: StrategyResult) -> str:
    lines = [
        f"guard #{part1.guard_id} slept the longest, "
        f"and slept most during minute {part1.minute}",
        f"part 1 answer: {part1.answer}",
        f"the absolute sleepiest minute was {part2.minute} "
        f"when guard #{part2.guard_id} was on duty",
        f"part 2 answer: {part2.answer}",
    ]
    return "\n".join(lines)
