"""Terminal rendering of a strength result.

Text equivalent of the checker widget: meter, tier label, criteria
checklist, score and suggestions.
"""

from password_checker import CRITERIA_LABELS, StrengthResult


METER_WIDTH = 20


def render_meter(result: StrengthResult, width: int = METER_WIDTH) -> str:
    """Render the strength bar, filled in proportion to the tier width."""
    fill = round(result.tier.width * width) if result.tier else 0
    label = result.tier.label if result.tier else ""
    return f"[{'#' * fill}{'.' * (width - fill)}] {label}".rstrip()


def render_criteria(result: StrengthResult) -> list[str]:
    """Render one checklist line per criterion."""
    return [
        f"  {'✅' if met else '❌'} {CRITERIA_LABELS[key]}"
        for key, met in result.criteria.items()
    ]


def render_report(result: StrengthResult) -> str:
    """Render the full multi-line report for a result."""
    lines = [f"Strength: {render_meter(result)}"]
    lines.extend(render_criteria(result))
    lines.append(f"Security Score: {result.score}")

    if result.suggestions:
        lines.append("Suggestions to improve your password:")
        lines.extend(f"  - {tip}" for tip in result.suggestions)

    return "\n".join(lines)
