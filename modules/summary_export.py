"""Markdown export of the displayed summary."""

from modules.wage_lookup import WageSummary

EXPORT_FILE_NAME = "unpaid-wages-summary.md"


def summary_to_markdown(summary: WageSummary, disclaimer: str = "") -> str:
    labels = summary.labels
    lines = [
        "# Unpaid Wages Summary",
        "",
        f"- State of Employment: {labels['state']}",
        f"- Type of Unpaid Wages: {labels['wage_type']}",
        f"- Pay Frequency: {labels['pay_frequency']}",
        f"- Time Since Owed: {labels['time_since_owed']}",
        "",
        f"## Status: {summary.urgency.label}",
        "",
        f"**Time Consideration:** {summary.time_note}",
        "",
        "## Key Legal Factors",
        "",
    ]
    lines.extend(f"- {factor}" for factor in summary.legal_factors)
    lines += ["", "## Wage Categories Affected", ""]
    lines.extend(f"- {category}" for category in summary.wage_categories)
    if disclaimer:
        lines += ["", f"_{disclaimer}_"]
    return "\n".join(lines)


__all__ = ["EXPORT_FILE_NAME", "summary_to_markdown"]
