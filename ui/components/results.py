"""Result cards shown under the form.

Each ``*_html`` function is pure and returns the markup for one card; the
``render_*`` wrappers push that markup to the page.
"""
from html import escape
from typing import List

import streamlit as st

from modules.wage_lookup import Urgency
from ui.styles import BORDER_COLOR, STRIPE_COLOR, TEXT_SECONDARY


def status_summary_html(urgency: Urgency, time_note: str) -> str:
    """Status card tinted with the urgency colours, with the time note below a rule."""
    return (
        f"<div class='card' style='background:{urgency.bg};border-color:{urgency.color}'>"
        "<div style='text-align:center'>"
        f"<h2 style='font-size:1rem;color:{TEXT_SECONDARY};margin-bottom:0.5rem'>Status Summary</h2>"
        f"<div class='urgency-pill' style='background-color:{urgency.color}'>{escape(urgency.label)}</div>"
        "</div>"
        f"<hr style='margin:1rem 0;border:none;border-top:1px solid {BORDER_COLOR}'>"
        f"<p style='font-size:0.875rem;color:{TEXT_SECONDARY};line-height:1.6'>"
        f"<strong>Time Consideration:</strong> {escape(time_note)}</p>"
        "</div>"
    )


def legal_factors_html(factors: List[str]) -> str:
    items = "".join(
        "<li style='display:flex;align-items:center;gap:0.75rem;"
        f"font-size:0.9375rem;color:{TEXT_SECONDARY}'>"
        f"<span class='factor-dot'></span>{escape(factor)}</li>"
        for factor in factors
    )
    return (
        "<div class='card' style='border-left:4px solid var(--color-primary)'>"
        "<h3 style='font-size:1.125rem;margin-bottom:1rem'>Key Legal Factors</h3>"
        "<ul style='list-style:none;padding:0;margin:0;display:grid;gap:0.75rem'>"
        f"{items}</ul>"
        "</div>"
    )


def categories_table_html(categories: List[str]) -> str:
    """Striped one-column table; the last row has no bottom border."""
    rows = []
    last = len(categories) - 1
    for i, category in enumerate(categories):
        border = "none" if i == last else f"1px solid {BORDER_COLOR}"
        background = STRIPE_COLOR if i % 2 else "transparent"
        rows.append(
            f"<tr style='border-bottom:{border};background-color:{background}'>"
            f"<td style='padding:0.75rem 1.5rem;color:{TEXT_SECONDARY}'>{escape(category)}</td>"
            "</tr>"
        )
    return (
        "<div class='card' style='padding:0'>"
        f"<div style='padding:1rem 1.5rem;border-bottom:1px solid {BORDER_COLOR}'>"
        "<h3 style='font-size:1rem'>Wage Categories Affected</h3>"
        "</div>"
        "<table style='width:100%;border-collapse:collapse;font-size:0.9375rem'>"
        f"<tbody>{''.join(rows)}</tbody>"
        "</table>"
        "</div>"
    )


def render_status_summary(urgency: Urgency, time_note: str) -> str:
    html = status_summary_html(urgency, time_note)
    st.markdown(html, unsafe_allow_html=True)
    return html


def render_legal_factors(factors: List[str]) -> str:
    html = legal_factors_html(factors)
    st.markdown(html, unsafe_allow_html=True)
    return html


def render_categories_table(categories: List[str]) -> str:
    html = categories_table_html(categories)
    st.markdown(html, unsafe_allow_html=True)
    return html


__all__ = [
    "status_summary_html",
    "legal_factors_html",
    "categories_table_html",
    "render_status_summary",
    "render_legal_factors",
    "render_categories_table",
]
