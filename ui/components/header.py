"""Header component for the Streamlit app."""
from html import escape

import streamlit as st

from ui.styles import TEXT_SECONDARY


def header_html(title: str, subtitle: str) -> str:
    return (
        "<header style='text-align:center;margin-bottom:0.5rem'>"
        f"<h1 style='margin-bottom:0.5rem'>{escape(title)}</h1>"
        f"<p style='color:{TEXT_SECONDARY};font-size:1.125rem'>{escape(subtitle)}</p>"
        "</header>"
    )


def render_header(title: str = "Unpaid Wages Estimator (2026)",
                  subtitle: str = "Estimate your unpaid wages situation") -> str:
    """Render the page header and return its HTML.

    Args:
        title: Main heading text.
        subtitle: Line shown under the heading.

    Returns:
        str: The generated header HTML.
    """
    html = header_html(title, subtitle)
    st.markdown(html, unsafe_allow_html=True)
    return html
