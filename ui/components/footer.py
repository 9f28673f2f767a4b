"""Disclaimer, footer and ad placeholders."""
from html import escape
from typing import List

import streamlit as st

from ui.styles import BORDER_COLOR, TEXT_MUTED, TEXT_SECONDARY


def disclaimer_html(text: str) -> str:
    return (
        "<div style='max-width:600px;margin:0 auto;font-size:0.875rem;"
        f"color:{TEXT_SECONDARY};line-height:1.6'>"
        f"<p>{escape(text)}</p>"
        "</div>"
    )


def footer_html(notes: List[str], privacy_url: str, terms_url: str, copyright_text: str) -> str:
    bullets = "".join(f"<li>• {escape(note)}</li>" for note in notes)
    link_style = "color:#94A3B8;font-size:0.75rem"
    return (
        f"<footer style='text-align:center;padding:2rem 1rem;color:{TEXT_MUTED};"
        f"border-top:1px solid {BORDER_COLOR};margin-top:2rem'>"
        "<ul style='list-style:none;padding:0;margin:0;display:flex;flex-wrap:wrap;"
        f"justify-content:center;gap:1rem;font-size:0.875rem'>{bullets}</ul>"
        "<nav style='margin-top:1rem;display:flex;gap:1rem;justify-content:center'>"
        f"<a href='{escape(privacy_url, quote=True)}' target='_blank' rel='noopener noreferrer' "
        f"style='{link_style}'>Privacy Policy</a>"
        "<span style='color:#64748B'>|</span>"
        f"<a href='{escape(terms_url, quote=True)}' target='_blank' rel='noopener noreferrer' "
        f"style='{link_style}'>Terms of Service</a>"
        "</nav>"
        f"<p style='margin-top:1rem;font-size:0.75rem'>{escape(copyright_text)}</p>"
        "</footer>"
    )


def ad_slot_html(sticky: bool = False) -> str:
    css_class = "ad-container ad-sticky" if sticky else "ad-container"
    return f"<div class='{css_class}'><span>Advertisement</span></div>"


def render_disclaimer(text: str) -> None:
    st.markdown(disclaimer_html(text), unsafe_allow_html=True)


def render_footer(notes: List[str], privacy_url: str, terms_url: str, copyright_text: str) -> None:
    st.markdown(footer_html(notes, privacy_url, terms_url, copyright_text), unsafe_allow_html=True)


def render_ad_slot(sticky: bool = False) -> None:
    st.markdown(ad_slot_html(sticky), unsafe_allow_html=True)
