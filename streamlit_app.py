"""
Unpaid Wages Estimator (2026) - main Streamlit page
"""
import logging
from dataclasses import asdict

import streamlit as st

from config.wage_constants import (
    DISCLAIMER,
    FOOTER_NOTES,
    PAY_FREQUENCIES,
    STATES,
    TIME_BUCKETS,
    WAGE_TYPES,
)
from health_check import display_health_status
from modules.summary_export import EXPORT_FILE_NAME, summary_to_markdown
from modules.wage_lookup import WageSelection, build_summary, resolve_defaults, validate_selection
from src import utils
from ui.components.footer import render_ad_slot, render_disclaimer, render_footer
from ui.components.header import render_header
from ui.components.results import render_categories_table, render_legal_factors, render_status_summary
from ui.styles import CUSTOM_CSS


def init_session_state(defaults: WageSelection):
    """Seed the form state on first load; later reruns keep the user's picks."""
    for name, value in asdict(defaults).items():
        st.session_state.setdefault(name, value)


def render_form(logger) -> WageSelection:
    """Four selectboxes in two rows, plus the Estimate button."""
    with st.container(border=True):
        col1, col2 = st.columns(2)
        with col1:
            state = st.selectbox("State of Employment", STATES, key="state")
        with col2:
            wage_type = st.selectbox(
                "Type of Unpaid Wages",
                list(WAGE_TYPES),
                format_func=WAGE_TYPES.get,
                key="wage_type",
            )

        col3, col4 = st.columns(2)
        with col3:
            pay_frequency = st.selectbox(
                "Pay Frequency",
                list(PAY_FREQUENCIES),
                format_func=PAY_FREQUENCIES.get,
                key="pay_frequency",
            )
        with col4:
            time_since_owed = st.selectbox(
                "Time Since Owed",
                list(TIME_BUCKETS),
                format_func=TIME_BUCKETS.get,
                key="time_since_owed",
            )

        selection = validate_selection(state, wage_type, pay_frequency, time_since_owed)

        # Results already follow the selection; the button only records it.
        if st.button("Estimate", type="primary", key="estimate"):
            logger.info("Estimate requested: %s", asdict(selection))

    return selection


def log_download(selection: WageSelection):
    logging.getLogger('unpaid_wages').info("Summary downloaded: %s", asdict(selection))


def main():
    """Application entry point."""
    root = utils.ROOT_DIR
    default_logging = utils.DEFAULT_APP_CONFIG['logging']
    utils.configure_logger(str(root / default_logging['file']), default_logging['level'])

    config = utils.load_app_config(root / 'config' / 'config.yaml')
    app_config = config['app']
    log_config = config['logging']
    logger = utils.configure_logger(str(root / log_config['file']), log_config['level'])

    st.set_page_config(
        page_title=app_config['title'],
        page_icon="⚖️",
        layout="centered",
    )
    st.markdown(CUSTOM_CSS, unsafe_allow_html=True)

    display_health_status(root)

    render_header(app_config['title'], app_config['subtitle'])

    init_session_state(resolve_defaults(config.get('defaults'), logger))
    selection = render_form(logger)
    summary = build_summary(selection)

    render_status_summary(summary.urgency, summary.time_note)
    render_legal_factors(summary.legal_factors)

    if config['show_ad_slots']:
        render_ad_slot()

    render_categories_table(summary.wage_categories)

    st.download_button(
        "⬇️ Download summary",
        data=summary_to_markdown(summary, DISCLAIMER),
        file_name=EXPORT_FILE_NAME,
        mime="text/markdown",
        on_click=log_download,
        args=(selection,),
    )

    render_disclaimer(DISCLAIMER)
    render_footer(
        FOOTER_NOTES,
        config['links']['privacy'],
        config['links']['terms'],
        app_config['copyright'],
    )

    if config['show_ad_slots']:
        render_ad_slot(sticky=True)


if __name__ == "__main__":
    main()
