import os
import sys
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import pytest

footer = pytest.importorskip('ui.components.footer')
from config.wage_constants import DISCLAIMER, FOOTER_NOTES


def test_footer_links_and_notes():
    html = footer.footer_html(
        FOOTER_NOTES,
        'https://scenariocalculators.com/privacy',
        'https://scenariocalculators.com/terms',
        '© 2026 Unpaid Wages Estimator',
    )
    for note in ['Estimates only', 'Not legal advice', 'Laws vary by state']:
        assert f'• {note}' in html
    assert "href='https://scenariocalculators.com/privacy'" in html
    assert "href='https://scenariocalculators.com/terms'" in html
    assert html.count("target='_blank' rel='noopener noreferrer'") == 2
    assert '© 2026 Unpaid Wages Estimator' in html


def test_disclaimer():
    html = footer.disclaimer_html(DISCLAIMER)
    assert 'Results are estimates only and not legal advice.' in html


def test_ad_slots():
    assert "class='ad-container'" in footer.ad_slot_html()
    assert "class='ad-container ad-sticky'" in footer.ad_slot_html(sticky=True)
    assert 'Advertisement' in footer.ad_slot_html()
