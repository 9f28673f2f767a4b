import os
import sys
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import pytest

header = pytest.importorskip('ui.components.header')

def test_render_header_contains_header_tag():
    html = header.render_header()
    assert isinstance(html, str)
    assert '<header' in html.lower()
    assert '</header>' in html.lower()
    assert 'Unpaid Wages Estimator (2026)' in html
    assert 'Estimate your unpaid wages situation' in html


def test_header_html_escapes_text():
    html = header.header_html('Wages <2026>', 'A & B')
    assert 'Wages &lt;2026&gt;' in html
    assert 'A &amp; B' in html
