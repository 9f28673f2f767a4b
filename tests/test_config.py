import logging
import os
import sys
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
from src.utils import DEFAULT_CONFIG_PATH, load_app_config, load_config


def test_load_config():
    config = load_config(DEFAULT_CONFIG_PATH)
    assert isinstance(config, dict)
    assert config.get('defaults', {}).get('state') == 'CA'
    assert config['links']['privacy'] == 'https://scenariocalculators.com/privacy'


def test_load_config_empty_file(tmp_path):
    path = tmp_path / 'empty.yaml'
    path.write_text('')
    assert load_config(str(path)) == {}


def test_load_app_config_missing_file_uses_defaults(tmp_path):
    config = load_app_config(str(tmp_path / 'missing.yaml'))
    assert config['app']['title'] == 'Unpaid Wages Estimator (2026)'
    assert config['show_ad_slots'] is True
    assert config['logging']['level'] == 'INFO'


def test_load_app_config_merges_over_defaults(tmp_path):
    path = tmp_path / 'config.yaml'
    path.write_text(
        'links:\n  terms: https://example.com/terms\nshow_ad_slots: false\n',
        encoding='utf-8',
    )
    config = load_app_config(str(path))
    assert config['links']['terms'] == 'https://example.com/terms'
    assert config['links']['privacy'] == 'https://scenariocalculators.com/privacy'
    assert config['show_ad_slots'] is False
    assert config['app']['subtitle'] == 'Estimate your unpaid wages situation'


def test_load_app_config_missing_file_is_logged(tmp_path, caplog):
    with caplog.at_level(logging.WARNING, logger='unpaid_wages'):
        load_app_config(str(tmp_path / 'missing.yaml'))
    assert 'not found, using defaults' in caplog.text


def test_load_app_config_non_mapping_file(tmp_path, caplog):
    path = tmp_path / 'config.yaml'
    path.write_text('- just\n- a list\n', encoding='utf-8')
    with caplog.at_level(logging.WARNING, logger='unpaid_wages'):
        config = load_app_config(str(path))
    assert config['links']['terms'] == 'https://scenariocalculators.com/terms'
    assert 'is not a mapping' in caplog.text
