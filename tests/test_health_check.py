import logging
import os
import sys
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import pytest
import yaml

health_check = pytest.importorskip('health_check')


def test_creates_default_config(tmp_path):
    checker = health_check.HealthChecker(tmp_path)
    is_healthy, report = checker.check_all()
    assert is_healthy
    assert (tmp_path / 'logs').is_dir()
    config = yaml.safe_load((tmp_path / 'config' / 'config.yaml').read_text(encoding='utf-8'))
    assert config['links']['terms'] == 'https://scenariocalculators.com/terms'
    assert any('created' in w for w in report['warnings'])


def test_flags_bad_defaults(tmp_path):
    (tmp_path / 'config').mkdir()
    (tmp_path / 'config' / 'config.yaml').write_text(
        'defaults:\n  state: XX\n  shoe_size: 9\n  wage_type: overtime\n',
        encoding='utf-8',
    )
    is_healthy, report = health_check.HealthChecker(tmp_path).check_all()
    assert is_healthy
    assert len(report['warnings']) == 2


def test_invalid_yaml_is_an_issue(tmp_path):
    (tmp_path / 'config').mkdir()
    (tmp_path / 'config' / 'config.yaml').write_text('defaults: [unclosed\n', encoding='utf-8')
    is_healthy, report = health_check.ensure_app_health(tmp_path)
    assert not is_healthy
    assert 'not valid YAML' in report['issues'][0]


def test_scalar_defaults_are_reported(tmp_path):
    (tmp_path / 'config').mkdir()
    (tmp_path / 'config' / 'config.yaml').write_text('defaults: CA\n', encoding='utf-8')
    is_healthy, report = health_check.HealthChecker(tmp_path).check_all()
    assert is_healthy
    assert any("'defaults' must be a mapping" in w for w in report['warnings'])


def test_list_config_is_an_issue(tmp_path):
    (tmp_path / 'config').mkdir()
    (tmp_path / 'config' / 'config.yaml').write_text('- CA\n- overtime\n', encoding='utf-8')
    is_healthy, report = health_check.HealthChecker(tmp_path).check_all()
    assert not is_healthy
    assert 'mapping at the top level' in report['issues'][0]


def test_ensure_app_health_logs_warnings(tmp_path, caplog):
    (tmp_path / 'config').mkdir()
    (tmp_path / 'config' / 'config.yaml').write_text('defaults:\n  state: XX\n', encoding='utf-8')
    with caplog.at_level(logging.WARNING, logger='unpaid_wages'):
        health_check.ensure_app_health(tmp_path)
    assert "state='XX'" in caplog.text
