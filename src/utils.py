import copy
import os
import logging
from pathlib import Path

import yaml

ROOT_DIR = Path(__file__).resolve().parent.parent
DEFAULT_CONFIG_PATH = ROOT_DIR / 'config' / 'config.yaml'

DEFAULT_APP_CONFIG = {
    'app': {
        'title': 'Unpaid Wages Estimator (2026)',
        'subtitle': 'Estimate your unpaid wages situation',
        'copyright': '© 2026 Unpaid Wages Estimator',
    },
    'defaults': {},
    'links': {
        'privacy': 'https://scenariocalculators.com/privacy',
        'terms': 'https://scenariocalculators.com/terms',
    },
    'show_ad_slots': True,
    'logging': {
        'file': 'logs/app.log',
        'level': 'INFO',
    },
}


def load_config(path=DEFAULT_CONFIG_PATH):
    """Load YAML configuration from the given path."""
    with open(path, 'r', encoding='utf-8') as f:
        return yaml.safe_load(f) or {}


def _merge(base, override):
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_app_config(path=DEFAULT_CONFIG_PATH):
    """Return the app configuration, with file values layered over the built-in defaults.

    A missing file is not an error: the defaults are returned and a warning
    is logged.
    """
    logger = logging.getLogger('unpaid_wages')
    if not Path(path).exists():
        logger.warning('Config file %s not found, using defaults', path)
        return copy.deepcopy(DEFAULT_APP_CONFIG)
    config = load_config(path)
    if not isinstance(config, dict):
        logger.warning('Config file %s is not a mapping, using defaults', path)
        return copy.deepcopy(DEFAULT_APP_CONFIG)
    return _merge(DEFAULT_APP_CONFIG, config)


def configure_logger(log_file='logs/app.log', level='INFO'):
    """Return the app logger, writing to the specified file."""
    logger = logging.getLogger('unpaid_wages')
    logger.setLevel(getattr(logging, str(level).upper(), logging.INFO))
    log_dir = os.path.dirname(log_file)
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
    target = os.path.abspath(log_file)
    for handler in list(logger.handlers):
        if isinstance(handler, logging.FileHandler) and handler.baseFilename != target:
            logger.removeHandler(handler)
            handler.close()
    if not logger.handlers:
        handler = logging.FileHandler(log_file, encoding='utf-8')
        formatter = logging.Formatter('%(asctime)s - %(levelname)s - %(message)s')
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    return logger
