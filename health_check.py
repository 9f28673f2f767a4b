"""
health_check.py - Startup checks for the estimator
Runs once per session when the Streamlit app starts
"""
import importlib.util
import logging
from pathlib import Path
from typing import Dict, List, Tuple

import streamlit as st
import yaml

from modules.wage_lookup import ALLOWED_VALUES
from src.utils import DEFAULT_APP_CONFIG, ROOT_DIR

logger = logging.getLogger('unpaid_wages')


class HealthChecker:
    """Checks the application state at startup."""

    ESSENTIAL_MODULES = ['streamlit', 'yaml']

    def __init__(self, base_dir=ROOT_DIR):
        self.base_dir = Path(base_dir)
        self.issues = []
        self.warnings = []
        self.success = []

    def check_all(self) -> Tuple[bool, Dict[str, List[str]]]:
        """Run every check."""
        self._ensure_directories()
        self._ensure_config_file()
        self._check_modules()
        self._check_defaults()

        return len(self.issues) == 0, {
            'issues': self.issues,
            'warnings': self.warnings,
            'success': self.success
        }

    def _ensure_directories(self):
        for dir_path in ['logs', 'config']:
            (self.base_dir / dir_path).mkdir(parents=True, exist_ok=True)

        self.success.append("✅ Directory structure ready")

    def _ensure_config_file(self):
        """Write the default config.yaml when it is missing."""
        config_path = self.base_dir / 'config' / 'config.yaml'
        if config_path.exists():
            self.success.append("✅ config/config.yaml found")
            return

        with open(config_path, 'w', encoding='utf-8') as f:
            yaml.dump(DEFAULT_APP_CONFIG, f, allow_unicode=True)

        self.warnings.append("⚠️  config/config.yaml created with default settings")

    def _check_modules(self):
        missing = [m for m in self.ESSENTIAL_MODULES if importlib.util.find_spec(m) is None]

        if missing:
            self.issues.append(f"❌ Missing Python modules: {', '.join(missing)}")
        else:
            self.success.append("✅ All essential modules installed")

    def _check_defaults(self):
        """Flag configured default selections outside their option lists."""
        config_path = self.base_dir / 'config' / 'config.yaml'
        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                config = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            self.issues.append(f"❌ config/config.yaml is not valid YAML: {e}")
            return

        if not isinstance(config, dict):
            self.issues.append("❌ config/config.yaml must contain a mapping at the top level")
            return

        defaults = config.get('defaults') or {}
        if not isinstance(defaults, dict):
            self.warnings.append(f"⚠️  'defaults' must be a mapping, got {defaults!r}; built-in defaults used")
            return
        for name, value in defaults.items():
            if name not in ALLOWED_VALUES:
                self.warnings.append(f"⚠️  Unknown default '{name}' ignored")
            elif value not in ALLOWED_VALUES[name]:
                self.warnings.append(f"⚠️  Default {name}={value!r} is not a valid option")


def display_health_status(base_dir=ROOT_DIR):
    """Run the startup checks once per session and show problems in the sidebar."""
    if 'health_checked' not in st.session_state:
        is_healthy, report = ensure_app_health(base_dir)

        st.session_state.health_checked = True
        st.session_state.health_report = report
        st.session_state.is_healthy = is_healthy

        if not is_healthy or report['warnings']:
            with st.sidebar:
                with st.expander("🏥 Health status", expanded=not is_healthy):
                    if report['issues']:
                        st.error("**Critical issues:**")
                        for issue in report['issues']:
                            st.write(issue)

                    if report['warnings']:
                        st.warning("**Warnings:**")
                        for warning in report['warnings']:
                            st.write(warning)

                    if report['success']:
                        st.success("**OK:**")
                        for success in report['success'][:3]:
                            st.write(success)


def ensure_app_health(base_dir=ROOT_DIR):
    """Run the checks silently and log any problems."""
    checker = HealthChecker(base_dir)
    is_healthy, report = checker.check_all()

    for issue in report['issues']:
        logger.error(issue)
    for warning in report['warnings']:
        logger.warning(warning)

    return is_healthy, report


__all__ = ['HealthChecker', 'display_health_status', 'ensure_app_health']
