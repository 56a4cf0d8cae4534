"""Shared fixtures for dashboard tests."""

import json
import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PySide6.QtWidgets import QApplication

from dashboard.language.language_code import LanguageCode
from dashboard.language.language_manager import LanguageManager, default_resource_root


@pytest.fixture(scope="session")
def qapp():
    """Provide a single QApplication for all widget tests."""
    app = QApplication.instance()
    if app is None:
        app = QApplication([])

    yield app


@pytest.fixture
def language_manager(qapp):
    """Provide the language manager, restored to English and packaged resources afterwards."""
    manager = LanguageManager()
    yield manager
    manager.set_language(LanguageCode.EN)
    manager.set_resource_root(default_resource_root())


@pytest.fixture
def resource_root(tmp_path, language_manager):
    """Point the language manager at a temporary resource directory."""
    language_manager.set_resource_root(str(tmp_path))
    return tmp_path


@pytest.fixture
def write_catalog():
    """Provide a helper that writes a JSON resource catalog."""
    def _write(path, entries):
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(entries), encoding="utf-8")

    return _write


class LookupRecorder:
    """Lookup function that records calls and returns a recognisable value."""

    def __init__(self):
        self.calls = []

    def __call__(self, key, resource_file):
        self.calls.append((key, resource_file))
        return f"{resource_file}:{key}"


@pytest.fixture
def recorder():
    """Provide a recording lookup function."""
    return LookupRecorder()
