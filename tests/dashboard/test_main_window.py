"""Smoke tests for the main window built from packaged resources."""

from PySide6.QtWidgets import QWidget

from dashboard.gui.main_window import MainWindow
from dashboard.gui.module_message import ModuleMessage
from dashboard.gui.module_message_type import ModuleMessageType
from dashboard.language.language_code import LanguageCode


def _messages_by_type(window):
    return {
        child.message_type(): child for child in window.findChildren(QWidget) if isinstance(child, ModuleMessage)
    }


class TestMainWindow:
    """Test the demo module layout."""

    def test_messages_resolved(self, language_manager):
        """Test that every message gets the text from its nearest resource file."""
        window = MainWindow()
        messages = _messages_by_type(window)

        assert messages[ModuleMessageType.SUCCESS].text() == "Your changes have been saved."
        assert messages[ModuleMessageType.WARNING].text() == "You are close to your storage quota."
        assert messages[ModuleMessageType.ERROR].text() == "Disk full: changes were not saved."
        assert messages[ModuleMessageType.INFORMATION].text() == "Heads up: maintenance tonight at midnight."
        assert messages[ModuleMessageType.NONE].isHidden()

    def test_language_switch(self, language_manager):
        """Test that messages follow a language change."""
        window = MainWindow()

        language_manager.set_language(LanguageCode.FR)
        messages = _messages_by_type(window)

        assert messages[ModuleMessageType.SUCCESS].text() == "Vos modifications ont été enregistrées."
        assert messages[ModuleMessageType.INFORMATION].text() == "Attention : maintenance ce soir à minuit."
        assert messages[ModuleMessageType.ERROR].text() == "Disk full: changes were not saved."
