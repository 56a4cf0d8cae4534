"""Main window showing a status module with nested, localized messages."""

import logging
from typing import List

from PySide6.QtWidgets import QComboBox, QHBoxLayout, QLabel, QMainWindow, QVBoxLayout, QWidget

from dashboard import format_version
from dashboard.gui.color_role import ColorRole
from dashboard.gui.layout_pane import LayoutPane, LocalizedPane
from dashboard.gui.module_configuration import ModuleConfiguration
from dashboard.gui.module_message import ModuleMessage
from dashboard.gui.module_message_type import ModuleMessageType
from dashboard.gui.module_widget import ModuleWidget
from dashboard.gui.style_manager import StyleManager
from dashboard.language.language_code import LanguageCode
from dashboard.language.language_manager import LanguageManager


def create_language_selector(parent: QWidget) -> tuple[QHBoxLayout, QComboBox]:
    """
    Create language selection UI elements.

    Args:
        parent: Parent widget for the selector

    Returns:
        Tuple of (layout containing selector, combo box for language selection)
    """
    language_manager = LanguageManager()

    layout = QHBoxLayout()
    combo = QComboBox(parent)

    language_names = {
        LanguageCode.EN: "English",
        LanguageCode.FR: "Français",
        LanguageCode.AR: "العربية"
    }

    for code in LanguageCode:
        combo.addItem(language_names[code], code)

    current_index = combo.findData(language_manager.current_language)
    combo.setCurrentIndex(current_index)

    layout.addStretch()
    layout.addWidget(combo)

    return layout, combo


class MainWindow(QMainWindow):
    """Main window for the dashboard."""

    def __init__(self) -> None:
        super().__init__()
        self._logger = logging.getLogger("MainWindow")
        self._language_manager = LanguageManager()
        self._style_manager = StyleManager()

        self.setWindowTitle(f"Dashboard v{format_version()}")
        self.resize(640, 480)

        central = QWidget(self)
        layout = QVBoxLayout(central)
        self.setCentralWidget(central)

        selector_layout, self._language_combo = create_language_selector(central)
        self._language_combo.currentIndexChanged.connect(self._handle_language_selected)
        layout.addLayout(selector_layout)

        self._module = ModuleWidget(
            "~/App_LocalResources/StatusModule.json",
            ModuleConfiguration(module_id=1, title="Status"),
            central
        )
        layout.addWidget(self._module)
        layout.addStretch()

        self._title_label = QLabel(self._module)
        self._module.add_widget(self._title_label)

        self._messages: List[ModuleMessage] = []

        # Messages directly inside a plain pane resolve against the module
        status_pane = LayoutPane(self._module)
        self._module.add_widget(status_pane)
        status_pane.add_widget(self._add_message(status_pane, ModuleMessageType.SUCCESS, "SaveSucceeded"))
        status_pane.add_widget(self._add_message(status_pane, ModuleMessageType.WARNING, "QuotaWarning"))

        error_message = self._add_message(status_pane, ModuleMessageType.ERROR, "SaveFailed")
        error_message.set_text("Disk full: changes were not saved.")
        status_pane.add_widget(error_message)

        # Messages inside a localized pane resolve against the pane instead
        notice_pane = LocalizedPane("~/App_LocalResources/NoticePane.json", self._module)
        self._module.add_widget(notice_pane)
        inner_pane = LayoutPane(notice_pane)
        notice_pane.add_widget(inner_pane)
        inner_pane.add_widget(self._add_message(inner_pane, ModuleMessageType.INFORMATION, "MaintenanceNotice"))

        hidden_message = self._add_message(inner_pane, ModuleMessageType.NONE, "MaintenanceNotice")
        inner_pane.add_widget(hidden_message)

        for message in self._messages:
            message.load()

        self._language_manager.language_changed.connect(self._handle_language_changed)
        self._style_manager.style_changed.connect(self._handle_style_changed)
        self._handle_language_changed()
        self._handle_style_changed()

    def _add_message(self, parent: QWidget, message_type: ModuleMessageType, resource_key: str) -> ModuleMessage:
        """Create a message in a pane and register it for loading."""
        message = ModuleMessage(parent, message_type, resource_key)
        message.setObjectName(f"message{resource_key}")
        self._messages.append(message)
        return message

    def _handle_language_selected(self, index: int) -> None:
        """Switch the application language to the selected entry."""
        code = self._language_combo.itemData(index)
        self._logger.info("Language selected: %s", code)
        self._language_manager.set_language(code)

    def _handle_language_changed(self) -> None:
        """Update module title when language changes."""
        self._title_label.setText(
            self._language_manager.get_string("Title", self._module.local_resource_file())
        )

    def _handle_style_changed(self) -> None:
        """Update module and window colours when the style changes."""
        self._module.setStyleSheet(f"""
            ModuleWidget {{
                background-color: {self._style_manager.get_color_str(ColorRole.BACKGROUND_SECONDARY)};
                border: 1px solid {self._style_manager.get_color_str(ColorRole.MODULE_BORDER)};
            }}
        """)
        self._title_label.setStyleSheet(
            f"color: {self._style_manager.get_color_str(ColorRole.TEXT_HEADING)}; font-weight: bold;"
        )
        self.setStyleSheet(
            f"QMainWindow {{ background-color: {self._style_manager.get_color_str(ColorRole.BACKGROUND_PRIMARY)}; }}"
        )
