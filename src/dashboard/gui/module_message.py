"""Widget for displaying a status message within a module."""

import logging
from typing import Dict, Tuple

from PySide6.QtWidgets import QFrame, QHBoxLayout, QLabel, QWidget
from PySide6.QtCore import Qt

from dashboard.gui.color_role import ColorRole
from dashboard.gui.module_configuration import ModuleConfiguration
from dashboard.gui.module_message_type import ModuleMessageType
from dashboard.gui.module_widget import parent_module
from dashboard.gui.style_manager import StyleManager
from dashboard.gui.visibility_latch import VisibilityLatch
from dashboard.language.language_manager import LanguageManager
from dashboard.localization.localization_error import LocalizationError
from dashboard.localization.localized_text import get_localized_text


class ModuleMessage(QFrame):
    """
    Status message displayed within a module.

    The text is either set directly or derived from a resource key when the message is
    loaded.  Keys are looked up in the resource file of the nearest enclosing container
    that declares one.  Once the message type is set to NONE the message stays hidden
    for the rest of its life.
    """

    _MESSAGE_COLORS: Dict[ModuleMessageType, Tuple[ColorRole, ColorRole]] = {
        ModuleMessageType.ERROR: (ColorRole.MESSAGE_ERROR, ColorRole.MESSAGE_ERROR_BACKGROUND),
        ModuleMessageType.WARNING: (ColorRole.MESSAGE_WARNING, ColorRole.MESSAGE_WARNING_BACKGROUND),
        ModuleMessageType.SUCCESS: (ColorRole.MESSAGE_SUCCESS, ColorRole.MESSAGE_SUCCESS_BACKGROUND),
        ModuleMessageType.INFORMATION: (ColorRole.MESSAGE_INFORMATION, ColorRole.MESSAGE_INFORMATION_BACKGROUND),
    }

    def __init__(
        self,
        parent: QWidget | None = None,
        message_type: ModuleMessageType = ModuleMessageType.SUCCESS,
        resource_key: str = ""
    ) -> None:
        """
        Initialize the module message.

        Args:
            parent: Optional parent widget
            message_type: Type of the message
            resource_key: Resource key for the message text, or "" if text will be set directly
        """
        super().__init__(parent)
        self._latch = VisibilityLatch()

        self._logger = logging.getLogger("ModuleMessage")

        self._language_manager = LanguageManager()
        self._language_manager.language_changed.connect(self._handle_language_changed)

        self._style_manager = StyleManager()

        self._resource_key = resource_key
        self._css_class = ""
        self._message_type = ModuleMessageType.SUCCESS
        self._explicit_text = False
        self._text_from_key = False
        self._module_configuration: ModuleConfiguration | None = None

        self._layout = QHBoxLayout(self)
        self.setLayout(self._layout)

        self._message_label = QLabel(self)
        self._message_label.setWordWrap(True)
        self._layout.addWidget(self._message_label)

        self.set_message_type(message_type)

        self._style_manager.style_changed.connect(self._handle_style_changed)
        self._handle_style_changed()
        self._handle_language_changed()

    def resource_key(self) -> str:
        """Get the resource key used to get the message text."""
        return self._resource_key

    def set_resource_key(self, key: str) -> None:
        """Set the resource key used to get the message text."""
        self._resource_key = key

    def text(self) -> str:
        """Get the text displayed as the main content of this message."""
        return self._message_label.text()

    def set_text(self, text: str) -> None:
        """
        Set the text displayed as the main content of this message.

        Text set here is never replaced by text resolved from the resource key.

        Args:
            text: Text to display
        """
        self._explicit_text = True
        self._text_from_key = False
        self._message_label.setText(text)

    def css_class(self) -> str:
        """Get the CSS class hint for this message."""
        return self._css_class

    def set_css_class(self, css_class: str) -> None:
        """Set the CSS class hint for this message."""
        self._css_class = css_class
        self.setProperty("cssClass", css_class)

    def message_type(self) -> ModuleMessageType:
        """Get the type of the message."""
        return self._message_type

    def set_message_type(self, message_type: ModuleMessageType) -> None:
        """
        Set the type of the message.

        Setting NONE hides the message permanently.

        Args:
            message_type: New message type
        """
        self._message_type = message_type
        if message_type is ModuleMessageType.NONE:
            self._latch.suppress()
            super().setVisible(False)

        self.setProperty("messageStyle", self.message_style())
        self._handle_style_changed()

    def message_style(self) -> str:
        """Get the message style, used to pick the presentation class for the message."""
        return str(self._message_type)

    def is_suppressed(self) -> bool:
        """Check if the message has been permanently hidden."""
        return self._latch.is_suppressed()

    def setVisible(self, visible: bool) -> None:  # type: ignore[override]
        """
        Set whether the message is shown.

        Requests to show a permanently hidden message are ignored.

        Args:
            visible: True to show the message
        """
        if not self._latch.allows(visible):
            self._logger.debug("Ignoring request to show message with type None")
            return

        super().setVisible(visible)

    def module_configuration(self) -> ModuleConfiguration | None:
        """Get the configuration of the module hosting this message, once loaded."""
        return self._module_configuration

    def load(self) -> None:
        """
        Prepare the message for display.

        Picks up the configuration of the hosting module and, if a resource key has been
        set and no text was set directly, resolves the key into the message text.

        Raises:
            ResolutionExhaustedError: If no ancestor declares a resource file
            LocalizationError: If the resource file cannot be loaded
        """
        module = parent_module(self)
        if module is not None:
            self._module_configuration = module.module_configuration()

        # Don't overwrite the value if only the text has been specified
        if not self._resource_key or self._explicit_text:
            return

        self._message_label.setText(get_localized_text(self._resource_key, self))
        self._text_from_key = True

    def _handle_language_changed(self) -> None:
        """Update layout direction and re-resolve text that came from the resource key."""
        self.setLayoutDirection(
            Qt.LayoutDirection.LeftToRight if self._language_manager.left_to_right else Qt.LayoutDirection.RightToLeft
        )

        if not self._text_from_key:
            return

        try:
            self.load()

        except LocalizationError as e:
            self._logger.warning("Failed to relocalize message '%s': %s", self._resource_key, e)

    def _handle_style_changed(self) -> None:
        """Update the message colours and spacing."""
        text_role, background_role = self._MESSAGE_COLORS.get(
            self._message_type, (ColorRole.TEXT_PRIMARY, ColorRole.BACKGROUND_SECONDARY)
        )

        spacing = int(self._style_manager.message_spacing())
        self._layout.setContentsMargins(spacing, spacing, spacing, spacing)

        self.setStyleSheet(f"""
            QFrame {{
                background-color: {self._style_manager.get_color_str(background_role)};
                border: none;
                border-radius: 4px;
            }}
            QLabel {{
                color: {self._style_manager.get_color_str(text_role)};
                background-color: transparent;
            }}
        """)
