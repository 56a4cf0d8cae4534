"""Style manager for handling application-wide style and zoom settings.

Implements a singleton pattern to maintain consistent styling across components.
Provides signals for style changes and utilities for scaled size calculations.
"""

from enum import Enum, auto
from typing import Dict

from PySide6.QtCore import QObject, Signal, QOperatingSystemVersion
from PySide6.QtGui import QFontDatabase

from dashboard.gui.color_role import ColorRole


class ColorMode(Enum):
    """Enumeration for color theme modes."""
    LIGHT = auto()
    DARK = auto()


class StyleManager(QObject):
    """
    Singleton manager for application-wide style settings.

    Handles zoom factor and color mode management across the application.
    Emits signals when either changes to notify dependent components.

    Attributes:
        style_changed (Signal): Emitted when style changes
        _instance (StyleManager): Singleton instance
        _zoom_factor (float): Current zoom scaling factor
        _initialized (bool): Tracks initialization state of QObject base
    """

    style_changed = Signal()
    _instance = None

    def __new__(cls) -> 'StyleManager':
        """Create or return singleton instance."""
        if cls._instance is None:
            cls._instance = super(StyleManager, cls).__new__(cls)

        return cls._instance

    def __init__(self) -> None:
        """Initialize QObject base class if not already done."""
        if not hasattr(self, '_initialized'):
            super().__init__()
            self._zoom_factor = 1.0
            self._base_font_size = self._determine_base_font_size()
            self._initialized = True
            self._color_mode = ColorMode.DARK  # Default to dark mode
            self._colors: Dict[ColorRole, Dict[ColorMode, str]] = self._initialize_colors()

    def _initialize_colors(self) -> Dict[ColorRole, Dict[ColorMode, str]]:
        """Initialize the application colours for both light and dark modes."""
        return {
            # Background colours
            ColorRole.BACKGROUND_PRIMARY: {
                ColorMode.DARK: "#060606",
                ColorMode.LIGHT: "#fcfcfc"
            },
            ColorRole.BACKGROUND_SECONDARY: {
                ColorMode.DARK: "#141414",
                ColorMode.LIGHT: "#ececec"
            },

            # Text colours
            ColorRole.TEXT_PRIMARY: {
                ColorMode.DARK: "#d8d8d8",
                ColorMode.LIGHT: "#202020"
            },
            ColorRole.TEXT_HEADING: {
                ColorMode.DARK: "#ffe0a0",
                ColorMode.LIGHT: "#204080"
            },

            # Module colours
            ColorRole.MODULE_BORDER: {
                ColorMode.DARK: "#303030",
                ColorMode.LIGHT: "#c0c0c0"
            },

            # Message colours
            ColorRole.MESSAGE_ERROR: {
                ColorMode.DARK: "#ff6060",
                ColorMode.LIGHT: "#c03030"
            },
            ColorRole.MESSAGE_ERROR_BACKGROUND: {
                ColorMode.DARK: "#301010",
                ColorMode.LIGHT: "#fce0e0"
            },
            ColorRole.MESSAGE_WARNING: {
                ColorMode.DARK: "#f0c040",
                ColorMode.LIGHT: "#c0a020"
            },
            ColorRole.MESSAGE_WARNING_BACKGROUND: {
                ColorMode.DARK: "#302810",
                ColorMode.LIGHT: "#fcf4d8"
            },
            ColorRole.MESSAGE_SUCCESS: {
                ColorMode.DARK: "#60d080",
                ColorMode.LIGHT: "#208040"
            },
            ColorRole.MESSAGE_SUCCESS_BACKGROUND: {
                ColorMode.DARK: "#102818",
                ColorMode.LIGHT: "#e0f4e4"
            },
            ColorRole.MESSAGE_INFORMATION: {
                ColorMode.DARK: "#80b0f0",
                ColorMode.LIGHT: "#0060c0"
            },
            ColorRole.MESSAGE_INFORMATION_BACKGROUND: {
                ColorMode.DARK: "#101c30",
                ColorMode.LIGHT: "#e0ecfc"
            }
        }

    def get_color_str(self, role: ColorRole) -> str:
        """
        Get a color string for a specific role.

        Args:
            role: The ColorRole to look up

        Returns:
            str: The color string (hex format) for the specified role

        Raises:
            KeyError: If no color is defined for the role
        """
        return self._colors[role][self._color_mode]

    def _determine_base_font_size(self) -> float:
        """
        Determine the default system font size based on the operating system.

        Returns:
            int: Base font size in points.
        """
        os_type = QOperatingSystemVersion.current()

        system_font = QFontDatabase.systemFont(QFontDatabase.SystemFont.GeneralFont)
        system_size = system_font.pointSizeF()

        if system_size > 0:
            return system_size

        if os_type.type() == QOperatingSystemVersion.OSType.MacOS:  # type: ignore
            # macOS typically uses 13pt as default
            return 13

        if os_type.type() == QOperatingSystemVersion.OSType.Windows:  # type: ignore
            # Windows typically uses 9pt as default
            return 9

        # Linux typically uses 10pt as default
        return 10

    def base_font_size(self) -> float:
        """Get the base font size for the current system."""
        return self._base_font_size

    def color_mode(self) -> ColorMode:
        """Get the current color mode."""
        return self._color_mode

    def set_color_mode(self, mode: ColorMode) -> None:
        """
        Set the color mode and update application styles.

        Args:
            mode: The ColorMode to switch to
        """
        if mode != self._color_mode:
            self._color_mode = mode
            self.style_changed.emit()

    def zoom_factor(self) -> float:
        """Get the current zoom factor."""
        return self._zoom_factor

    def set_zoom(self, factor: float) -> None:
        """
        Set new zoom factor and update application styles.

        Args:
            factor: New zoom factor to apply (clamped between 0.5 and 2.0)
        """
        new_factor = max(0.5, min(2.0, factor))
        if new_factor != self._zoom_factor:
            self._zoom_factor = new_factor
            self.style_changed.emit()

    def message_spacing(self) -> float:
        """Get the padding used inside module messages."""
        return self.base_font_size() * self._zoom_factor * 0.6
