"""Dashboard settings module for storing application-wide settings."""

from dataclasses import dataclass
import json
import os

from dashboard.language.language_code import LanguageCode
from dashboard.gui.style_manager import ColorMode


def default_settings_path() -> str:
    """Get the path of the user's settings file."""
    return os.path.expanduser("~/.dashboard/settings.json")


@dataclass
class DashboardSettings:
    """
    User-specific application settings.
    """
    language: LanguageCode = LanguageCode.EN
    theme: ColorMode = ColorMode.DARK  # Default to dark mode
    resource_root: str | None = None  # None means use the packaged resources

    @classmethod
    def create_default(cls) -> "DashboardSettings":
        """Create a new DashboardSettings object with default values."""
        return cls(
            language=LanguageCode.EN,
            theme=ColorMode.DARK,
            resource_root=None
        )

    @classmethod
    def load(cls, path: str) -> "DashboardSettings":
        """
        Load settings from file.

        Args:
            path: Path to the settings file

        Returns:
            DashboardSettings object with loaded values

        Raises:
            json.JSONDecodeError: If file contains invalid JSON
        """
        # Start with default settings
        settings = cls.create_default()

        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)

            language_code = data.get("language", "EN")
            try:
                settings.language = LanguageCode[language_code]

            except KeyError:
                settings.language = LanguageCode.EN

            theme_str = data.get("theme", "DARK")
            try:
                settings.theme = ColorMode[theme_str]

            except KeyError:
                settings.theme = ColorMode.DARK

            settings.resource_root = data.get("resourceRoot", None)

        return settings

    def save(self, path: str) -> None:
        """
        Save settings to file.

        Args:
            path: Path to save settings file

        Raises:
            OSError: If there's an error writing the file
        """
        os.makedirs(os.path.dirname(path), exist_ok=True)
        data = {
            "language": self.language.name,
            "theme": self.theme.name,
            "resourceRoot": self.resource_root
        }

        with open(path, 'w', encoding='utf-8') as f:
            json.dump(data, f, indent=2)
