"""Language management singleton."""

import logging
import os

from PySide6.QtCore import QObject, Signal

from dashboard.language.language_code import LanguageCode
from dashboard.localization.resource_catalog import (
    culture_resource_path, load_resource_catalog, resolve_resource_path
)


def default_resource_root() -> str:
    """Get the directory holding the resource files shipped with the package."""
    return os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "resources")


class LanguageManager(QObject):
    """Singleton manager for application-wide language settings and localized strings."""

    language_changed = Signal()
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(LanguageManager, cls).__new__(cls)
        return cls._instance

    def __init__(self):
        if not hasattr(self, '_initialized'):
            super().__init__()
            self._logger = logging.getLogger("LanguageManager")
            self._current_language = LanguageCode.EN
            self._resource_root = default_resource_root()
            self._initialized = True

    @property
    def current_language(self) -> LanguageCode:
        """Get current language code."""
        return self._current_language

    def set_language(self, code: LanguageCode) -> None:
        """Set new language and emit change signal."""
        if code != self._current_language:
            self._current_language = code
            self.language_changed.emit()

    @property
    def left_to_right(self) -> bool:
        """Are we using a left to right language?"""
        return self._current_language is not LanguageCode.AR

    @property
    def resource_root(self) -> str:
        """Get the directory application-relative resource files are resolved against."""
        return self._resource_root

    def set_resource_root(self, path: str) -> None:
        """Set the directory application-relative resource files are resolved against."""
        self._resource_root = path

    def get_string(self, key: str, resource_file: str) -> str:
        """
        Look up the localized text for a key in a resource file.

        The culture-specific file for the current language is searched first, then the
        neutral file.  Catalogs are read on every call.

        Args:
            key: Resource key to look up
            resource_file: Resource file reference declared by a container

        Returns:
            The localized text, or the key itself if no catalog defines it

        Raises:
            ResourceCatalogError: If a resource file exists but cannot be loaded
        """
        path = resolve_resource_path(resource_file, self._resource_root)

        search_paths = []
        if self._current_language is not LanguageCode.EN:
            search_paths.append(culture_resource_path(path, self._current_language))

        search_paths.append(path)

        for search_path in search_paths:
            catalog = load_resource_catalog(search_path)
            if key in catalog:
                return catalog[key]

        self._logger.debug("No resource found for key '%s' in '%s'", key, resource_file)
        return key
