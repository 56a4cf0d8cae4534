"""Resolve resource keys to localized text using the control hierarchy."""

from typing import Callable

from PySide6.QtCore import QObject

from dashboard.gui.local_resource_source import LocalResourceSource
from dashboard.gui.module_widget import ModuleWidget
from dashboard.language.language_manager import LanguageManager
from dashboard.localization.localization_error import ResolutionExhaustedError


LookupFunction = Callable[[str, str], str]


def get_localized_text(key: str, control: QObject, lookup: LookupFunction | None = None) -> str:
    """
    Get the localized text for a resource key.

    Climbs from the control's parent towards the root.  The first module reached, or
    the first container declaring a local resource file, supplies the resource file
    the key is looked up in.  A module is checked before the generic capability at
    every level.

    Args:
        key: The resource key
        control: The control the search starts from (its own resource file is not used)
        lookup: Function taking (key, resource_file) and returning the text; defaults
            to the language manager's lookup

    Returns:
        Localized text for the key, as returned by the lookup

    Raises:
        ResolutionExhaustedError: If the root is reached without finding a resource file
    """
    if lookup is None:
        lookup = LanguageManager().get_string

    return _resolve(key, control, control, lookup)


def _resolve(key: str, control: QObject, origin: QObject, lookup: LookupFunction) -> str:
    parent = control.parent()
    if parent is None:
        raise ResolutionExhaustedError(key, origin.objectName())

    # We are at the module level so the module's resource file is authoritative
    if isinstance(parent, ModuleWidget):
        return lookup(key, parent.local_resource_file())

    if isinstance(parent, LocalResourceSource):
        resource_file = parent.local_resource_file()
        if isinstance(resource_file, str):
            return lookup(key, resource_file)

    # Drill up to the next level
    return _resolve(key, parent, origin, lookup)
