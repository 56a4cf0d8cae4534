"""Module-level container that hosts controls and declares their resource file."""

from PySide6.QtWidgets import QFrame, QVBoxLayout, QWidget
from PySide6.QtCore import QObject

from dashboard.gui.local_resource_source import LocalResourceSource
from dashboard.gui.module_configuration import ModuleConfiguration


class ModuleWidget(QFrame, LocalResourceSource):
    """
    Top-level content unit of the dashboard.

    Localized text lookups from nested controls stop at the nearest module, which
    always supplies a resource file.
    """

    def __init__(
        self,
        local_resource_file: str,
        configuration: ModuleConfiguration | None = None,
        parent: QWidget | None = None
    ) -> None:
        """
        Initialize the module widget.

        Args:
            local_resource_file: Resource file for text of controls inside this module
            configuration: Module configuration, or None for a default one
            parent: Optional parent widget
        """
        super().__init__(parent)
        self._local_resource_file = local_resource_file
        self._configuration = configuration if configuration is not None else ModuleConfiguration()

        self._layout = QVBoxLayout(self)
        self._layout.setContentsMargins(8, 8, 8, 8)
        self._layout.setSpacing(6)
        self.setLayout(self._layout)

    def local_resource_file(self) -> str:
        """Get the resource file for controls inside this module."""
        return self._local_resource_file

    def set_local_resource_file(self, resource_file: str) -> None:
        """Set the resource file for controls inside this module."""
        self._local_resource_file = resource_file

    def module_configuration(self) -> ModuleConfiguration:
        """Get the module configuration."""
        return self._configuration

    def add_widget(self, widget: QWidget) -> None:
        """Add a widget to the module's content area."""
        self._layout.addWidget(widget)


def parent_module(control: QObject) -> ModuleWidget | None:
    """
    Find the nearest module enclosing a control.

    Args:
        control: Control to start from (not itself considered)

    Returns:
        The nearest enclosing module, or None if the control is not inside one
    """
    parent = control.parent()
    while parent is not None:
        if isinstance(parent, ModuleWidget):
            return parent

        parent = parent.parent()

    return None
