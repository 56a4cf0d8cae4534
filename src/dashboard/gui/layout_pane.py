"""Nesting regions used to lay out controls inside a module."""

from PySide6.QtWidgets import QFrame, QVBoxLayout, QWidget

from dashboard.gui.local_resource_source import LocalResourceSource


class LayoutPane(QFrame):
    """Plain layout region.  Declares no resource file of its own."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._layout = QVBoxLayout(self)
        self._layout.setContentsMargins(0, 0, 0, 0)
        self._layout.setSpacing(4)
        self.setLayout(self._layout)

    def add_widget(self, widget: QWidget) -> None:
        """Add a widget to this pane."""
        self._layout.addWidget(widget)


class LocalizedPane(LayoutPane, LocalResourceSource):
    """Layout region that can declare the resource file for controls inside it."""

    def __init__(self, local_resource_file: str | None = None, parent: QWidget | None = None) -> None:
        """
        Initialize the pane.

        Args:
            local_resource_file: Resource file for controls inside this pane, or None to
                defer to the pane's ancestors
            parent: Optional parent widget
        """
        super().__init__(parent)
        self._local_resource_file = local_resource_file

    def local_resource_file(self) -> str | None:
        return self._local_resource_file

    def set_local_resource_file(self, resource_file: str | None) -> None:
        """Set the resource file for controls inside this pane."""
        self._local_resource_file = resource_file
