"""Capability for containers that declare where their localized strings live."""


class LocalResourceSource:
    """
    Mixin for widgets that declare a local resource file.

    Controls nested inside a widget with this capability resolve their resource keys
    against the widget's resource file, unless a nearer ancestor declares one.
    """

    def local_resource_file(self) -> str | None:
        """
        Get the resource file that nested controls should use.

        Returns:
            Resource file reference, or None if this widget does not currently declare one
        """
        raise NotImplementedError("Subclasses must implement local_resource_file")
