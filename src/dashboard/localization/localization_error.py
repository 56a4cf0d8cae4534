"""Custom exceptions for localized text lookups."""


class LocalizationError(Exception):
    """Base exception for localization operations."""


class ResolutionExhaustedError(LocalizationError):
    """Raised when no ancestor of a control declares a local resource file."""

    def __init__(self, key: str, control_name: str = ""):
        """
        Initialize the exception.

        Args:
            key: Resource key that could not be resolved
            control_name: Object name of the control the search started from
        """
        start = f" from '{control_name}'" if control_name else ""
        super().__init__(f"No local resource file found for key '{key}'{start}")
        self.key = key
        self.control_name = control_name


class ResourceCatalogError(LocalizationError):
    """Raised when a resource file exists but cannot be read or parsed."""

    def __init__(self, message: str, resource_file: str):
        """
        Initialize the exception.

        Args:
            message: Error message
            resource_file: Path of the offending resource file
        """
        super().__init__(message)
        self.resource_file = resource_file
