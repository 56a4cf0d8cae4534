from enum import Enum


class ModuleMessageType(Enum):
    """The type of message being displayed by a module message."""
    NONE = "None"                   # Never displayed
    ERROR = "Error"                 # An error occurred while processing an operation
    WARNING = "Warning"             # A potential problem
    SUCCESS = "Success"             # An operation succeeded
    INFORMATION = "Information"     # Informational message

    def __str__(self) -> str:
        return self.value
