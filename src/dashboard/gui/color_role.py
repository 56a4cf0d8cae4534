"""Handle application styling"""

from enum import Enum, auto


class ColorRole(Enum):
    """Enumeration of color roles in the application."""
    # Background colours
    BACKGROUND_PRIMARY = auto()         # Main window background
    BACKGROUND_SECONDARY = auto()       # Module background

    # Text colours
    TEXT_PRIMARY = auto()               # Primary text color
    TEXT_HEADING = auto()               # Module title text color

    # Module colours
    MODULE_BORDER = auto()              # Module border

    # Message colours
    MESSAGE_ERROR = auto()              # Error message text
    MESSAGE_ERROR_BACKGROUND = auto()   # Error message background
    MESSAGE_WARNING = auto()            # Warning message text
    MESSAGE_WARNING_BACKGROUND = auto() # Warning message background
    MESSAGE_SUCCESS = auto()            # Success message text
    MESSAGE_SUCCESS_BACKGROUND = auto() # Success message background
    MESSAGE_INFORMATION = auto()        # Information message text
    MESSAGE_INFORMATION_BACKGROUND = auto()  # Information message background
