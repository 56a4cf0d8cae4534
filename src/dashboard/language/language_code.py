from enum import Enum, auto


class LanguageCode(Enum):
    """Supported language codes."""
    EN = auto()  # English
    FR = auto()  # French
    AR = auto()  # Arabic

    def culture_suffix(self) -> str:
        """Get the suffix used to name culture-specific resource files."""
        return self.name.lower()
