"""Dashboard - module hosting with localized status messages."""


__version__ = "0.3"


def format_version() -> str:
    """Format version number, showing patch number only if non-zero."""
    parts = __version__.split('.')
    if len(parts) == 3 and parts[2] == '0':
        return '.'.join(parts[:2])
    return __version__
