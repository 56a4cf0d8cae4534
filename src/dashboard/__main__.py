"""Main entry point for the Dashboard application."""

import asyncio
from datetime import datetime, timezone
import glob
import json
import logging
from logging.handlers import RotatingFileHandler
import os
import sys
from types import TracebackType

from qasync import QEventLoop, QApplication  # type: ignore[import-untyped]

from dashboard.gui.main_window import MainWindow
from dashboard.gui.style_manager import StyleManager
from dashboard.language.language_manager import LanguageManager
from dashboard.settings.dashboard_settings import DashboardSettings, default_settings_path


def setup_logging() -> None:
    """Configure application logging with timestamped files and rotation."""
    # Create logs directory in user's home .dashboard directory
    log_dir = os.path.expanduser("~/.dashboard/logs")
    os.makedirs(log_dir, exist_ok=True)

    # Generate timestamp for log filename
    timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%d-%H-%M-%S-%f")[:23]
    log_file = os.path.join(log_dir, f"{timestamp}.log")

    # Keep up to 50 log files, max 1MB each
    handler = RotatingFileHandler(
        log_file,
        maxBytes=1024*1024,  # 1MB
        backupCount=49,  # Keep 50 files total (current + 49 backups)
        encoding='utf-8'
    )

    logging.basicConfig(
        level=logging.DEBUG,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[handler]
    )

    cleanup_old_logs(log_dir, max_logs=50)


def cleanup_old_logs(log_dir: str, max_logs: int) -> None:
    """Remove oldest log files if we exceed maximum count."""
    log_files = glob.glob(os.path.join(log_dir, "*.log*"))
    log_files.sort(key=os.path.getctime)  # Sort by creation time

    while len(log_files) > max_logs:
        try:
            os.remove(log_files.pop(0))

        except OSError:
            pass  # Ignore errors removing old logs


def install_global_exception_handler() -> None:
    """Install a global exception handler for uncaught exceptions."""
    logger = logging.getLogger('GlobalExceptionHandler')

    def handle_exception(exc_type: type[BaseException], exc_value: BaseException, exc_traceback: TracebackType | None) -> None:
        """Handle uncaught exceptions and log them."""
        if issubclass(exc_type, KeyboardInterrupt):
            # Don't log keyboard interrupt
            sys.__excepthook__(exc_type, exc_value, exc_traceback)
            return

        logger.critical(
            "Uncaught exception",
            exc_info=(exc_type, exc_value, exc_traceback),
            stack_info=True
        )

    sys.excepthook = handle_exception


def load_settings() -> DashboardSettings:
    """Load the user's settings, falling back to defaults if there are none."""
    logger = logging.getLogger("Dashboard")
    path = default_settings_path()
    if not os.path.exists(path):
        return DashboardSettings.create_default()

    try:
        return DashboardSettings.load(path)

    except (OSError, json.JSONDecodeError) as e:
        logger.warning("Failed to load settings from %s: %s", path, e)
        return DashboardSettings.create_default()


def main() -> int:
    """Main function to run the application."""
    setup_logging()
    install_global_exception_handler()

    app = QApplication(sys.argv)

    settings = load_settings()
    language_manager = LanguageManager()
    if settings.resource_root is not None:
        language_manager.set_resource_root(settings.resource_root)

    language_manager.set_language(settings.language)
    StyleManager().set_color_mode(settings.theme)

    loop = QEventLoop(app)
    asyncio.set_event_loop(loop)

    window = MainWindow()
    window.show()

    try:
        with loop:
            loop.run_forever()

    except KeyboardInterrupt:
        return 0

    return 0


if __name__ == "__main__":
    sys.exit(main())
