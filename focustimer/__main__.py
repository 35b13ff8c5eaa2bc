"""Allow running the focus timer as a module: python -m focustimer."""

import logging
import sys

from PyQt6.QtWidgets import QApplication

from .app import FocusTimerApp
from .settings import Settings


def setup_logging(level: str = "INFO") -> logging.Logger:
    """Configure logging for the application."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    return logging.getLogger("focustimer")


def main() -> None:
    settings = Settings()
    logger = setup_logging(settings.log_level)

    app = QApplication(sys.argv)
    app.setApplicationName("Focus Timer")
    app.setOrganizationName("FocusTimer")

    try:
        focus_timer = FocusTimerApp(settings)
    except ValueError as error:
        logger.error("Configuration error: %s", error)
        sys.exit(2)

    focus_timer.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
