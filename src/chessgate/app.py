"""Application entry point and Qt bootstrap."""

from __future__ import annotations

import logging
import sys

from chessgate.ui.settings import AppSettings

_LOGGER = logging.getLogger(__name__)


def _configure_logging(settings: AppSettings) -> None:
    level = logging.getLevelName(settings.log_level.upper())
    if not isinstance(level, int):
        _LOGGER.warning("Unknown log level %r, using WARNING", settings.log_level)
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def run_application(
    argv: list[str] | None = None, settings: AppSettings | None = None
) -> int:
    """Create and run the main Qt application."""
    from PyQt6.QtWidgets import QApplication

    from chessgate.ui.main_window import MainWindow

    settings = settings if settings is not None else AppSettings()
    _configure_logging(settings)

    app = QApplication(sys.argv if argv is None else argv)
    app.setApplicationName("chessgate")
    app.setStyle("Fusion")

    window = MainWindow(settings)
    window.show()

    return app.exec()


def main() -> None:
    """Launch the chessgate application."""
    sys.exit(run_application())


if __name__ == "__main__":
    main()
