"""Application entry point.

This module provides the main() function that initializes the Qt application
and displays the ViewerWindow.

Usage:
    spectrogram-viewer [--log-level LEVEL]

    # Or as a module:
    python -m SpectrogramViewer.app

    # Or from Python:
    from SpectrogramViewer import main
    main()
"""

import argparse
import logging
import sys

from PySide6.QtWidgets import QApplication

from .ui.viewer import ViewerWindow

logger = logging.getLogger(__name__)


def parse_args(argv):
    """Split viewer options from the arguments meant for Qt.

    Returns:
        (options, remaining) where ``remaining`` starts with the program name.
    """
    parser = argparse.ArgumentParser(prog="spectrogram-viewer", description="Drag-to-zoom image viewer")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        type=str.upper,
        help="Logging verbosity (default: WARNING)",
    )
    options, remaining = parser.parse_known_args(argv[1:])
    return options, [argv[0]] + remaining


def main(argv=None):
    """Run the viewer application.

    Args:
        argv: Command-line arguments (defaults to sys.argv)

    Returns:
        Exit code from QApplication.exec()
    """
    if argv is None:
        argv = sys.argv
    options, qt_argv = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, options.log_level),
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    app = QApplication(qt_argv)
    w = ViewerWindow()
    w.show()
    logger.info("Viewer started")
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
