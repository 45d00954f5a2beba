"""Application entry point."""

from __future__ import annotations

import logging
import sys


def main() -> None:
    """Launch the Fusion Chess application."""
    from PyQt6.QtWidgets import QApplication

    from fusionchess.ui.main_window import MainWindow

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = QApplication(sys.argv)
    app.setApplicationName("Fusion Chess")
    app.setStyle("Fusion")

    window = MainWindow()
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
