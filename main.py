import logging
import sys
from PySide6.QtWidgets import QApplication

from app.logging_config import setup_logging
from app.app_window import AppWindow

logger = logging.getLogger(__name__)


def main():
    setup_logging()
    app = QApplication(sys.argv)
    app.setApplicationName("PIC16 Circuit Simulator")
    window = AppWindow()
    window.show()
    logger.info("Editor started")
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
