"""Application entry point and setup for the Termo word game."""

import logging
import random
import sys
from typing import Optional

from PySide6.QtGui import QFont, QGuiApplication
from PySide6.QtWidgets import QApplication

from termo.core.config import GameConfig, load_config
from termo.core.dictionary import DictionaryService
from termo.core.round import RoundController
from termo.core.words import ValidationVocabulary, WordPool, load_word_lists
from termo.ui.main_window import MainWindow


def configure_logging() -> None:
    """Configure application-wide logging with a standard format."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def build_controller(config: GameConfig, rng: Optional[random.Random] = None) -> RoundController:
    """Load the bundled word lists and start a game at level 0."""
    lists = load_word_lists()
    pool = WordPool(lists.solutions, config.word_length)
    vocabulary = ValidationVocabulary(lists.guesses + lists.solutions, config.word_length)
    logging.info(f"Loaded {len(pool)} solutions and {len(vocabulary)} accepted guesses")
    return RoundController(config, pool, vocabulary, rng=rng)


def run() -> None:
    """Initialize the application, start the dictionary download and show the window."""
    configure_logging()
    app = QApplication(sys.argv)
    app.setApplicationName("Termo")
    app.setApplicationDisplayName("Termo")

    app_font = QFont()
    app_font.setPointSize(11)
    QGuiApplication.setFont(app_font)

    config = load_config()
    controller = build_controller(config)
    window = MainWindow(controller)

    dictionary = DictionaryService(
        config.dictionary_url,
        config.word_length,
        timeout=config.dictionary_timeout,
    )
    dictionary.augment_in_background(controller.vocabulary, on_done=window.dictionary_loaded.emit)

    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    run()
