"""Optional online dictionary that widens the set of accepted guesses."""

from __future__ import annotations

import logging
import threading
import unicodedata
from typing import Callable, List, Optional

import requests

from termo.core.errors import DictionaryFetchFailed
from termo.core.words import ValidationVocabulary

logger = logging.getLogger(__name__)


def strip_diacritics(text: str) -> str:
    decomposed = unicodedata.normalize("NFD", text)
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


def normalize_words(text: str, length: int) -> List[str]:
    """Turn a newline-delimited word list into upper-case A-Z words of ``length``."""
    words = []
    for line in text.split("\n"):
        word = strip_diacritics(line.strip()).upper()
        if len(word) == length and word.isascii() and word.isalpha():
            words.append(word)
    return words


class DictionaryService:
    """Downloads the remote word list and merges it into a vocabulary.

    Failures are logged and leave the fallback vocabulary untouched; nothing
    is retried.
    """

    def __init__(self, url: str, length: int, timeout: float = 10.0) -> None:
        self._url = url
        self._length = length
        self._timeout = timeout

    @property
    def url(self) -> str:
        return self._url

    def fetch(self) -> List[str]:
        """Download and normalise the word list. Raises DictionaryFetchFailed."""
        try:
            response = requests.get(self._url, timeout=self._timeout)
            response.raise_for_status()
            text = response.text
        except (requests.RequestException, UnicodeDecodeError) as e:
            raise DictionaryFetchFailed(f"Could not fetch {self._url}: {e}") from e
        return normalize_words(text, self._length)

    def augment(self, vocabulary: ValidationVocabulary) -> int:
        """Fetch and merge into ``vocabulary``; return the number of new words."""
        try:
            words = self.fetch()
        except DictionaryFetchFailed as e:
            logger.warning("Online dictionary unavailable, using local list: %s", e)
            return 0
        added = vocabulary.merge(words)
        logger.info("Merged online dictionary: %d new words (%d total)", added, len(vocabulary))
        return added

    def augment_in_background(
        self,
        vocabulary: ValidationVocabulary,
        on_done: Optional[Callable[[int], None]] = None,
    ) -> threading.Thread:
        """Run ``augment`` on a daemon thread; ``on_done`` gets the added count.

        ``on_done`` runs on the worker thread.
        """

        def _run() -> None:
            added = self.augment(vocabulary)
            if on_done is not None:
                on_done(added)

        thread = threading.Thread(target=_run, name="termo-dictionary", daemon=True)
        thread.start()
        return thread
