"""Solution selection and guess validation vocabularies."""

from __future__ import annotations

import logging
import random
import threading
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional

import yaml

from termo.core.config import DATA_DIR
from termo.core.errors import PoolExhausted

logger = logging.getLogger(__name__)

DEFAULT_WORDS_PATH = DATA_DIR / "words.yaml"
SEPARATORS = frozenset("-'")


def _has_separator(token: str) -> bool:
    return any(ch.isspace() or ch in SEPARATORS for ch in token)


def eligible_words(vocabulary: Iterable[str], length: int) -> List[str]:
    """Upper-cased, de-duplicated tokens of exactly ``length`` with no separators.

    First-occurrence order is kept so seeded selection is reproducible.
    """
    seen: set[str] = set()
    result: List[str] = []
    for token in vocabulary:
        word = token.strip().upper()
        if len(word) != length or _has_separator(word) or word in seen:
            continue
        seen.add(word)
        result.append(word)
    return result


def select_solutions(
    vocabulary: Iterable[str],
    num_words: int,
    length: int,
    rng: random.Random,
) -> List[str]:
    """Draw ``num_words`` distinct words of ``length`` uniformly at random.

    Raises PoolExhausted instead of looping when there are not enough
    distinct eligible words.
    """
    candidates = eligible_words(vocabulary, length)
    if num_words > len(candidates):
        raise PoolExhausted(num_words, len(candidates))
    return rng.sample(candidates, num_words)


class WordPool:
    """The candidate-solution vocabulary for one word length."""

    def __init__(self, words: Iterable[str], length: int) -> None:
        self._length = length
        self._words = eligible_words(words, length)

    @property
    def length(self) -> int:
        return self._length

    def __len__(self) -> int:
        return len(self._words)

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and word.upper() in self._words

    def select(self, num_words: int, rng: random.Random) -> List[str]:
        return select_solutions(self._words, num_words, self._length, rng)


class ValidationVocabulary:
    """Append-only set of accepted guesses.

    Merges build a new frozenset under a lock and swap the reference, so
    membership reads never need the lock and can interleave with a merge
    running on another thread.
    """

    def __init__(self, fallback: Iterable[str], length: int) -> None:
        self._length = length
        self._words: frozenset[str] = frozenset(eligible_words(fallback, length))
        self._lock = threading.Lock()
        self._augmented = False

    @property
    def length(self) -> int:
        return self._length

    @property
    def augmented(self) -> bool:
        """True once a remote word list has been merged in."""
        return self._augmented

    def __len__(self) -> int:
        return len(self._words)

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and word.upper() in self._words

    def is_valid_guess(self, word: str) -> bool:
        return word in self

    def merge(self, words: Iterable[str]) -> int:
        """Union alphabetic words of the right length; return how many were new."""
        incoming = {
            w.upper()
            for w in words
            if len(w) == self._length and w.isascii() and w.isalpha()
        }
        with self._lock:
            added = incoming - self._words
            if added:
                self._words = self._words | added
            self._augmented = True
        return len(added)


@dataclass(frozen=True)
class WordLists:
    solutions: List[str]
    guesses: List[str]


def load_word_lists(path: Optional[Path] = None) -> WordLists:
    """Load the bundled solution and fallback guess lists from YAML."""
    path = Path(path) if path is not None else DEFAULT_WORDS_PATH
    if not path.exists():
        raise FileNotFoundError(f"Word list file not found: {path}")

    raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    if not raw or not isinstance(raw, dict):
        raise ValueError(f"{path.name}: expected YAML with 'solutions' and 'guesses'")

    lists = {}
    for key in ("solutions", "guesses"):
        content = raw.get(key, [] if key == "guesses" else None)
        if content is None:
            raise ValueError(f"{path.name}: missing '{key}'")
        if isinstance(content, list):
            items = [str(item).strip().upper() for item in content if str(item).strip()]
        else:
            # allow a whitespace separated block
            items = [token.upper() for token in str(content).split()]
        lists[key] = items

    if not lists["solutions"]:
        raise ValueError(f"{path.name}: 'solutions' has no words")
    logger.debug(
        "Loaded %d solutions and %d guesses from %s",
        len(lists["solutions"]),
        len(lists["guesses"]),
        path,
    )
    return WordLists(solutions=lists["solutions"], guesses=lists["guesses"])
