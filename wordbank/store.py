"""
Word Store: category -> ordered list of words, persisted as one JSON file.

Comparisons go through normalize(), so "피자" and "피 자" are the same
entry, but the word is stored exactly as the client sent it.

One WordStore instance is created per application (see main.create_app)
and handed to the routes through FastAPI dependencies.
"""

import copy
import logging
from pathlib import Path

from wordbank.errors import (
    ConflictError,
    NotFoundError,
    PersistenceError,
    SnapshotError,
)
from wordbank.normalizer import normalize
from wordbank.snapshot import read_json, write_json_atomic
from wordbank.validation import require_text

logger = logging.getLogger(__name__)

# Seed bank used when no snapshot exists yet, and by reset().
# Never mutate this directly; always deep-copy it first.
DEFAULT_BANK: dict[str, list[str]] = {
    "game": ["마인크래프트", "리그오브레전드", "배틀그라운드", "스타크래프트"],
    "food": ["피자", "치킨", "떡볶이", "김밥"],
    "music": ["기타", "피아노", "드럼", "노래방"],
    "sport": ["축구", "농구", "야구", "배드민턴"],
    "reading": ["소설", "만화", "에세이"],
}


def _find_index(words: list[str], key: str, skip: int | None = None) -> int | None:
    """Index of the first word whose normalized form equals `key`."""
    for i, existing in enumerate(words):
        if i != skip and normalize(existing) == key:
            return i
    return None


def _validate_bank(data) -> dict[str, list[str]]:
    if not isinstance(data, dict):
        raise SnapshotError("word bank snapshot must be a JSON object")
    for category, words in data.items():
        if not isinstance(words, list) or not all(isinstance(w, str) for w in words):
            raise SnapshotError(f"category '{category}' must be a list of strings")
    return data


def dedupe(bank: dict[str, list[str]]) -> int:
    """Drop later duplicates within each category, in place.

    Keeps the first entry for every normalized key. Returns how many
    entries were removed.
    """
    removed = 0
    for category, words in bank.items():
        seen: set[str] = set()
        kept: list[str] = []
        for word in words:
            key = normalize(word)
            if key in seen:
                removed += 1
                continue
            seen.add(key)
            kept.append(word)
        bank[category] = kept
    return removed


class WordStore:
    """In-memory word bank with snapshot persistence after every mutation."""

    def __init__(self, path: Path, bank: dict[str, list[str]]):
        self.path = Path(path)
        self._bank = bank
        # True once a write failed; cleared by the next successful write.
        self.diverged = False

    @classmethod
    def load(cls, path: Path) -> "WordStore":
        """Load the snapshot, seed it if absent, and run the dedup sweep."""
        path = Path(path)
        data = read_json(path)

        if data is None:
            logger.info("No word bank at %s, seeding default bank", path)
            store = cls(path, copy.deepcopy(DEFAULT_BANK))
            store._persist()
            return store

        store = cls(path, _validate_bank(data))
        removed = dedupe(store._bank)
        if removed:
            logger.info("Dedup sweep removed %d duplicate word(s)", removed)
            store._persist()

        logger.info(
            "Loaded word bank from %s: %d categories, %d words",
            path, len(store._bank), sum(len(w) for w in store._bank.values()),
        )
        return store

    # ── Reads ──────────────────────────────────────────────────────

    def list_all(self) -> dict[str, list[str]]:
        return copy.deepcopy(self._bank)

    def get(self, category: str) -> list[str]:
        words = self._bank.get(category)
        if words is None:
            raise NotFoundError("Hobby not found")
        return list(words)

    def category_count(self) -> int:
        return len(self._bank)

    # ── Mutations ──────────────────────────────────────────────────

    def insert(self, category: str, word: str) -> list[str]:
        words = self._bank.get(category, [])
        if _find_index(words, normalize(word)) is not None:
            raise ConflictError(f"'{word}' already exists in '{category}'")

        # Category is only created once the word is known to be new.
        self._bank[category] = words
        words.append(word)
        logger.info("Added word to '%s' (%d words)", category, len(words))
        self._persist()
        return list(words)

    def remove(self, category: str, word: str) -> tuple[str, list[str]]:
        words = self._bank.get(category)
        if words is None:
            raise NotFoundError("Hobby not found")

        index = _find_index(words, normalize(word))
        if index is None:
            raise NotFoundError(f"'{word}' not found in '{category}'")

        deleted = words.pop(index)
        logger.info("Removed word from '%s' (%d words)", category, len(words))
        self._persist()
        return deleted, list(words)

    def update(self, category: str, old_word: str, new_word: str) -> list[str]:
        require_text("oldWord", old_word)
        require_text("newWord", new_word)

        words = self._bank.get(category)
        if words is None:
            raise NotFoundError("Hobby not found")

        index = _find_index(words, normalize(old_word))
        if index is None:
            raise NotFoundError(f"'{old_word}' not found in '{category}'")

        if _find_index(words, normalize(new_word), skip=index) is not None:
            raise ConflictError(f"'{new_word}' already exists in '{category}'")

        words[index] = new_word
        logger.info("Updated word %d in '%s'", index, category)
        self._persist()
        return list(words)

    def reset(self) -> dict[str, list[str]]:
        self._bank = copy.deepcopy(DEFAULT_BANK)
        logger.info("Word bank reset to defaults")
        self._persist()
        return copy.deepcopy(self._bank)

    # ── Persistence ────────────────────────────────────────────────

    def _persist(self) -> None:
        try:
            write_json_atomic(self.path, self._bank)
        except OSError as e:
            self.diverged = True
            logger.error("Failed to write word bank snapshot %s: %s", self.path, e)
            raise PersistenceError(
                "Word bank could not be saved; in-memory data and the snapshot file have diverged"
            ) from e
        self.diverged = False
