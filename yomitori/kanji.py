"""
Kanji module for Yomitori.

Classifies words by the script they are written in, distinguishing the
Jouyou kanji (the standard list of commonly taught characters) from the
other, uncommon, kanji.
"""

import logging
import threading
from enum import Enum
from pathlib import Path
from typing import Callable, FrozenSet, Optional

from yomitori import settings
from yomitori.characters import (
    is_ideographic, is_hiragana, is_katakana, is_alphabetic,
)

logger = logging.getLogger(__name__)


class ScriptClass(Enum):
    """The kind of characters a word is written with."""

    JOYO_KANJI = "joyo-kanji"
    """Contains ideographs, all of them in the Jouyou list."""

    KANJI = "kanji"
    """Contains at least one ideograph outside the Jouyou list."""

    KATAKANA = "katakana"
    """No ideograph, but at least one katakana."""

    HIRAGANA = "hiragana"
    """No ideograph nor katakana, but at least one hiragana."""

    ALPHABETIC = "alphabetic"
    """No Japanese character, but at least one letter."""

    OTHER = "other"

    @property
    def is_kanji(self) -> bool:
        return self in (ScriptClass.JOYO_KANJI, ScriptClass.KANJI)


# ============================================================================
# Jouyou Kanji List
# ============================================================================

def load_joyo_kanji(path: Optional[Path] = None) -> FrozenSet[str]:
    """
    Load the Jouyou kanji list.

    The resource is a UTF-8 text file; every ideograph found in it is a
    member of the list. Lines starting with ``#`` are comments.

    Args:
        path: File to read. Defaults to settings.JOYO_PATH.

    Returns:
        The set of Jouyou kanji, or an empty set if the resource can not
        be read. In the latter case no word is ever classified as
        JOYO_KANJI.
    """
    if path is None:
        path = settings.JOYO_PATH

    try:
        with open(path, encoding="utf-8-sig") as f:
            chars = set()
            for line in f:
                if line.lstrip().startswith('#'):
                    continue
                chars.update(c for c in line if is_ideographic(c))
    except OSError as e:
        logger.warning(f"Can not load the Jouyou kanji list from {path}: {e}")
        return frozenset()

    logger.debug(f"Loaded {len(chars)} Jouyou kanji from {path}")
    return frozenset(chars)


class KanjiList:
    """
    A kanji set read from its resource the first time it is needed.

    Concurrent first readers load the resource once; later readers get the
    published set without locking.
    """

    def __init__(self, loader: Callable[[], FrozenSet[str]]):
        self._loader = loader
        self._chars: Optional[FrozenSet[str]] = None
        self._lock = threading.Lock()

    def get(self) -> FrozenSet[str]:
        chars = self._chars
        if chars is None:
            with self._lock:
                if self._chars is None:
                    self._chars = self._loader()
                chars = self._chars
        return chars

    def invalidate(self) -> None:
        """Forget the loaded set; the next reader loads the resource again."""
        with self._lock:
            self._chars = None


JOYO_KANJI = KanjiList(load_joyo_kanji)


def is_joyo(char: str) -> bool:
    """Check if a single character is a Jouyou kanji."""
    return char in JOYO_KANJI.get()


# ============================================================================
# Classification
# ============================================================================

def classify(word: Optional[str]) -> Optional[ScriptClass]:
    """
    Return the script class of the given word.

    Any ideograph makes the word a kanji word. The scan stops at the first
    ideograph outside the Jouyou list; if all ideographs are Jouyou kanji
    the word is JOYO_KANJI. Otherwise katakana wins over hiragana, which
    wins over alphabetic characters.

    Args:
        word: The word to inspect.

    Returns:
        The script class, or None for an empty or None word.
    """
    if not word:
        return None

    joyo = JOYO_KANJI.get()
    has_kanji = False
    has_katakana = False
    has_hiragana = False
    has_alphabetic = False

    for char in word:
        if is_ideographic(char):
            if char not in joyo:
                return ScriptClass.KANJI
            has_kanji = True
        elif is_katakana(char):
            has_katakana = True
        elif is_hiragana(char):
            has_hiragana = True
        elif is_alphabetic(char):
            has_alphabetic = True

    if has_kanji:
        return ScriptClass.JOYO_KANJI
    if has_katakana:
        return ScriptClass.KATAKANA
    if has_hiragana:
        return ScriptClass.HIRAGANA
    if has_alphabetic:
        return ScriptClass.ALPHABETIC
    return ScriptClass.OTHER
