"""
Entry ranking for Yomitori.

Wraps immutable dictionary entries with lazily computed, cached
information: the derived forms of each spelling side and an annotation
mask telling which side is common, which side is preferred and whether
the kanji spelling uses characters outside the Jouyou list.

Mask layout:
    bits 0-2  reading side (COMMON, PREFERRED, UNCOMMON_KANJI)
    bits 3-5  kanji side
    bit  6    computed sentinel
    bit  7    LEARNING (words to learn only)
"""

import logging
import threading
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, List, Optional, Tuple

from yomitori.entry import Entry
from yomitori.grammar import Grammar, get_grammar
from yomitori.kanji import ScriptClass, classify
from yomitori.priority import Priority, priority_weight

if TYPE_CHECKING:
    from yomitori.dictionary import Dictionary

logger = logging.getLogger(__name__)


# ============================================================================
# Mask Bits
# ============================================================================

COMMON = 1
PREFERRED = 2
UNCOMMON_KANJI = 4   # kanji side only

MASK_WIDTH = 3
SIDE_MASK = (1 << MASK_WIDTH) - 1
COMPUTED = 1 << (2 * MASK_WIDTH)
LEARNING = COMPUTED << 1


def side_bits(mask: int, is_kanji: bool) -> int:
    """Extract the bits of one spelling side from a packed mask."""
    return (mask >> (MASK_WIDTH if is_kanji else 0)) & SIDE_MASK


# ============================================================================
# Augmented Entries
# ============================================================================

class AugmentedEntry:
    """
    A dictionary entry with its cached derived forms and ranking.

    Attribute lookups not defined here are delegated to the wrapped
    entry, so an AugmentedEntry can be used wherever an Entry is read.
    """

    is_word_to_learn = False

    def __init__(self, entry: Entry, dictionary: "Dictionary", grammar: Optional[Grammar] = None):
        self.entry = entry
        self.dictionary = dictionary
        self._grammar = grammar
        self._lock = threading.Lock()
        self._derived: Dict[bool, Tuple[str, ...]] = {}
        self._mask = 0
        self._weight: Optional[int] = None

    def __getattr__(self, name: str) -> Any:
        if name == "entry":
            raise AttributeError(name)
        return getattr(self.entry, name)

    def derived_words(self, is_kanji: bool) -> Tuple[str, ...]:
        """
        Get the forms derived from the kanji or reading spellings.

        Computed on first call, then cached for the lifetime of this object.
        """
        with self._lock:
            derived = self._derived.get(is_kanji)
            if derived is None:
                grammar = self._grammar or get_grammar()
                derived = grammar.derive_forms(self.entry, is_kanji)
                self._derived[is_kanji] = derived
            return derived

    # ------------------------------------------------------------------------
    # Annotation mask
    # ------------------------------------------------------------------------

    @property
    def mask(self) -> int:
        """The packed annotation mask of both sides."""
        mask = self._mask
        if mask == 0:
            with self._lock:
                if self._mask == 0:
                    self._mask = self._compute_mask()
                mask = self._mask
        return mask

    def annotation_mask(self, is_kanji: bool) -> int:
        """Get the COMMON, PREFERRED and UNCOMMON_KANJI bits of one side."""
        return side_bits(self.mask, is_kanji)

    def is_common(self, is_kanji: bool) -> bool:
        return bool(self.annotation_mask(is_kanji) & COMMON)

    def is_preferred(self, is_kanji: bool) -> bool:
        return bool(self.annotation_mask(is_kanji) & PREFERRED)

    def has_uncommon_kanji(self) -> bool:
        return bool(self.annotation_mask(True) & UNCOMMON_KANJI)

    def _is_common(self, is_kanji: bool) -> bool:
        code = self.entry.get_priority(is_kanji, 0)
        if code == 0:
            return False
        return any(p.is_common for p in self.dictionary.decode_priority(code))

    def _compute_mask(self) -> int:
        entry = self.entry
        kanji = COMMON if self._is_common(True) else 0
        reading = COMMON if self._is_common(False) else 0

        has_kanji = entry.get_count(True) > 0
        has_reading = entry.get_count(False) > 0
        if has_kanji and (not has_reading or
                          entry.get_priority(True, 0) > entry.get_priority(False, 0)):
            kanji |= PREFERRED
        elif has_reading:
            reading |= PREFERRED

        if has_kanji and classify(entry.get_word(True, 0)) == ScriptClass.KANJI:
            kanji |= UNCOMMON_KANJI

        return reading | (kanji << MASK_WIDTH) | COMPUTED

    # ------------------------------------------------------------------------
    # Ordering
    # ------------------------------------------------------------------------

    def priorities(self) -> List[Priority]:
        """Decoded priorities of the headline spellings of both sides."""
        result: List[Priority] = []
        for is_kanji in (True, False):
            code = self.entry.get_priority(is_kanji, 0)
            if code != 0:
                result.extend(self.dictionary.decode_priority(code))
        return result

    @property
    def priority_weight(self) -> int:
        """Frequency weight of the entry, lower meaning more frequent."""
        if self._weight is None:
            self._weight = priority_weight(self.priorities())
        return self._weight

    def sort_key(self) -> Tuple[bool, int, int]:
        """Words to learn first, then the most frequent entries."""
        return (not self.is_word_to_learn, self.priority_weight, self.entry.identifier)

    def __lt__(self, other: "AugmentedEntry") -> bool:
        if not isinstance(other, AugmentedEntry):
            return NotImplemented
        return self.sort_key() < other.sort_key()

    def __str__(self) -> str:
        return str(self.entry)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.entry.identifier}, {self.entry})"


class LearningEntry(AugmentedEntry):
    """An entry that the user has flagged as a word to learn."""

    is_word_to_learn = True

    def _compute_mask(self) -> int:
        mask = super()._compute_mask()
        return mask | PREFERRED | (PREFERRED << MASK_WIDTH) | LEARNING


# ============================================================================
# Words To Learn
# ============================================================================

def _trim(text: Optional[str]) -> Optional[str]:
    if text is not None:
        text = text.strip()
        if not text:
            text = None
    return text


@dataclass(frozen=True)
class WordToLearn:
    """
    A word saved by the user for study, identified by its spellings.

    Blank spellings are normalized to None.
    """
    kanji: Optional[str] = None
    reading: Optional[str] = None
    _entry: Optional[AugmentedEntry] = field(default=None, init=False, compare=False, repr=False)

    def __post_init__(self):
        object.__setattr__(self, "kanji", _trim(self.kanji))
        object.__setattr__(self, "reading", _trim(self.reading))

    @property
    def query_text(self) -> Optional[str]:
        """The text asked to the user: the reading, or the kanji if none."""
        return self.reading if self.reading is not None else self.kanji

    def element(self, is_kanji: bool) -> Optional[str]:
        return self.kanji if is_kanji else self.reading

    def is_for_entry(self, entry: Entry, is_kanji: bool) -> bool:
        """
        Check whether one spelling of this word belongs to the given entry.

        A missing spelling matches only entries without spellings on that side.
        """
        element = self.element(is_kanji)
        count = entry.get_count(is_kanji)
        if element is None:
            return count == 0
        return any(entry.get_word(is_kanji, i) == element for i in range(count))

    def get_entry(self, dictionary: "Dictionary") -> Optional[AugmentedEntry]:
        """
        Find the entry of this word, fetching it on first call.

        When several entries use both spellings, words to learn come
        first, then the most frequent entry, then the lowest identifier.

        Raises:
            DictionaryError: If the dictionary lookup fails.
        """
        if self._entry is None:
            candidates = sorted(dictionary.entries_using_all(self.kanji, self.reading),
                                key=AugmentedEntry.sort_key)
            if not candidates:
                logger.debug(f"No entry found for {self}")
                return None
            object.__setattr__(self, "_entry", candidates[0])
        return self._entry

    def to_line(self) -> str:
        """Tab separated line, as stored in a list of words to learn."""
        return f"{self.kanji or ''}\t{self.reading or ''}"

    def __str__(self) -> str:
        return f"WordToLearn[{self.kanji}, {self.reading}]"
