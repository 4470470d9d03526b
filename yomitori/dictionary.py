"""
Dictionary access for Yomitori.

Defines the Dictionary contract consumed by the annotator and the
ranking code, the SearchResult produced by best-match searches, and an
in-memory dictionary loaded from JSON files.
"""

import bisect
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Tuple, Union

from yomitori.characters import is_alphabetic, is_ideographic
from yomitori.entry import Entry
from yomitori.grammar import Grammar
from yomitori.models import DictionaryRecord
from yomitori.priority import Priority
from yomitori.ranking import AugmentedEntry, LearningEntry, WordToLearn

logger = logging.getLogger(__name__)


class DictionaryError(Exception):
    """Raised when a dictionary lookup or load fails."""


# ============================================================================
# Search Results
# ============================================================================

@dataclass(eq=False)
class SearchResult:
    """
    Result of a best-match search of a text fragment.

    Attributes:
        to_search: The searched fragment.
        is_kanji: Whether the kanji spellings are compared (the fragment
            starts with an ideograph) or the readings.
        entries: Candidate entries, sorted by select_best_match.
        selected_index: Index of the best entry, or -1.
        selected_word: The spelling or derived form which matched.
        match_length: Number of characters of to_search matched.
        is_full_match: True if the selected word was entirely matched.
        is_derived_word: True if the selected word is an inflected form.
    """
    to_search: str
    is_kanji: bool
    entries: List[AugmentedEntry]
    selected_index: int = -1
    selected_word: Optional[str] = None
    match_length: int = 0
    is_full_match: bool = False
    is_derived_word: bool = False

    @property
    def selected_entry(self) -> Optional[AugmentedEntry]:
        if self.selected_index < 0:
            return None
        return self.entries[self.selected_index]

    def _variants(self, candidate: AugmentedEntry):
        for index in range(candidate.get_count(self.is_kanji)):
            yield candidate.get_word(self.is_kanji, index), False
        for word in candidate.derived_words(self.is_kanji):
            yield word, True

    def _compare(self, word: str) -> Tuple[int, int]:
        """
        Match a word against the start of the searched text, ignoring
        non-alphabetic characters and case.

        Returns:
            Characters consumed in the searched text and in the word.
        """
        text = self.to_search
        si = vi = 0
        while si < len(text) and vi < len(word):
            sc = text[si]
            if not is_alphabetic(sc):
                si += 1
                continue
            vc = word[vi]
            if not is_alphabetic(vc):
                vi += 1
                continue
            if sc.upper() != vc.upper():
                break
            si += 1
            vi += 1
        return si, vi

    def select_best_match(self) -> bool:
        """
        Select the candidate which best matches the searched text.

        A fully matched word beats a partially matched one. Then the
        longest match wins; on equal length a longer word is rejected, a
        derived form never replaces a dictionary spelling, and the
        higher ranked entry is kept.

        Returns:
            True if a candidate has been selected.
        """
        self.entries.sort(key=AugmentedEntry.sort_key)
        word_length = len(self.selected_word) if self.selected_word is not None else float("inf")
        for i, candidate in enumerate(self.entries):
            for word, is_derived in self._variants(candidate):
                si, vi = self._compare(word)
                full_match = vi == len(word)
                if self.is_full_match and not full_match:
                    continue
                if not full_match or self.is_full_match:
                    if si < self.match_length:
                        continue
                    if si == self.match_length:
                        if len(word) > word_length:
                            continue
                        if not self.is_derived_word and is_derived:
                            continue
                        if (self.selected_index >= 0 and
                                not candidate.sort_key() < self.entries[self.selected_index].sort_key()):
                            continue
                self.selected_index = i
                self.selected_word = word
                self.match_length = si
                word_length = len(word)
                self.is_full_match = full_match
                self.is_derived_word = is_derived
        return self.selected_index >= 0

    def __str__(self) -> str:
        text = "derived from " if self.is_derived_word else ""
        text += f'"{self.selected_word}"'
        if self.is_full_match:
            text += ", full match"
        return f"SearchResult[{text}, length={self.match_length}]"


# ============================================================================
# Dictionary Contract
# ============================================================================

class Dictionary(ABC):
    """
    Source of dictionary entries.

    Implementations may block on I/O; failures are reported by raising
    DictionaryError.
    """

    @abstractmethod
    def decode_priority(self, code: int) -> Sequence[Priority]:
        """Decode a spelling priority code into priority tags."""

    @abstractmethod
    def search_best(self, fragment: str) -> Optional[SearchResult]:
        """
        Search the entry which best matches the beginning of a fragment.

        Returns:
            The search result with a selected entry, or None if nothing matches.
        """

    @abstractmethod
    def entries_using_all(self, kanji: Optional[str], reading: Optional[str]) -> List[AugmentedEntry]:
        """Entries having both the given kanji and reading spellings (None matches any)."""


# ============================================================================
# In-Memory Dictionary
# ============================================================================

def _uses_all(entry: Entry, kanji: Optional[str], reading: Optional[str]) -> bool:
    if kanji is None and reading is None:
        return False
    return ((kanji is None or kanji in entry.kanji) and
            (reading is None or reading in entry.readings))


class MemoryDictionary(Dictionary):
    """
    Dictionary holding all its entries in memory.

    Spellings and derived forms of every entry are indexed for prefix
    lookups. Entries matching a word to learn are wrapped as LearningEntry.
    """

    def __init__(
        self,
        entries: Iterable[Entry],
        priorities: Optional[Mapping[int, Iterable[Union[str, Priority]]]] = None,
        words_to_learn: Iterable[WordToLearn] = (),
        grammar: Optional[Grammar] = None,
    ):
        self._priorities: Dict[int, Tuple[Priority, ...]] = {}
        for code, tags in (priorities or {}).items():
            decoded = (t if isinstance(t, Priority) else Priority.parse(t) for t in tags)
            self._priorities[int(code)] = tuple(sorted(decoded))

        self.words_to_learn: List[WordToLearn] = list(words_to_learn)
        self.entries: List[AugmentedEntry] = []
        for entry in entries:
            learning = any(_uses_all(entry, w.kanji, w.reading) for w in self.words_to_learn)
            wrapper = LearningEntry if learning else AugmentedEntry
            self.entries.append(wrapper(entry, self, grammar))

        self._index: Dict[str, List[AugmentedEntry]] = {}
        for augmented in self.entries:
            for is_kanji in (True, False):
                words = augmented.kanji if is_kanji else augmented.readings
                for word in (*words, *augmented.derived_words(is_kanji)):
                    bucket = self._index.setdefault(word, [])
                    if augmented not in bucket:
                        bucket.append(augmented)
        self._keys = sorted(self._index)
        logger.debug(f"Indexed {len(self.entries)} entries under {len(self._keys)} words")

    @classmethod
    def from_record(cls, record: DictionaryRecord, grammar: Optional[Grammar] = None) -> "MemoryDictionary":
        return cls(
            (r.to_entry() for r in record.entries),
            record.priorities,
            (WordToLearn(kanji, reading) for kanji, reading in record.words_to_learn),
            grammar,
        )

    @classmethod
    def from_file(cls, path: Union[str, Path], grammar: Optional[Grammar] = None) -> "MemoryDictionary":
        """
        Load a dictionary from a JSON file.

        Raises:
            DictionaryError: If the file can not be read.
            pydantic.ValidationError: If the file content is malformed.
        """
        try:
            text = Path(path).read_text(encoding="utf-8-sig")
        except OSError as e:
            raise DictionaryError(f"Can not read dictionary {path}: {e}") from e
        record = DictionaryRecord.model_validate_json(text)
        logger.info(f"Loaded {len(record.entries)} entries from {path}")
        return cls.from_record(record, grammar)

    def __len__(self) -> int:
        return len(self.entries)

    def decode_priority(self, code: int) -> Tuple[Priority, ...]:
        if code == 0:
            return ()
        priorities = self._priorities.get(code)
        if priorities is None:
            logger.debug(f"Unknown priority code {code}")
            return ()
        return priorities

    def lookup(self, word: str) -> List[AugmentedEntry]:
        """Entries having the given spelling or derived form."""
        return list(self._index.get(word, ()))

    def get_entry(self, identifier: int) -> Optional[AugmentedEntry]:
        for entry in self.entries:
            if entry.identifier == identifier:
                return entry
        return None

    def entries_using_all(self, kanji: Optional[str], reading: Optional[str]) -> List[AugmentedEntry]:
        return [e for e in self.entries if _uses_all(e.entry, kanji, reading)]

    def _prefix_candidates(self, fragment: str) -> List[AugmentedEntry]:
        candidates: List[AugmentedEntry] = []
        for end in range(len(fragment), 0, -1):
            for entry in self._index.get(fragment[:end], ()):
                if entry not in candidates:
                    candidates.append(entry)
        return candidates

    def _partial_candidates(self, fragment: str) -> List[AugmentedEntry]:
        """Entries of the indexed words sorting next to the fragment and sharing its first character."""
        position = bisect.bisect_left(self._keys, fragment)
        candidates: List[AugmentedEntry] = []
        for key in self._keys[max(position - 1, 0):position + 1]:
            if key[:1] == fragment[:1]:
                for entry in self._index[key]:
                    if entry not in candidates:
                        candidates.append(entry)
        return candidates

    def search_best(self, fragment: str) -> Optional[SearchResult]:
        if not fragment:
            return None
        candidates = self._prefix_candidates(fragment) or self._partial_candidates(fragment)
        if not candidates:
            return None
        result = SearchResult(fragment, is_ideographic(fragment[0]), candidates)
        if not result.select_best_match():
            return None
        return result
