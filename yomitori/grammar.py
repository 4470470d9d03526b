"""
Conjugation engine for Yomitori.

Dispatches the (spelling, part of speech) pairs of an entry to the
adjective or verb rule set and collects the unique derived forms.
"""

import logging
import threading
from typing import Dict, Optional, Tuple

from yomitori.conjugations import AdjectiveRules, Rules, VerbRules
from yomitori.entry import Entry
from yomitori.pos import GrammaticalClass

logger = logging.getLogger(__name__)


class Grammar:
    """
    Derives the inflected forms of dictionary entries.

    The engine reuses one accumulation buffer shared by its rule sets;
    calls to derive_forms are serialized by an instance lock. Callers
    wanting parallelism should create one engine per thread.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._buffer: Dict[str, None] = {}
        self._rules: Dict[GrammaticalClass, Rules] = {
            rules.grammatical_class: rules
            for rules in (AdjectiveRules(self._buffer), VerbRules(self._buffer))
        }

    def derive_forms(self, entry: Entry, is_kanji: bool) -> Tuple[str, ...]:
        """
        Get the forms derived from all spellings of one side of an entry.

        Args:
            entry: The dictionary entry.
            is_kanji: True for the kanji spellings, False for the readings.

        Returns:
            The derived forms in generation order, without duplicates.
            Empty when no part of speech of the entry conjugates.
        """
        part_of_speech = entry.part_of_speech
        with self._lock:
            try:
                for index in range(entry.get_count(is_kanji)):
                    word = entry.get_word(is_kanji, index)
                    for pos in part_of_speech:
                        rules = self._rules.get(pos.grammatical_class)
                        if rules is not None:
                            rules.add_derived_words(pos, word)
                forms = tuple(self._buffer)
            finally:
                self._buffer.clear()

        if forms:
            logger.debug(f"Derived {len(forms)} forms for entry {entry.identifier}")
        return forms


_DEFAULT: Optional[Grammar] = None
_default_lock = threading.Lock()


def get_grammar() -> Grammar:
    """Get the process-wide conjugation engine."""
    global _DEFAULT
    if _DEFAULT is None:
        with _default_lock:
            if _DEFAULT is None:
                _DEFAULT = Grammar()
    return _DEFAULT


def derive_forms(entry: Entry, is_kanji: bool) -> Tuple[str, ...]:
    """Derive the forms of an entry with the process-wide engine."""
    return get_grammar().derive_forms(entry, is_kanji)
