"""
Dictionary entries.

An entry holds the kanji spellings and the reading spellings of a word,
its senses and a priority code for each spelling. Entries are immutable;
index 0 of each spelling sequence is the headline form.
"""

from dataclasses import dataclass
from typing import List, Optional, Tuple

from yomitori.pos import GrammaticalClass, PartOfSpeech


@dataclass(frozen=True)
class Sense:
    """A meaning of an entry in a given language, with its parts of speech."""
    meaning: str
    locale: str = "en"
    part_of_speech: Tuple[PartOfSpeech, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "part_of_speech", tuple(self.part_of_speech))

    def grammatical_classes(self) -> List[GrammaticalClass]:
        """Grammatical classes of this sense, in part-of-speech order."""
        classes: List[GrammaticalClass] = []
        for pos in self.part_of_speech:
            if pos.grammatical_class not in classes:
                classes.append(pos.grammatical_class)
        return classes


@dataclass(frozen=True)
class Entry:
    """
    An immutable dictionary entry.

    Attributes:
        identifier: Dictionary sequence number.
        kanji: Kanji spellings, headline first.
        readings: Reading spellings (usually hiragana), headline first.
        senses: Meanings of the entry.
        kanji_priorities: Priority code per kanji spelling (0 = unclassified).
        reading_priorities: Priority code per reading spelling.
    """
    identifier: int
    kanji: Tuple[str, ...] = ()
    readings: Tuple[str, ...] = ()
    senses: Tuple[Sense, ...] = ()
    kanji_priorities: Optional[Tuple[int, ...]] = None
    reading_priorities: Optional[Tuple[int, ...]] = None

    def __post_init__(self):
        for name in ("kanji", "readings", "senses"):
            object.__setattr__(self, name, tuple(getattr(self, name)))
        if not self.kanji and not self.readings:
            raise ValueError(f"Entry {self.identifier} has no kanji nor reading.")
        # Missing priorities default to "unclassified".
        for words, name in ((self.kanji, 'kanji_priorities'), (self.readings, 'reading_priorities')):
            codes = getattr(self, name)
            if codes is None:
                object.__setattr__(self, name, (0,) * len(words))
                continue
            codes = tuple(codes)
            if len(codes) != len(words):
                raise ValueError(
                    f"Entry {self.identifier}: {len(codes)} priorities "
                    f"for {len(words)} spellings in {name}."
                )
            object.__setattr__(self, name, codes)

    def _words(self, is_kanji: bool) -> Tuple[str, ...]:
        return self.kanji if is_kanji else self.readings

    def get_count(self, is_kanji: bool) -> int:
        """Number of kanji or reading spellings."""
        return len(self._words(is_kanji))

    def get_word(self, is_kanji: bool, index: int) -> Optional[str]:
        """
        Get a kanji or reading spelling.

        Args:
            is_kanji: True for the kanji spellings, False for the readings.
            index: Index of the spelling, 0 being the headline.

        Returns:
            The spelling, or None if there is no spelling at that index.
        """
        words = self._words(is_kanji)
        if 0 <= index < len(words):
            return words[index]
        return None

    def get_priority(self, is_kanji: bool, index: int) -> int:
        """Priority code of a spelling, or 0 if unclassified or absent."""
        codes = self.kanji_priorities if is_kanji else self.reading_priorities
        if 0 <= index < len(codes):
            return codes[index]
        return 0

    def defining_word(self, index: int = 0) -> Optional[str]:
        """The kanji spelling if there is one, otherwise the reading."""
        word = self.get_word(True, index)
        return word if word is not None else self.get_word(False, index)

    @property
    def part_of_speech(self) -> Tuple[PartOfSpeech, ...]:
        """Union of the parts of speech of all senses, in first-seen order."""
        result: List[PartOfSpeech] = []
        for sense in self.senses:
            for pos in sense.part_of_speech:
                if pos not in result:
                    result.append(pos)
        return tuple(result)

    def __str__(self) -> str:
        kanji = self.get_word(True, 0)
        reading = self.get_word(False, 0)
        if kanji and reading:
            return f"{kanji}【{reading}】"
        return kanji or reading
