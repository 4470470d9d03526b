"""
Pydantic models for Yomitori.

Input models describe the JSON dictionary files loaded by
MemoryDictionary; output models are the JSON documents printed by the
command line interface.

Dictionary file layout:
    {
      "entries": [
        {"id": 1, "kanji": [{"text": "明日", "priority": 3}],
         "readings": [{"text": "あした", "priority": 5}],
         "senses": [{"meaning": "tomorrow", "pos": ["n-adv", "n-t"]}]}
      ],
      "priorities": {"3": ["ichi1", "news1"], "5": ["spec1"]},
      "words_to_learn": [["明日", "あした"]]
    }
"""

from typing import Dict, List, Optional, Tuple

from pydantic import BaseModel, Field, field_validator

from yomitori.entry import Entry, Sense
from yomitori.kanji import ScriptClass
from yomitori.pos import PartOfSpeech, parse_codes
from yomitori.priority import Priority
from yomitori.ranking import AugmentedEntry


# =============================================================================
# Dictionary Files
# =============================================================================

class SpellingRecord(BaseModel):
    """A kanji or reading spelling with its priority code."""
    text: str = Field(..., min_length=1, description="The spelling")
    priority: int = Field(0, ge=0, description="Priority code, 0 if unclassified")


class SenseRecord(BaseModel):
    meaning: str = Field(..., description="Gloss")
    locale: str = Field("en", description="Language of the gloss")
    pos: List[str] = Field(default_factory=list, description="JMdict part of speech codes")

    @field_validator("pos")
    @classmethod
    def check_pos(cls, codes: List[str]) -> List[str]:
        for code in codes:
            PartOfSpeech.from_code(code)
        return codes

    def to_sense(self) -> Sense:
        return Sense(self.meaning, self.locale, tuple(parse_codes(self.pos)))


class EntryRecord(BaseModel):
    """
    A dictionary entry as stored in a JSON file.

    Spellings are listed headline first.
    """
    id: int = Field(..., description="Sequence number")
    kanji: List[SpellingRecord] = Field(default_factory=list)
    readings: List[SpellingRecord] = Field(default_factory=list)
    senses: List[SenseRecord] = Field(default_factory=list)

    def to_entry(self) -> Entry:
        """
        Build the immutable entry.

        Raises:
            ValueError: If the record has neither kanji nor reading.
        """
        return Entry(
            identifier=self.id,
            kanji=tuple(s.text for s in self.kanji),
            readings=tuple(s.text for s in self.readings),
            senses=tuple(s.to_sense() for s in self.senses),
            kanji_priorities=tuple(s.priority for s in self.kanji),
            reading_priorities=tuple(s.priority for s in self.readings),
        )


class DictionaryRecord(BaseModel):
    """Content of a dictionary file."""
    entries: List[EntryRecord] = Field(default_factory=list)
    priorities: Dict[int, List[str]] = Field(
        default_factory=dict, description="Priority code to priority tags such as 'news1'"
    )
    words_to_learn: List[Tuple[Optional[str], Optional[str]]] = Field(
        default_factory=list, description="(kanji, reading) pairs saved by the user"
    )

    @field_validator("priorities")
    @classmethod
    def check_priorities(cls, priorities: Dict[int, List[str]]) -> Dict[int, List[str]]:
        for tags in priorities.values():
            for tag in tags:
                Priority.parse(tag)
        return priorities


# =============================================================================
# Command Line Output
# =============================================================================

class SideInfo(BaseModel):
    """Ranking and derived forms of the kanji or reading spellings."""
    spellings: List[str] = Field(default_factory=list)
    derived: List[str] = Field(default_factory=list, description="Inflected forms")
    common: bool = False
    preferred: bool = False
    uncommon_kanji: bool = False


class EntryInfo(BaseModel):
    """
    Pydantic model describing a ranked dictionary entry.
    """
    id: int = Field(..., description="Sequence number")
    kanji: SideInfo
    reading: SideInfo
    meanings: List[str] = Field(default_factory=list)
    pos: List[str] = Field(default_factory=list, description="Part of speech codes")
    classes: List[str] = Field(default_factory=list, description="Grammatical classes")
    learning: bool = Field(False, description="True for words to learn")
    weight: int = Field(..., description="Priority weight, lower = more frequent")

    @classmethod
    def from_entry(cls, entry: AugmentedEntry) -> "EntryInfo":
        sides = {}
        for is_kanji in (True, False):
            sides[is_kanji] = SideInfo(
                spellings=list(entry.kanji if is_kanji else entry.readings),
                derived=list(entry.derived_words(is_kanji)),
                common=entry.is_common(is_kanji),
                preferred=entry.is_preferred(is_kanji),
                uncommon_kanji=is_kanji and entry.has_uncommon_kanji(),
            )
        pos = entry.part_of_speech
        classes: List[str] = []
        for p in pos:
            if p.grammatical_class.value not in classes:
                classes.append(p.grammatical_class.value)
        return cls(
            id=entry.identifier,
            kanji=sides[True],
            reading=sides[False],
            meanings=[s.meaning for s in entry.senses],
            pos=[p.code for p in pos],
            classes=classes,
            learning=entry.is_word_to_learn,
            weight=entry.priority_weight,
        )


class AnnotationResult(BaseModel):
    text: str = Field(..., description="Input text")
    annotated: str = Field(..., description="Text with reading annotations")


class ClassificationResult(BaseModel):
    word: str
    script: Optional[str] = Field(None, description="Script class, None for an empty word")

    @classmethod
    def of(cls, word: str, script: Optional[ScriptClass]) -> "ClassificationResult":
        return cls(word=word, script=script.value if script else None)
