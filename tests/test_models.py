"""
Tests for models.py - dictionary file schema and JSON output.
"""

import pytest
from pydantic import ValidationError

from yomitori.kanji import ScriptClass
from yomitori.models import (
    AnnotationResult, ClassificationResult, DictionaryRecord, EntryInfo, EntryRecord,
)
from yomitori.pos import PartOfSpeech


class TestDictionaryRecord:

    def test_defaults(self):
        record = DictionaryRecord()
        assert record.entries == []
        assert record.priorities == {}
        assert record.words_to_learn == []

    def test_priority_keys_are_codes(self):
        record = DictionaryRecord.model_validate({"priorities": {"3": ["news1"]}})
        assert record.priorities == {3: ["news1"]}

    def test_invalid_priority_tag(self):
        with pytest.raises(ValidationError):
            DictionaryRecord.model_validate({"priorities": {"3": ["news7"]}})

    def test_words_to_learn(self):
        record = DictionaryRecord.model_validate({"words_to_learn": [["公園", "こうえん"], [None, "レモン"]]})
        assert record.words_to_learn == [("公園", "こうえん"), (None, "レモン")]

    def test_empty_spelling_rejected(self):
        with pytest.raises(ValidationError):
            EntryRecord.model_validate({"id": 1, "kanji": [{"text": ""}]})


class TestEntryRecord:

    def test_to_entry(self):
        record = EntryRecord.model_validate({
            "id": 4,
            "kanji": [{"text": "食べる", "priority": 1}],
            "readings": [{"text": "たべる"}],
            "senses": [{"meaning": "to eat", "pos": ["v1", "vt"]}, {"meaning": "manger", "locale": "fr"}],
        })
        entry = record.to_entry()
        assert entry.identifier == 4
        assert entry.kanji == ("食べる",)
        assert entry.kanji_priorities == (1,)
        assert entry.reading_priorities == (0,)
        assert entry.part_of_speech == (PartOfSpeech.VERB_1, PartOfSpeech.VERB_TRANSITIVE)
        assert entry.senses[1].locale == "fr"


class TestEntryInfo:

    def test_from_entry(self, dictionary):
        info = EntryInfo.from_entry(dictionary.get_entry(1))
        assert info.id == 1
        assert info.kanji.spellings == ["明日"]
        assert info.reading.spellings == ["あした", "あす"]
        assert info.reading.preferred
        assert not info.kanji.preferred
        assert info.kanji.common
        assert info.pos == ["n-adv", "n-t"]
        assert info.classes == ["noun"]
        assert not info.learning

    def test_derived_forms(self, dictionary):
        info = EntryInfo.from_entry(dictionary.get_entry(4))
        assert "食べたい" in info.kanji.derived
        assert "たべたい" in info.reading.derived
        assert info.classes == ["verb"]

    def test_uncommon_kanji(self, dictionary):
        info = EntryInfo.from_entry(dictionary.get_entry(8))
        assert info.kanji.uncommon_kanji
        assert not info.reading.uncommon_kanji

    def test_learning(self, learning_dictionary):
        assert EntryInfo.from_entry(learning_dictionary.get_entry(2)).learning


class TestOutputModels:

    def test_annotation_result(self):
        result = AnnotationResult(text="明日", annotated="明日〖あした〗")
        assert result.model_dump() == {"text": "明日", "annotated": "明日〖あした〗"}

    def test_classification_result(self):
        assert ClassificationResult.of("明日", ScriptClass.JOYO_KANJI).script == "joyo-kanji"
        assert ClassificationResult.of("", None).script is None
