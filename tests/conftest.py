"""
Shared fixtures: a small in-memory dictionary.
"""

import json

import pytest

from yomitori.dictionary import MemoryDictionary
from yomitori.entry import Entry, Sense
from yomitori.kanji import JOYO_KANJI
from yomitori.pos import PartOfSpeech as P
from yomitori.ranking import WordToLearn


PRIORITIES = {
    1: ["news1", "ichi1"],
    2: ["spec1"],
    3: ["gai1"],
    4: ["nf20"],
}


def make_entry(identifier, kanji, readings, pos, kanji_priorities=None,
               reading_priorities=None, meaning="meaning"):
    return Entry(
        identifier=identifier,
        kanji=kanji,
        readings=readings,
        senses=(Sense(meaning, "en", pos),),
        kanji_priorities=kanji_priorities,
        reading_priorities=reading_priorities,
    )


ENTRIES = [
    make_entry(1, ("明日",), ("あした", "あす"), (P.NOUN_ADVERBIAL, P.NOUN_TEMPORAL), (1,), (2, 0), "tomorrow"),
    make_entry(2, ("公園",), ("こうえん",), (P.NOUN,), (1,), (1,), "park"),
    make_entry(3, ("行く",), ("いく", "ゆく"), (P.VERB_5_IKU, P.VERB_INTRANSITIVE), (1,), (1, 0), "to go"),
    make_entry(4, ("食べる",), ("たべる",), (P.VERB_1, P.VERB_TRANSITIVE), (1,), (1,), "to eat"),
    make_entry(5, ("晴れ",), ("はれ",), (P.NOUN,), None, None, "clear weather"),
    make_entry(6, ("買う",), ("かう",), (P.VERB_5_U, P.VERB_TRANSITIVE), (1,), (1,), "to buy"),
    make_entry(7, ("忙しい",), ("いそがしい",), (P.ADJECTIVE_I,), (1,), (1,), "busy"),
    make_entry(8, ("檸檬",), ("レモン",), (P.NOUN,), (0,), (3,), "lemon"),
    make_entry(9, ("日",), ("ひ",), (P.NOUN,), (1,), (1,), "day"),
    make_entry(10, ("日",), ("にち",), (P.SUFFIX,), None, None, "counter for days"),
]


@pytest.fixture
def entries():
    return list(ENTRIES)


@pytest.fixture
def dictionary(entries):
    """Dictionary of the sample entries, without words to learn."""
    return MemoryDictionary(entries, PRIORITIES)


@pytest.fixture
def learning_dictionary(entries):
    """Dictionary where 公園 is a word to learn."""
    return MemoryDictionary(entries, PRIORITIES, [WordToLearn("公園", "こうえん")])


@pytest.fixture
def dictionary_file(tmp_path):
    """JSON dictionary file with a few entries."""
    data = {
        "entries": [
            {"id": 1, "kanji": [{"text": "明日", "priority": 1}],
             "readings": [{"text": "あした", "priority": 2}, {"text": "あす"}],
             "senses": [{"meaning": "tomorrow", "pos": ["n-adv", "n-t"]}]},
            {"id": 2, "kanji": [{"text": "晴れ"}], "readings": [{"text": "はれ"}],
             "senses": [{"meaning": "clear weather", "pos": ["n"]}]},
            {"id": 3, "kanji": [{"text": "食べる", "priority": 1}],
             "readings": [{"text": "たべる", "priority": 1}],
             "senses": [{"meaning": "to eat", "pos": ["v1", "vt"]}]},
        ],
        "priorities": {"1": ["news1", "ichi1"], "2": ["spec1"]},
        "words_to_learn": [["食べる", "たべる"]],
    }
    path = tmp_path / "dictionary.json"
    path.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")
    return path


@pytest.fixture
def missing_joyo(tmp_path, monkeypatch):
    """Point the Jouyou list to a missing file for the duration of a test."""
    from yomitori import settings
    monkeypatch.setattr(settings, "JOYO_PATH", tmp_path / "missing.txt")
    JOYO_KANJI.invalidate()
    yield
    monkeypatch.undo()
    JOYO_KANJI.invalidate()
