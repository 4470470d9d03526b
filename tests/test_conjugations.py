"""
Tests for conjugations.py and grammar.py - derived forms.

Each verb class is checked against hand-written forms.
"""

import logging
from concurrent.futures import ThreadPoolExecutor

import pytest

from yomitori.conjugations import (
    AdjectiveRules, ConjType, ConjugationRule, VerbRules, conjugate_word, get_conjugation_rules,
    has_expected_ending,
)
from yomitori.entry import Entry, Sense
from yomitori.grammar import Grammar, derive_forms, get_grammar
from yomitori.pos import GrammaticalClass, PartOfSpeech as P


def forms_of(word, pos):
    return [form for form, _ in conjugate_word(word, pos)]


def entry_of(kanji, reading, *pos):
    return Entry(1, (kanji,), (reading,), (Sense("test", "en", pos),))


class TestConjugationRule:

    def test_apply_drops_stem(self):
        rule = ConjugationRule(P.VERB_1, ConjType.NON_PAST, False, True, 1, "ます")
        assert rule.apply("食べる") == "食べます"

    def test_apply_appends(self):
        rule = ConjugationRule(P.ADJECTIVE_NA, ConjType.ATTRIBUTIVE, None, None, 0, "な")
        assert rule.apply("静か") == "静かな"

    def test_description(self):
        rule = ConjugationRule(P.VERB_1, ConjType.NON_PAST, True, True, 1, "ません")
        assert rule.description == "Non-past, negative, formal"


class TestAdjectives:

    def test_i_adjective(self):
        assert forms_of("忙しい", P.ADJECTIVE_I) == [
            "忙しいです", "忙しいでした", "忙しくて", "忙しくない", "忙しくありません",
        ]

    def test_na_adjective(self):
        assert forms_of("静か", P.ADJECTIVE_NA) == [
            "静かな", "静かです", "静かでした", "静かではありません", "静かじゃありません",
        ]

    def test_no_adjective(self):
        assert forms_of("日本", P.ADJECTIVE_NO) == ["日本の"]

    def test_i_adjective_mismatch(self, caplog):
        with caplog.at_level(logging.WARNING, logger="yomitori.conjugations"):
            assert forms_of("静か", P.ADJECTIVE_I) == []
        assert "adj-i" in caplog.text
        assert "静か" in caplog.text


class TestVerbs:

    def test_ichidan(self):
        assert forms_of("食べる", P.VERB_1) == [
            "食べます", "食べました", "食べません", "食べましょう",
            "食べたい", "食べて", "食べた", "食べない",
        ]

    def test_godan_u(self):
        assert forms_of("買う", P.VERB_5_U) == [
            "買います", "買いました", "買いません", "買いましょう",
            "買いたい", "買って", "買った", "買わない",
        ]

    @pytest.mark.parametrize("word,pos,masu,te,ta,nai", [
        ("書く", P.VERB_5_KU, "書きます", "書いて", "書いた", "書かない"),
        ("泳ぐ", P.VERB_5_GU, "泳ぎます", "泳いで", "泳いだ", "泳がない"),
        ("話す", P.VERB_5_SU, "話します", "話して", "話した", "話さない"),
        ("待つ", P.VERB_5_TSU, "待ちます", "待って", "待った", "待たない"),
        ("死ぬ", P.VERB_5_NU, "死にます", "死んで", "死んだ", "死なない"),
        ("遊ぶ", P.VERB_5_BU, "遊びます", "遊んで", "遊んだ", "遊ばない"),
        ("読む", P.VERB_5_MU, "読みます", "読んで", "読んだ", "読まない"),
        ("帰る", P.VERB_5_RU, "帰ります", "帰って", "帰った", "帰らない"),
        ("行く", P.VERB_5_IKU, "行きます", "行って", "行った", "行かない"),
    ])
    def test_godan_rows(self, word, pos, masu, te, ta, nai):
        forms = forms_of(word, pos)
        assert len(forms) == 8
        assert masu in forms
        assert te in forms
        assert ta in forms
        assert nai in forms

    def test_suru(self):
        assert forms_of("する", P.VERB_SURU_IRREGULAR) == [
            "します", "しました", "しません", "しましょう",
            "したい", "して", "した", "しない",
        ]

    def test_reading_side(self):
        assert "たべます" in forms_of("たべる", P.VERB_1)
        assert "いって" in forms_of("いく", P.VERB_5_IKU)

    def test_godan_mismatch(self, caplog):
        with caplog.at_level(logging.WARNING, logger="yomitori.conjugations"):
            assert forms_of("食べる", P.VERB_5_U) == []
        assert "v5u" in caplog.text

    def test_unsupported_verb_class(self):
        assert get_conjugation_rules(P.VERB_KURU) == []
        assert forms_of("来る", P.VERB_KURU) == []

    def test_non_conjugating_pos(self):
        assert forms_of("公園", P.NOUN) == []


class TestExpectedEnding:

    def test_accepts(self):
        assert has_expected_ending(P.VERB_5_MU, "読む")
        assert has_expected_ending(P.ADJECTIVE_NA, "静か")

    def test_rejects(self, caplog):
        with caplog.at_level(logging.WARNING):
            assert not has_expected_ending(P.VERB_SURU_IRREGULAR, "為る")
        assert len(caplog.records) == 1


class TestRuleSets:

    def test_add_derived_words_in_order(self):
        buffer = {}
        VerbRules(buffer).add_derived_words(P.VERB_1, "見る")
        assert list(buffer)[:2] == ["見ます", "見ました"]

    def test_skips_unknown_pos(self, caplog):
        buffer = {}
        with caplog.at_level(logging.DEBUG, logger="yomitori.conjugations"):
            VerbRules(buffer).add_derived_words(P.VERB_KURU, "来る")
        assert buffer == {}
        assert "vk" in caplog.text

    def test_grammatical_class(self):
        assert AdjectiveRules({}).grammatical_class == GrammaticalClass.ADJECTIVE
        assert VerbRules({}).grammatical_class == GrammaticalClass.VERB


class TestGrammar:
    """Tests for the conjugation engine."""

    def test_kanji_and_reading_sides(self):
        entry = entry_of("食べる", "たべる", P.VERB_1, P.VERB_TRANSITIVE)
        grammar = Grammar()
        assert "食べます" in grammar.derive_forms(entry, True)
        assert "たべます" in grammar.derive_forms(entry, False)
        assert "たべます" not in grammar.derive_forms(entry, True)

    def test_rule_sets_by_class(self):
        grammar = Grammar()
        assert set(grammar._rules) == {GrammaticalClass.ADJECTIVE, GrammaticalClass.VERB}
        assert isinstance(grammar._rules[GrammaticalClass.VERB], VerbRules)
        assert grammar._rules[GrammaticalClass.ADJECTIVE].derived_words is grammar._buffer

    def test_noun_has_no_forms(self):
        entry = entry_of("公園", "こうえん", P.NOUN)
        assert Grammar().derive_forms(entry, True) == ()

    def test_deduplicated(self):
        entry = entry_of("綺麗", "きれい", P.ADJECTIVE_NA, P.ADJECTIVE_I)
        forms = Grammar().derive_forms(entry, False)
        assert forms.count("きれいです") == 1
        assert forms[0] == "きれいな"

    def test_mismatch_skips_only_that_tag(self, caplog):
        entry = entry_of("静か", "しずか", P.ADJECTIVE_I, P.ADJECTIVE_NA)
        with caplog.at_level(logging.WARNING):
            forms = Grammar().derive_forms(entry, True)
        assert forms == ("静かな", "静かです", "静かでした", "静かではありません", "静かじゃありません")
        assert caplog.records

    def test_all_spellings(self):
        entry = Entry(1, ("行く", "往く"), ("いく", "ゆく"), (Sense("to go", "en", (P.VERB_5_IKU,)),))
        forms = Grammar().derive_forms(entry, False)
        assert "いきます" in forms
        assert "ゆきます" in forms

    def test_buffer_cleared(self):
        grammar = Grammar()
        grammar.derive_forms(entry_of("食べる", "たべる", P.VERB_1), True)
        assert grammar.derive_forms(entry_of("公園", "こうえん", P.NOUN), True) == ()

    def test_buffer_cleared_on_error(self):
        grammar = Grammar()

        class Broken(Entry):
            def get_word(self, is_kanji, index):
                if index > 0:
                    raise RuntimeError("broken")
                return super().get_word(is_kanji, index)

        broken = Broken(1, ("行く", "往く"), ("いく",), (Sense("go", "en", (P.VERB_5_IKU,)),))
        with pytest.raises(RuntimeError):
            grammar.derive_forms(broken, True)
        assert grammar.derive_forms(entry_of("公園", "こうえん", P.NOUN), True) == ()

    def test_default_engine(self):
        assert get_grammar() is get_grammar()
        assert "買った" in derive_forms(entry_of("買う", "かう", P.VERB_5_U), True)

    def test_concurrent_callers(self):
        grammar = Grammar()
        entries = [
            entry_of("食べる", "たべる", P.VERB_1),
            entry_of("買う", "かう", P.VERB_5_U),
            entry_of("忙しい", "いそがしい", P.ADJECTIVE_I),
        ]
        expected = [grammar.derive_forms(e, True) for e in entries]
        with ThreadPoolExecutor(max_workers=4) as pool:
            results = list(pool.map(lambda i: grammar.derive_forms(entries[i % 3], True), range(60)))
        for i, forms in enumerate(results):
            assert forms == expected[i % 3]
