"""
Japanese verb and adjective conjugation rules for Yomitori.

Each rule drops a number of characters from the end of the dictionary
form and appends a suffix. Rule sets exist for the い, な and の
adjectives, the godan and ichidan verbs, and the irregular する verb.

Conjugation Types:
    1  - Non-past (present-future)
    2  - Past (~た form)
    3  - Conjunctive (~て form)
    9  - Volitional (~ましょう form)
    55 - Desiderative (~たい form)
    56 - Attributive (~な / ~の before a noun)
"""

import logging
from dataclasses import dataclass
from enum import IntEnum
from typing import Dict, List, MutableMapping, Optional, Tuple

from yomitori.characters import row_of, A_ROW, I_ROW
from yomitori.pos import GrammaticalClass, PartOfSpeech

logger = logging.getLogger(__name__)


# ============================================================================
# Conjugation Type Constants
# ============================================================================

class ConjType(IntEnum):
    """Conjugation type IDs."""
    NON_PAST = 1
    PAST = 2
    CONJUNCTIVE = 3  # te-form
    VOLITIONAL = 9
    DESIDERATIVE = 55  # ~たい (want to)
    ATTRIBUTIVE = 56


CONJ_DESCRIPTIONS = {
    ConjType.NON_PAST: "Non-past",
    ConjType.PAST: "Past (~ta)",
    ConjType.CONJUNCTIVE: "Conjunctive (~te)",
    ConjType.VOLITIONAL: "Volitional",
    ConjType.DESIDERATIVE: "Desiderative (~tai)",
    ConjType.ATTRIBUTIVE: "Attributive",
}


def get_conj_description(conj_type: int) -> str:
    """Get human-readable description of conjugation type."""
    return CONJ_DESCRIPTIONS.get(conj_type, f"Type {conj_type}")


# ============================================================================
# Conjugation Rule Definition
# ============================================================================

@dataclass(frozen=True)
class ConjugationRule:
    """
    A single conjugation rule.

    Attributes:
        pos: Part of speech the rule applies to.
        conj_type: Conjugation type ID.
        neg: True if negative form, False if affirmative, None if N/A.
        fml: True if formal/polite, False if plain, None if N/A.
        stem_chars: Number of characters to remove from end.
        okurigana: Suffix to add.
    """
    pos: PartOfSpeech
    conj_type: ConjType
    neg: Optional[bool]
    fml: Optional[bool]
    stem_chars: int
    okurigana: str

    def apply(self, word: str) -> str:
        """
        Apply this conjugation rule to a word in kanji or kana.
        """
        stem = word[:-self.stem_chars] if self.stem_chars > 0 else word
        return stem + self.okurigana

    @property
    def description(self) -> str:
        parts = [get_conj_description(self.conj_type)]
        if self.neg:
            parts.append("negative")
        if self.fml:
            parts.append("formal")
        return ", ".join(parts)


# ============================================================================
# Adjectives (形容詞 / 形容動詞)
# ============================================================================

def generate_i_adjective_rules(pos: PartOfSpeech = PartOfSpeech.ADJECTIVE_I) -> List[ConjugationRule]:
    """
    Generate conjugation rules for i-adjectives.

    The copula is appended to the unmodified word; other forms replace
    the final い.
    """
    return [
        ConjugationRule(pos, ConjType.NON_PAST, False, True, 0, "です"),
        ConjugationRule(pos, ConjType.PAST, False, True, 0, "でした"),
        ConjugationRule(pos, ConjType.CONJUNCTIVE, False, False, 1, "くて"),
        ConjugationRule(pos, ConjType.NON_PAST, True, False, 1, "くない"),
        ConjugationRule(pos, ConjType.NON_PAST, True, True, 1, "くありません"),
    ]


def generate_na_adjective_rules(pos: PartOfSpeech = PartOfSpeech.ADJECTIVE_NA) -> List[ConjugationRule]:
    """Generate rules for na-adjectives (suffix appended to the base word)."""
    return [
        ConjugationRule(pos, ConjType.ATTRIBUTIVE, None, None, 0, "な"),
        ConjugationRule(pos, ConjType.NON_PAST, False, True, 0, "です"),
        ConjugationRule(pos, ConjType.PAST, False, True, 0, "でした"),
        ConjugationRule(pos, ConjType.NON_PAST, True, True, 0, "ではありません"),
        ConjugationRule(pos, ConjType.NON_PAST, True, True, 0, "じゃありません"),
    ]


def generate_no_adjective_rules(pos: PartOfSpeech = PartOfSpeech.ADJECTIVE_NO) -> List[ConjugationRule]:
    """Generate rules for nouns which may take the genitive の."""
    return [ConjugationRule(pos, ConjType.ATTRIBUTIVE, None, None, 0, "の")]


# ============================================================================
# Verbs (動詞)
# ============================================================================

# Te-form / Ta-form sound changes for godan verbs.
# Nasal and g-row stems take the voiced で/だ.
# Maps: ending -> (te-form suffix, ta-form suffix)
GODAN_TE_TA = {
    'う': ('って', 'った'),
    'く': ('いて', 'いた'),
    'ぐ': ('いで', 'いだ'),
    'す': ('して', 'した'),
    'つ': ('って', 'った'),
    'ぬ': ('んで', 'んだ'),
    'ぶ': ('んで', 'んだ'),
    'む': ('んで', 'んだ'),
    'る': ('って', 'った'),
}

# 行く uses って/った instead of いて/いた
IKU_TE_TA = ('って', 'った')


def generate_verb_rules(
    pos: PartOfSpeech,
    stem_chars: int,
    masu_stem: str,
    te_ta: Tuple[str, str],
    nai_stem: str,
) -> List[ConjugationRule]:
    """
    Generate the derived forms of a verb.

    Args:
        pos: POS tag.
        stem_chars: Number of characters dropped from the dictionary form.
        masu_stem: Kana appended before ます and たい (i-row for godan verbs).
        te_ta: The te-form and ta-form suffixes.
        nai_stem: Kana appended before ない (a-row for godan verbs).

    Returns:
        List of ConjugationRule objects.
    """
    te_suffix, ta_suffix = te_ta
    return [
        ConjugationRule(pos, ConjType.NON_PAST, False, True, stem_chars, masu_stem + "ます"),
        ConjugationRule(pos, ConjType.PAST, False, True, stem_chars, masu_stem + "ました"),
        ConjugationRule(pos, ConjType.NON_PAST, True, True, stem_chars, masu_stem + "ません"),
        ConjugationRule(pos, ConjType.VOLITIONAL, False, True, stem_chars, masu_stem + "ましょう"),
        ConjugationRule(pos, ConjType.DESIDERATIVE, False, False, stem_chars, masu_stem + "たい"),
        ConjugationRule(pos, ConjType.CONJUNCTIVE, False, False, stem_chars, te_suffix),
        ConjugationRule(pos, ConjType.PAST, False, False, stem_chars, ta_suffix),
        ConjugationRule(pos, ConjType.NON_PAST, True, False, stem_chars, nai_stem + "ない"),
    ]


def generate_godan_rules(pos: PartOfSpeech, ending: str) -> List[ConjugationRule]:
    """
    Generate the derived forms of a godan verb type.

    Args:
        pos: POS tag (e.g., VERB_5_KU).
        ending: Verb ending character (e.g., 'く').
    """
    te_ta = IKU_TE_TA if pos == PartOfSpeech.VERB_5_IKU else GODAN_TE_TA[ending]
    return generate_verb_rules(pos, 1, row_of(ending, I_ROW), te_ta, row_of(ending, A_ROW))


def generate_ichidan_rules(pos: PartOfSpeech = PartOfSpeech.VERB_1) -> List[ConjugationRule]:
    """Ichidan verbs drop る and add the suffix."""
    return generate_verb_rules(pos, 1, "", ("て", "た"), "")


def generate_suru_rules(pos: PartOfSpeech = PartOfSpeech.VERB_SURU_IRREGULAR) -> List[ConjugationRule]:
    """Generate rules for する: the stem する becomes し."""
    return generate_verb_rules(pos, 2, "し", ("して", "した"), "し")


# ============================================================================
# Rule Registry
# ============================================================================

# Expected dictionary-form ending for each POS having conjugation rules.
# Parts of speech absent from this map accept any word.
EXPECTED_ENDINGS: Dict[PartOfSpeech, str] = {
    PartOfSpeech.ADJECTIVE_I: 'い',
    PartOfSpeech.VERB_1: 'る',
    PartOfSpeech.VERB_SURU_IRREGULAR: 'する',
    PartOfSpeech.VERB_5_U: 'う',
    PartOfSpeech.VERB_5_KU: 'く',
    PartOfSpeech.VERB_5_IKU: 'く',
    PartOfSpeech.VERB_5_GU: 'ぐ',
    PartOfSpeech.VERB_5_SU: 'す',
    PartOfSpeech.VERB_5_TSU: 'つ',
    PartOfSpeech.VERB_5_NU: 'ぬ',
    PartOfSpeech.VERB_5_BU: 'ぶ',
    PartOfSpeech.VERB_5_MU: 'む',
    PartOfSpeech.VERB_5_RU: 'る',
}

ADJECTIVE_RULES: Dict[PartOfSpeech, List[ConjugationRule]] = {
    PartOfSpeech.ADJECTIVE_I: generate_i_adjective_rules(),
    PartOfSpeech.ADJECTIVE_NA: generate_na_adjective_rules(),
    PartOfSpeech.ADJECTIVE_NO: generate_no_adjective_rules(),
}

VERB_RULES: Dict[PartOfSpeech, List[ConjugationRule]] = {
    PartOfSpeech.VERB_1: generate_ichidan_rules(),
    PartOfSpeech.VERB_SURU_IRREGULAR: generate_suru_rules(),
}
for _pos in (
    PartOfSpeech.VERB_5_U, PartOfSpeech.VERB_5_KU, PartOfSpeech.VERB_5_IKU,
    PartOfSpeech.VERB_5_GU, PartOfSpeech.VERB_5_SU, PartOfSpeech.VERB_5_TSU,
    PartOfSpeech.VERB_5_NU, PartOfSpeech.VERB_5_BU, PartOfSpeech.VERB_5_MU,
    PartOfSpeech.VERB_5_RU,
):
    VERB_RULES[_pos] = generate_godan_rules(_pos, EXPECTED_ENDINGS[_pos])


def get_conjugation_rules(pos: PartOfSpeech) -> List[ConjugationRule]:
    """
    Get all conjugation rules for a given POS.

    Returns:
        List of ConjugationRule objects, empty if the POS does not conjugate.
    """
    return ADJECTIVE_RULES.get(pos) or VERB_RULES.get(pos) or []


def has_expected_ending(pos: PartOfSpeech, word: str) -> bool:
    """
    Verify that a word has the ending expected for its part of speech.
    If not, logs a warning and returns False.
    """
    ending = EXPECTED_ENDINGS.get(pos)
    if ending is None or word.endswith(ending):
        return True
    logger.warning(
        f"For \"{pos.code}\" Part Of Speech, expected a word ending "
        f"with \"{ending}\" but got \"{word}\"."
    )
    return False


def conjugate_word(word: str, pos: PartOfSpeech) -> List[Tuple[str, ConjugationRule]]:
    """
    Generate the derived forms of a word.

    Args:
        word: Word to conjugate (in kana or kanji).
        pos: Part of speech.

    Returns:
        List of (conjugated_form, rule) tuples. Empty if the POS has no
        rules or the word does not have the expected ending.
    """
    rules = get_conjugation_rules(pos)
    if not rules or not has_expected_ending(pos, word):
        return []
    return [(rule.apply(word), rule) for rule in rules]


# ============================================================================
# Rule Sets
# ============================================================================

class Rules:
    """
    Base class of the rule sets of a grammatical class.

    Derived words are added to a shared, insertion-ordered collection
    (a dict used as an ordered set). This class is not thread safe: if it
    needs to be used from multiple threads, access must be synchronized
    or different instances must be used.
    """

    grammatical_class: GrammaticalClass
    rule_table: Dict[PartOfSpeech, List[ConjugationRule]] = {}

    def __init__(self, derived_words: MutableMapping[str, None]):
        self.derived_words = derived_words

    def add_derived_words(self, pos: PartOfSpeech, word: str) -> None:
        """
        Add every form derived from the given word to the collection.

        Args:
            pos: The part of speech of the word.
            word: The word in kanji or reading characters.
        """
        rules = self.rule_table.get(pos)
        if rules is None:
            logger.debug(f"No conjugation rules for \"{pos.code}\"; skipping \"{word}\".")
            return
        if not has_expected_ending(pos, word):
            return
        for rule in rules:
            self.derived_words[rule.apply(word)] = None


class AdjectiveRules(Rules):
    """Rules relative to the grammar of adjectives."""
    grammatical_class = GrammaticalClass.ADJECTIVE
    rule_table = ADJECTIVE_RULES


class VerbRules(Rules):
    """Rules relative to the grammar of verbs."""
    grammatical_class = GrammaticalClass.VERB
    rule_table = VERB_RULES
