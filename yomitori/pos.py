"""
Part of speech tags and grammatical classes.

The tag set is the closed set of JMdict part-of-speech codes. Every tag
belongs to exactly one grammatical class; the conjugation engine only
looks at tags of the VERB and ADJECTIVE classes.
"""

from enum import Enum
from typing import Dict, Iterable, List


class GrammaticalClass(Enum):
    """Broad grammatical category of a part of speech."""
    NUMERIC = "numeric"
    COUNTER = "counter"
    PARTICLE = "particle"
    NOUN = "noun"                  # common, adverbial, temporal, prefix or suffix
    PRONOUN = "pronoun"
    CONJUNCTION = "conjunction"
    INTERJECTION = "interjection"
    AUXILIARY = "auxiliary"        # auxiliary adjective or verb
    ADJECTIVE = "adjective"        # い, な, の, quasi-adjective
    ADVERB = "adverb"
    VERB = "verb"                  # ichidan, nidan, yondan, godan, irregular
    PREFIX = "prefix"
    SUFFIX = "suffix"
    EXPRESSION = "expression"      # phrases, clauses, etc.


class PartOfSpeech(Enum):
    """JMdict part of speech, identified by its JMdict code."""
    ADJECTIVE_F = "adj-f"          # noun or verb acting prenominally
    ADJECTIVE_I = "adj-i"          # keiyoushi
    ADJECTIVE_NA = "adj-na"        # keiyodoshi
    ADJECTIVE_NO = "adj-no"        # nouns which may take the genitive の
    ADJECTIVE_PRENOUN = "adj-pn"   # rentaishi
    ADJECTIVE_TARU = "adj-t"
    ADVERB = "adv"
    ADVERB_TO = "adv-to"
    AUXILIARY = "aux"
    AUXILIARY_ADJECTIVE = "aux-adj"
    AUXILIARY_VERB = "aux-v"
    CONJUNCTION = "conj"
    EXPRESSION = "exp"
    INTERJECTION = "int"
    NUMERIC = "num"
    COUNTER = "ctr"
    PREFIX = "pref"
    SUFFIX = "suf"
    PARTICLE = "prt"
    PRONOUN = "pn"
    NOUN = "n"
    NOUN_ADVERBIAL = "n-adv"
    NOUN_TEMPORAL = "n-t"
    NOUN_AS_PREFIX = "n-pref"
    NOUN_AS_SUFFIX = "n-suf"
    VERB_AS_NOUN_SURU = "vs"       # noun taking the auxiliary verb する
    VERB_1 = "v1"                  # ichidan
    VERB_1_ZURU = "v1z"
    VERB_2_U = "v2a-s"             # archaic
    VERB_4_FU = "v4h"              # archaic
    VERB_4_RU = "v4r"              # archaic
    VERB_5_BU = "v5b"
    VERB_5_GU = "v5g"
    VERB_5_KU = "v5k"
    VERB_5_MU = "v5m"
    VERB_5_NU = "v5n"
    VERB_5_RU = "v5r"
    VERB_5_RU_IRREGULAR = "v5r-i"
    VERB_5_SU = "v5s"
    VERB_5_TSU = "v5t"
    VERB_5_U = "v5u"
    VERB_5_U_IRREGULAR = "v5u-s"
    VERB_5_ARU = "v5aru"
    VERB_5_IKU = "v5k-s"           # 行く / 逝く
    VERB_KURU = "vk"
    VERB_SURU = "vs-s"
    VERB_SURU_IRREGULAR = "vs-i"
    VERB_NU_IRREGULAR = "vn"
    VERB_RU_IRREGULAR = "vr"
    VERB_SU = "vs-c"               # precursor to the modern する
    VERB_TRANSITIVE = "vt"
    VERB_INTRANSITIVE = "vi"

    @property
    def code(self) -> str:
        return self.value

    @property
    def grammatical_class(self) -> GrammaticalClass:
        return GRAMMATICAL_CLASSES[self]

    @classmethod
    def from_code(cls, code: str) -> "PartOfSpeech":
        """
        Get the part of speech for a JMdict code such as 'v5k' or 'adj-i'.

        Raises:
            ValueError: If the code is unknown.
        """
        try:
            return cls(code.strip())
        except ValueError:
            raise ValueError(f"Unknown part of speech: {code!r}") from None


_P = PartOfSpeech
_G = GrammaticalClass

GRAMMATICAL_CLASSES: Dict[PartOfSpeech, GrammaticalClass] = {
    _P.ADJECTIVE_F: _G.ADJECTIVE,
    _P.ADJECTIVE_I: _G.ADJECTIVE,
    _P.ADJECTIVE_NA: _G.ADJECTIVE,
    _P.ADJECTIVE_NO: _G.ADJECTIVE,
    _P.ADJECTIVE_PRENOUN: _G.ADJECTIVE,
    _P.ADJECTIVE_TARU: _G.ADJECTIVE,
    _P.ADVERB: _G.ADVERB,
    _P.ADVERB_TO: _G.ADVERB,
    _P.AUXILIARY: _G.AUXILIARY,
    _P.AUXILIARY_ADJECTIVE: _G.AUXILIARY,
    _P.AUXILIARY_VERB: _G.AUXILIARY,
    _P.CONJUNCTION: _G.CONJUNCTION,
    _P.EXPRESSION: _G.EXPRESSION,
    _P.INTERJECTION: _G.INTERJECTION,
    _P.NUMERIC: _G.NUMERIC,
    _P.COUNTER: _G.COUNTER,
    _P.PREFIX: _G.PREFIX,
    _P.SUFFIX: _G.SUFFIX,
    _P.PARTICLE: _G.PARTICLE,
    _P.PRONOUN: _G.PRONOUN,
    _P.NOUN: _G.NOUN,
    _P.NOUN_ADVERBIAL: _G.NOUN,
    _P.NOUN_TEMPORAL: _G.NOUN,
    _P.NOUN_AS_PREFIX: _G.NOUN,
    _P.NOUN_AS_SUFFIX: _G.NOUN,
    _P.VERB_AS_NOUN_SURU: _G.NOUN,
    _P.VERB_1: _G.VERB,
    _P.VERB_1_ZURU: _G.VERB,
    _P.VERB_2_U: _G.VERB,
    _P.VERB_4_FU: _G.VERB,
    _P.VERB_4_RU: _G.VERB,
    _P.VERB_5_BU: _G.VERB,
    _P.VERB_5_GU: _G.VERB,
    _P.VERB_5_KU: _G.VERB,
    _P.VERB_5_MU: _G.VERB,
    _P.VERB_5_NU: _G.VERB,
    _P.VERB_5_RU: _G.VERB,
    _P.VERB_5_RU_IRREGULAR: _G.VERB,
    _P.VERB_5_SU: _G.VERB,
    _P.VERB_5_TSU: _G.VERB,
    _P.VERB_5_U: _G.VERB,
    _P.VERB_5_U_IRREGULAR: _G.VERB,
    _P.VERB_5_ARU: _G.VERB,
    _P.VERB_5_IKU: _G.VERB,
    _P.VERB_KURU: _G.VERB,
    _P.VERB_SURU: _G.VERB,
    _P.VERB_SURU_IRREGULAR: _G.VERB,
    _P.VERB_NU_IRREGULAR: _G.VERB,
    _P.VERB_RU_IRREGULAR: _G.VERB,
    _P.VERB_SU: _G.VERB,
    _P.VERB_TRANSITIVE: _G.VERB,
    _P.VERB_INTRANSITIVE: _G.VERB,
}


def parse_codes(codes: Iterable[str]) -> List[PartOfSpeech]:
    """Parse JMdict codes, keeping their order and dropping duplicates."""
    result: List[PartOfSpeech] = []
    for code in codes:
        pos = PartOfSpeech.from_code(code)
        if pos not in result:
            result.append(pos)
    return result
