"""
Character handling for Yomitori.

Provides code point classification (ideographs, hiragana, katakana,
alphabetic) and the kana tables used when a verb or adjective ending
must be swapped for another mora of the same row.
"""

from typing import Dict, Tuple

# ============================================================================
# Code Point Ranges
# ============================================================================

HIRAGANA_START = 0x3040
KATAKANA_START = 0x30A0
KANA_END = 0x3100

# Code points reported as ideographic: the CJK unified ideographs and their
# extensions, compatibility ideographs, and the few ideographic symbols
# (〆, 〇, Suzhou numerals) living in the CJK punctuation block.
IDEOGRAPHIC_RANGES: Tuple[Tuple[int, int], ...] = (
    (0x3006, 0x3007),
    (0x3021, 0x3029),
    (0x3038, 0x303A),
    (0x3400, 0x4DBF),
    (0x4E00, 0x9FFF),
    (0xF900, 0xFAFF),
    (0x20000, 0x2FA1F),
    (0x30000, 0x323AF),
)


# ============================================================================
# Character Testing Functions
# ============================================================================

def is_ideographic(char: str) -> bool:
    """Check if a single character is an ideograph (kanji)."""
    code = ord(char)
    for low, high in IDEOGRAPHIC_RANGES:
        if code < low:
            return False
        if code <= high:
            return True
    return False


def is_hiragana(char: str) -> bool:
    """Check if a single character is in the hiragana block."""
    return HIRAGANA_START <= ord(char) < KATAKANA_START


def is_katakana(char: str) -> bool:
    """Check if a single character is in the katakana block."""
    return KATAKANA_START <= ord(char) < KANA_END


def is_alphabetic(char: str) -> bool:
    """Check if a single character is a letter of any script."""
    return char.isalpha()


# ============================================================================
# Kana Rows
# ============================================================================

# Godan verb endings and their row transformations.
# Maps: ending -> (a-row, i-row, u-row, e-row, o-row)
KANA_ROWS: Dict[str, Tuple[str, str, str, str, str]] = {
    'う': ('わ', 'い', 'う', 'え', 'お'),
    'く': ('か', 'き', 'く', 'け', 'こ'),
    'ぐ': ('が', 'ぎ', 'ぐ', 'げ', 'ご'),
    'す': ('さ', 'し', 'す', 'せ', 'そ'),
    'つ': ('た', 'ち', 'つ', 'て', 'と'),
    'ぬ': ('な', 'に', 'ぬ', 'ね', 'の'),
    'ぶ': ('ば', 'び', 'ぶ', 'べ', 'ぼ'),
    'む': ('ま', 'み', 'む', 'め', 'も'),
    'る': ('ら', 'り', 'る', 'れ', 'ろ'),
}

A_ROW, I_ROW, U_ROW, E_ROW, O_ROW = range(5)


def row_of(ending: str, row: int) -> str:
    """
    Get the mora of the same consonant row as ``ending`` in a given vowel row.

    Args:
        ending: Dictionary-form ending (u-row kana).
        row: One of A_ROW, I_ROW, U_ROW, E_ROW, O_ROW.

    Returns:
        The kana of the requested row.

    Raises:
        KeyError: If ``ending`` is not a u-row kana with a godan row.
    """
    return KANA_ROWS[ending][row]
