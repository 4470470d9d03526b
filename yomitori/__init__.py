"""
Yomitori: reading annotations and conjugated forms for Japanese text.
"""

from typing import TYPE_CHECKING, Optional, Union

if TYPE_CHECKING:
    from pathlib import Path
    from yomitori.dictionary import Dictionary, MemoryDictionary
    from yomitori.kanji import ScriptClass

__version__ = "0.1.0"


def load(path: Union[str, "Path"]) -> "MemoryDictionary":
    """
    Load a JSON dictionary file.

    Example:
        >>> import yomitori
        >>> dictionary = yomitori.load("dictionary.json")
        >>> yomitori.annotate("明日は晴れ", dictionary)
        '明日〖あした〗は晴れ〖はれ〗'
    """
    from yomitori.dictionary import MemoryDictionary
    return MemoryDictionary.from_file(path)


def annotate(text: str, dictionary: "Dictionary") -> str:
    """Insert the reading of the kanji words of a text."""
    from yomitori.annotations import AnnotationsWriter
    return AnnotationsWriter(dictionary).annotate(text)


def classify(word: Optional[str]) -> Optional["ScriptClass"]:
    """Get the script class of a word (see yomitori.kanji.classify)."""
    from yomitori.kanji import classify as _classify
    return _classify(word)


__all__ = ['__version__', 'load', 'annotate', 'classify']
