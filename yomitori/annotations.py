"""
Reading annotations for Yomitori.

Inserts the reading of kanji words in a text, in brackets right after
the word:

    明日、公園へ行く。 -> 明日〖あした〗、公園〖こうえん〗へ行く〖いく〗。

Words to learn use the 【】 brackets instead. When the dictionary
spelling differs from the text (for example an inflected form), the
spelling is shown before the reading: 行きます〖行く → いく〗.
Text inside brackets is never annotated, so annotating twice gives the
same result as annotating once.
"""

import logging
from typing import List, Optional, Tuple

from yomitori import settings
from yomitori.characters import is_ideographic
from yomitori.dictionary import Dictionary

logger = logging.getLogger(__name__)

OPENING = frozenset((settings.OPEN, settings.OPEN_WELL_KNOWN))
CLOSING = frozenset((settings.CLOSE, settings.CLOSE_WELL_KNOWN))


class AnnotationsWriter:
    """
    Inserts reading annotations using a dictionary's best-match search.

    The writer keeps no state between calls and may annotate independent
    buffers concurrently.
    """

    def __init__(self, dictionary: Dictionary, max_word_length: Optional[int] = None):
        self.dictionary = dictionary
        self.max_word_length = max_word_length or settings.MAX_WORD_LENGTH

    def _window(self, text: List[str], start: int) -> Tuple[str, List[int]]:
        """
        Collect the text to search from a position, leaving out bracketed
        annotations so that annotated and plain text are searched alike.

        Returns:
            The fragment and the buffer position of each of its characters.
        """
        chars: List[str] = []
        positions: List[int] = []
        inside = False
        i = start
        while i < len(text) and len(chars) < self.max_word_length:
            c = text[i]
            if c in OPENING:
                inside = True
            elif c in CLOSING:
                inside = False
            elif not inside:
                chars.append(c)
                positions.append(i)
            i += 1
        return "".join(chars), positions

    def annotate_buffer(self, text: List[str]) -> int:
        """
        Annotate a text in place, one list item per character.

        Args:
            text: The text to annotate. Annotations are inserted as
                individual characters.

        Returns:
            Number of annotations inserted.

        Raises:
            DictionaryError: If a lookup fails. Annotations inserted before
                the failure are kept; the rest of the text is unchanged.
        """
        inserted = 0
        inside = False
        i = 0
        while i < len(text):
            c = text[i]
            if c in OPENING:
                inside = True
            elif c in CLOSING:
                inside = False
            if not inside and is_ideographic(c):
                fragment, positions = self._window(text, i)
                result = self.dictionary.search_best(fragment)
                if result is not None and result.is_full_match:
                    entry = result.selected_entry
                    kanji = entry.get_word(True, 0)
                    reading = entry.get_word(False, 0)
                    end = positions[result.match_length - 1] + 1
                    differs = kanji is not None and kanji != fragment[:result.match_length]
                    if differs or reading is not None:
                        if end - i != result.match_length:
                            # The match runs across bracketed text.
                            i += 1
                            continue
                        if end < len(text) and text[end] in OPENING:
                            # Already annotated.
                            i = end
                            continue
                        if entry.is_word_to_learn:
                            open_, close = settings.OPEN_WELL_KNOWN, settings.CLOSE_WELL_KNOWN
                        else:
                            open_, close = settings.OPEN, settings.CLOSE
                        annotation = open_
                        if differs:
                            annotation += kanji + settings.ARROW
                        # Kanji-only entries give an empty reading: 〖kanji → 〗.
                        annotation += (reading or "") + close
                        text[end:end] = annotation
                        inserted += 1
                        i = end + len(annotation)
                        continue
            i += 1
        return inserted

    def annotate(self, text: str) -> str:
        """Return a copy of the text with reading annotations inserted."""
        buffer = list(text)
        count = self.annotate_buffer(buffer)
        logger.debug(f"Inserted {count} annotations")
        return "".join(buffer)
