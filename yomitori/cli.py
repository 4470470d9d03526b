"""
Command line interface for Yomitori.

Usage:
    yomitori "明日、公園へ行く。" -d dictionary.json     # annotate text
    yomitori "明日は晴れ" -d dictionary.json -j         # annotate, JSON output
    yomitori conjugate 食べる -p v1                     # derived forms
    yomitori classify 明日 カタカナ 檸檬                 # script classes
    yomitori info 明日 -d dictionary.json               # entry ranking as JSON
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from pydantic import ValidationError

from yomitori import __version__, settings
from yomitori.annotations import AnnotationsWriter
from yomitori.conjugations import conjugate_word
from yomitori.dictionary import DictionaryError, MemoryDictionary
from yomitori.kanji import classify
from yomitori.models import AnnotationResult, ClassificationResult, EntryInfo
from yomitori.pos import PartOfSpeech

logger = logging.getLogger(__name__)


def setup_logging(debug: bool = False):
    level = logging.DEBUG if debug or settings.DEBUG else logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def load_dictionary(path: Optional[str]) -> Optional[MemoryDictionary]:
    """
    Load the dictionary given on the command line or by YOMITORI_DICTIONARY.
    Prints an error and returns None on failure.
    """
    path = path or settings.DICTIONARY_PATH
    if not path:
        print("Error: no dictionary given. Use --dictionary or set YOMITORI_DICTIONARY.",
              file=sys.stderr)
        return None
    try:
        return MemoryDictionary.from_file(path)
    except DictionaryError as e:
        print(f"Error: {e}", file=sys.stderr)
    except (ValidationError, ValueError) as e:
        print(f"Error: invalid dictionary {path}: {e}", file=sys.stderr)
    return None


def add_dictionary_argument(parser: argparse.ArgumentParser):
    parser.add_argument(
        '-d', '--dictionary',
        type=str,
        default=None,
        metavar='PATH',
        help='Path to a JSON dictionary file (default: $YOMITORI_DICTIONARY)',
    )


# ============================================================================
# Subcommands
# ============================================================================

def main_conjugate(args: list) -> int:
    """CLI entry point for conjugate subcommand."""
    parser = argparse.ArgumentParser(
        description='Print the forms derived from a verb or adjective',
        prog='yomitori conjugate',
    )
    parser.add_argument('word', help='Dictionary form of the word')
    parser.add_argument(
        '-p', '--pos',
        action='append',
        required=True,
        metavar='CODE',
        help="JMdict part of speech code such as 'v1', 'v5u' or 'adj-i' (repeatable)",
    )
    parsed = parser.parse_args(args)

    try:
        pos_list = [PartOfSpeech.from_code(code) for code in parsed.pos]
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    count = 0
    for pos in pos_list:
        for form, rule in conjugate_word(parsed.word, pos):
            print(f"{form}\t{pos.code}\t{rule.description}")
            count += 1

    if count == 0:
        print(f"Error: no form derived from {parsed.word}", file=sys.stderr)
        return 1
    return 0


def main_classify(args: list) -> int:
    """CLI entry point for classify subcommand."""
    parser = argparse.ArgumentParser(
        description='Print the script class of words',
        prog='yomitori classify',
    )
    parser.add_argument('words', nargs='+', help='Words to classify')
    parser.add_argument('-j', '--json', action='store_true', help='Output as JSON')
    parsed = parser.parse_args(args)

    results = [ClassificationResult.of(word, classify(word)) for word in parsed.words]
    if parsed.json:
        print(json.dumps([r.model_dump() for r in results], ensure_ascii=False))
    else:
        for r in results:
            print(f"{r.word}\t{r.script}")
    return 0


def main_info(args: list) -> int:
    """CLI entry point for info subcommand."""
    parser = argparse.ArgumentParser(
        description='Print the entries having a spelling or derived form',
        prog='yomitori info',
    )
    parser.add_argument('word', help='Spelling or inflected form to look up')
    add_dictionary_argument(parser)
    parsed = parser.parse_args(args)

    dictionary = load_dictionary(parsed.dictionary)
    if dictionary is None:
        return 1

    entries = sorted(dictionary.lookup(parsed.word), key=lambda e: e.sort_key())
    if not entries:
        print(f"Error: no entry for {parsed.word}", file=sys.stderr)
        return 1
    try:
        infos = [EntryInfo.from_entry(e).model_dump() for e in entries]
    except DictionaryError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    print(json.dumps(infos, ensure_ascii=False, indent=2))
    return 0


SUBCOMMANDS = {
    'conjugate': main_conjugate,
    'classify': main_classify,
    'info': main_info,
}


# ============================================================================
# Main
# ============================================================================

def main(args: Optional[list] = None) -> int:
    """Main CLI entry point."""
    args_list: List[str] = list(args if args is not None else sys.argv[1:])

    debug = '--debug' in args_list
    if debug:
        args_list.remove('--debug')
    setup_logging(debug)

    if args_list and args_list[0] in SUBCOMMANDS:
        return SUBCOMMANDS[args_list[0]](args_list[1:])

    parser = argparse.ArgumentParser(
        description='Insert the reading of kanji words in Japanese text',
        prog='yomitori',
        epilog='Subcommands:\n'
               '  yomitori conjugate WORD -p POS   Print derived forms\n'
               '  yomitori classify WORD...        Print script classes\n'
               '  yomitori info WORD -d PATH       Print entry ranking\n'
               'Add --debug to any command for debug logging.',
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument('text', nargs='*', help='Japanese text to annotate')
    add_dictionary_argument(parser)
    parser.add_argument('-j', '--json', action='store_true', help='Output as JSON')
    parser.add_argument('-v', '--version', action='store_true', help='Show version information')
    parsed = parser.parse_args(args_list)

    if parsed.version:
        print(f'yomitori {__version__}')
        return 0

    text = ' '.join(parsed.text) if parsed.text else ''
    if not text:
        parser.print_help()
        return 1

    dictionary = load_dictionary(parsed.dictionary)
    if dictionary is None:
        return 1

    try:
        annotated = AnnotationsWriter(dictionary).annotate(text)
    except DictionaryError as e:
        print(f'Error processing text: {e}', file=sys.stderr)
        return 1

    if parsed.json:
        print(AnnotationResult(text=text, annotated=annotated).model_dump_json())
    else:
        print(annotated)
    return 0


if __name__ == '__main__':
    sys.exit(main())
