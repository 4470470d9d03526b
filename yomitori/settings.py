"""
Settings and configuration for Yomitori.

Values can be overridden through environment variables.
"""

import os
from pathlib import Path

# Data directory paths
PACKAGE_DIR = Path(__file__).parent
DATA_DIR = PACKAGE_DIR / "data"

# Jouyou kanji list (bundled with package)
DEFAULT_JOYO_PATH = DATA_DIR / "joyo.txt"
JOYO_PATH = Path(os.environ.get("YOMITORI_JOYO_PATH", DEFAULT_JOYO_PATH))

# JSON dictionary used by the command line when --dictionary is not given
DICTIONARY_PATH = os.environ.get("YOMITORI_DICTIONARY")

# Debug mode
DEBUG = os.environ.get("YOMITORI_DEBUG", "").lower() in ("1", "true", "yes")

# Approximate length of the longest entry in kanji characters.
# Used as the lookahead window when annotating text.
MAX_WORD_LENGTH = 16

# Annotation glyphs
OPEN = "〖"
CLOSE = "〗"
OPEN_WELL_KNOWN = "【"
CLOSE_WELL_KNOWN = "】"
ARROW = " → "
