import re
from functools import lru_cache

# Runs of whitespace or punctuation delimit words
SPACE_OR_PUNCTUATION = re.compile(r"[\W_]+")

# Word characters under SPACE_OR_PUNCTUATION, so "_" is a boundary here too
_WORD_CHAR = r"[^\W_]"


@lru_cache(maxsize=1024)
def word_pattern(word: str) -> re.Pattern[str]:
    """Case-insensitive whole-word pattern for ``word``."""
    return re.compile(
        rf"(?<!{_WORD_CHAR}){re.escape(word)}(?!{_WORD_CHAR})", re.IGNORECASE
    )


def count_separators(text: str, start: int, stop: int) -> int:
    """Number of separator runs in ``text[start:stop]``."""
    return len(SPACE_OR_PUNCTUATION.findall(text, start, stop))
