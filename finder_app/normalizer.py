from __future__ import annotations

import string
from typing import List

# Same set as POSIX [:punct:]
_PUNCTUATION_TABLE = str.maketrans("", "", string.punctuation)


def normalize(token: str) -> str:
    """Lower-case a token and strip ASCII punctuation.

    This is the lookup key used by the word index, so two tokens share a node iff they
    are the same word ignoring case and punctuation. Whitespace is kept, which lets a
    normalized phrase still be split into words.
    """
    return token.lower().translate(_PUNCTUATION_TABLE)


def tokenize(text: str) -> List[str]:
    return text.split()
