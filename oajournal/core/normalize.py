"""Canonicalization of free-text journal names."""

import re
import string
import unicodedata

_WHITESPACE_RE = re.compile(r"\s+")
_ASCII_PUNCTUATION = frozenset(string.punctuation)


def _is_punctuation(char):
    # [:punct:] in a UTF-8 locale covers symbols too (e.g. "+", "®", "°", "€")
    if char in _ASCII_PUNCTUATION:
        return True
    return unicodedata.category(char)[0] in "PS"


def normalize(text):
    """Normalize a name for comparison.

    Lower-cases the text, replaces each punctuation character with a
    space, collapses runs of whitespace and trims the ends. The function
    is idempotent.

    Parameters
    ----------
    text : str
        Name to normalize.

    Returns
    -------
    str
        Normalized name, possibly empty.

    Examples
    --------
    >>> normalize("  Journal of Ecology: Letters ")
    'journal of ecology letters'
    """
    lowered = text.lower()
    spaced = "".join(" " if _is_punctuation(char) else char for char in lowered)
    return _WHITESPACE_RE.sub(" ", spaced).strip()


def normalize_many(texts):
    """Normalize every name of an iterable, keeping order."""
    return [normalize(text) for text in texts]
