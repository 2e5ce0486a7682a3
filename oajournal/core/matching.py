"""Selection of the best candidate name for a journal query."""

from rapidfuzz.distance import OSA

from oajournal.core.normalize import normalize
from oajournal.core.normalize import normalize_many

EXACT = "exact"
DISTANCE = "distance"


def edit_distance(a, b):
    """Optimal string alignment distance between two strings.

    Counts insertions, deletions, substitutions and transpositions of
    adjacent characters, each substring being edited at most once.
    """
    return OSA.distance(a, b)


def select(query, candidates):
    """Pick the candidate that best matches ``query``.

    Both the query and the candidates are normalized first. A candidate
    equal to the query is returned with method ``"exact"`` when it is the
    only one. Otherwise (no exact match, or several tied exact matches)
    the candidate with the smallest edit distance is returned with method
    ``"distance"``; equal distances resolve to the earliest candidate.

    This is a best-effort heuristic: the closest name is returned even
    when it is far from the query.

    Parameters
    ----------
    query : str
        Journal name as supplied by the user.
    candidates : sequence of str
        Candidate names in search order. Must not be empty.

    Returns
    -------
    tuple of (int, str)
        Index of the selected candidate and the match method.

    Raises
    ------
    ValueError
        If ``candidates`` is empty.
    """
    if not candidates:
        raise ValueError("candidates must contain at least one name")

    target = normalize(query)
    names = normalize_many(candidates)

    exact = [i for i, name in enumerate(names) if name == target]
    if len(exact) == 1:
        return exact[0], EXACT

    distances = [edit_distance(target, name) for name in names]
    best = min(range(len(distances)), key=distances.__getitem__)
    return best, DISTANCE
