"""Fuzzy scorer for flexcomplete.

This is the scorer used by the completer to decide how well
an abbreviation typed by the user fits a candidate name.

The main things it cares about:

* Every character of the abbreviation has to be found in
  the candidate, each at its own position.  A single missing
  character means the candidate is not a match at all, there
  is no partial credit.
* Matches toward the end of the candidate are worth more
  than matches toward the start, so "cba" ranks above
  "abc" for the abbreviation "a".  Candidates whose matched
  characters are compact and trailing (the abbreviation is
  almost a suffix) float to the top.

High Level Idea
===============

Each abbreviation character, taken left to right, claims the
rightmost occurrence of itself in the candidate that no earlier
character has claimed yet.  The claimed indices form a position
mask where index ``i`` is worth ``2 ** i``.  Dividing the mask by
``2 ** len(word) - 1`` (every position claimed) gives a score
between 0 and 1.

The allocation is greedy and never backtracks: once a position
is claimed it stays claimed, even if a later character would have
been better served by it.

"""
import logging


LOG = logging.getLogger(__name__)

# Score for an empty abbreviation, regardless of the word.
EMPTY = 0.8
# Score of a fully saturated position mask.
MATCH = 1.0
NO_MATCH = 0.0


def locate(target, word, upper_bound, case_fold=False):
    """Find the rightmost occurrence of ``target`` in ``word[:upper_bound]``.

    :type target: str
    :param target: A single character to search for.

    :type word: str
    :param word: The string to search in.

    :type upper_bound: int
    :param upper_bound: Only indices below this value are considered.

    :type case_fold: bool
    :param case_fold: If True, ``target`` also matches its upper and
        lower case forms.

    :rtype: int or None
    :return: The index of the match, or None if there isn't one.

    """
    if case_fold:
        accepted = (target, target.upper(), target.lower())
    else:
        accepted = (target,)
    for i in range(upper_bound - 1, -1, -1):
        if word[i] in accepted:
            return i
    return None


def allocate_positions(word, abbreviation, case_fold=False):
    """Claim one position in ``word`` for every abbreviation character.

    Returns the claimed positions as an int bit mask (bit ``i`` set
    means ``word[i]`` was claimed), or None if some character of the
    abbreviation can't be placed.

    """
    mask = 0
    for char in abbreviation:
        ceiling = len(word)
        while True:
            i = locate(char, word, ceiling, case_fold)
            if i is None:
                return None
            if not mask & (1 << i):
                break
            # Already claimed by an earlier character, keep looking left.
            ceiling = i
        mask |= 1 << i
    return mask


def calculate_score(word, abbreviation, case_fold=False):
    """Calculate how well the abbreviation matches the word.

    Returns a float in [0, 1].  The score is a float, so a word with
    more than about 1075 characters whose matches all sit near its
    start scores 0.0, the same as no match, and `rank` drops it.
    """
    # See the module docstring for a high level description
    # of what we're trying to do.
    if not abbreviation:
        return EMPTY
    # * If the abbreviation is larger than the word, we know
    #   immediately that this can't be a match.
    if len(abbreviation) > len(word):
        return NO_MATCH
    mask = allocate_positions(word, abbreviation, case_fold)
    if mask is None:
        return NO_MATCH
    # Both are ints, so true division is exact up to the final
    # rounding no matter how long the word is.
    return mask / ((1 << len(word)) - 1) * MATCH


def rank(candidates, query, case_fold=False, executor=None):
    """Order candidate items by how well their names match ``query``.

    :type candidates: iterable of (str, object)
    :param candidates: Pairs of a candidate name and the item that
        should be returned for it.

    :type query: str
    :param query: The abbreviation typed by the user.

    :type case_fold: bool
    :param case_fold: Whether matching ignores case.

    :type executor: :class:`concurrent.futures.Executor`
    :param executor: (Optional) Scores are computed through
        ``executor.map`` when given.  The ordering is the same
        either way.

    :rtype: list
    :return: The items whose score is above zero, best first.  Items
        with equal scores keep their input order.

    """
    candidates = list(candidates)
    names = [name for name, _ in candidates]
    if executor is None:
        scores = [calculate_score(name, query, case_fold) for name in names]
    else:
        scores = list(executor.map(
            calculate_score, names,
            [query] * len(names), [case_fold] * len(names)))
    matches = [(item, score) for (_, item), score in zip(candidates, scores)
               if score > NO_MATCH]
    LOG.debug("%s of %s candidates matched %r",
              len(matches), len(candidates), query)
    # sorted() is stable, and reverse=True keeps ties in input order.
    return [m[0] for m in sorted(matches, key=lambda x: x[1], reverse=True)]


def fuzzy_search(user_input, corpus, case_fold=False):
    """Rank a collection of plain strings against ``user_input``."""
    return rank(((word, word) for word in corpus), user_input, case_fold)
