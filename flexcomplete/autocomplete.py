import logging

from flexcomplete.fuzzy import rank
from flexcomplete.substring import substring_search


LOG = logging.getLogger(__name__)


class CandidateMatcher(object):
    """Match a word against a collection of candidate items.

    This is the matching strategy the completer delegates to.  When
    fuzzy matching is enabled, candidates are scored and ranked with
    :func:`flexcomplete.fuzzy.rank`.  When it is disabled, the plain
    prefix search in :mod:`flexcomplete.substring` is used instead.

    The candidate items are opaque, ``get_name`` is the only thing
    that ever looks inside them.

    :type candidates: list
    :param candidates: The candidate items.

    :type get_name: callable
    :param get_name: Maps an item to its display name.  Defaults
        to ``str``.

    :type case_fold: bool
    :param case_fold: Whether matching ignores case.

    :type match_fuzzy: bool
    :param match_fuzzy: Whether fuzzy ranking is used.

    """
    def __init__(self, candidates=None, get_name=None, case_fold=False,
                 match_fuzzy=True):
        if candidates is None:
            candidates = []
        if get_name is None:
            get_name = str
        self.candidates = list(candidates)
        self.get_name = get_name
        self.case_fold = case_fold
        self.match_fuzzy = match_fuzzy

    def enable(self):
        """Delegate matching to the fuzzy ranker.

        Enabling an already enabled matcher does nothing.
        """
        if not self.match_fuzzy:
            LOG.debug("Fuzzy matching enabled.")
        self.match_fuzzy = True

    def disable(self):
        """Fall back to prefix matching.

        Disabling an already disabled matcher does nothing.
        """
        if self.match_fuzzy:
            LOG.debug("Fuzzy matching disabled.")
        self.match_fuzzy = False

    def autocomplete(self, word):
        """Given a word, return the matching candidate items."""
        if self.match_fuzzy:
            return rank(
                [(self.get_name(item), item) for item in self.candidates],
                word, self.case_fold)
        return substring_search(word, self.candidates,
                                case_fold=self.case_fold,
                                get_name=self.get_name)
