"""Autocompletion integration with python prompt toolkit.

This module integrates the low level matching functionality
provided in flexcomplete.autocomplete and integrates it with the
interface required for autocompletion in the python prompt
toolkit.

If you're interested in the heavy lifting of the scoring
logic, see flexcomplete.fuzzy.

"""
import logging
from prompt_toolkit.completion import Completer, Completion


LOG = logging.getLogger(__name__)


class FlexShellCompleter(Completer):
    """Completer class for the flexcomplete shell.

    Not to be confused with the CandidateMatcher, which is more
    low level, and can be reused in contexts other than
    prompt_toolkit.

    :type matcher: :class:`flexcomplete.autocomplete.CandidateMatcher`
    :param matcher: Decides which candidates match and in what order.

    :type get_meta: callable
    :param get_meta: (Optional) Maps a candidate item to the text shown
        beside it in the completion menu.

    """
    def __init__(self, matcher, get_meta=None):
        self._matcher = matcher
        self._get_meta = get_meta

    def _convert_to_prompt_completions(self, items, word_before_cursor):
        # Converts the items from the matcher to Completion() objects
        # used by prompt_toolkit, replacing the word before the cursor.
        location = -len(word_before_cursor)
        for item in items:
            name = self._matcher.get_name(item)
            display_meta = ''
            if self._get_meta is not None:
                display_meta = self._get_meta(item)
            yield Completion(name, location,
                             display=name, display_meta=display_meta)

    def get_completions(self, document, complete_event):
        word_before_cursor = document.get_word_before_cursor(WORD=True)
        items = self._matcher.autocomplete(word_before_cursor)
        LOG.debug("%s completions for %r", len(items), word_before_cursor)
        for c in self._convert_to_prompt_completions(items,
                                                     word_before_cursor):
            yield c
