"""Load candidate collections from disk.

Two formats are understood:

* Plain text, one candidate name per line.  Blank lines are skipped.
* JSON (any file ending in ``.json``), either a list of names or a
  list of objects that carry the name under ``name_key``.

"""
import json
import logging
import operator

from flexcomplete.utils import FSLayer, FileReadError


LOG = logging.getLogger(__name__)


class CandidateLoadError(Exception):
    """Raised when a candidate file could not be loaded."""


class CandidateLoader(object):
    def __init__(self, fslayer=None, name_key='name'):
        if fslayer is None:
            fslayer = FSLayer()
        self._fslayer = fslayer
        self.name_key = name_key

    def load_candidates(self, filename):
        """Load the candidate items in ``filename``.

        :rtype: tuple
        :return: ``(items, get_name)`` where ``get_name`` maps an
            item to its display name.

        """
        try:
            contents = self._fslayer.file_contents(filename)
        except FileReadError as e:
            raise CandidateLoadError(str(e))
        if filename.endswith('.json'):
            items, get_name = self._parse_json(filename, contents)
        else:
            items = [line.strip() for line in contents.splitlines()
                     if line.strip()]
            get_name = str
        LOG.debug("Loaded %s candidates from %s", len(items), filename)
        return items, get_name

    def _parse_json(self, filename, contents):
        try:
            data = json.loads(contents)
        except ValueError as e:
            raise CandidateLoadError("%s: %s" % (filename, e))
        if not isinstance(data, list):
            raise CandidateLoadError(
                "%s: expected a JSON list of candidates" % filename)
        if all(isinstance(item, dict) for item in data) and data:
            missing = [item for item in data if self.name_key not in item]
            if missing:
                raise CandidateLoadError(
                    "%s: %s candidates have no %r key"
                    % (filename, len(missing), self.name_key))
            return data, operator.itemgetter(self.name_key)
        return [str(item) for item in data], str
