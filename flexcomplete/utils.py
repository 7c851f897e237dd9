"""Utility module for misc flexcomplete functions."""
import os


class FileReadError(Exception):
    pass


def build_config_file_path(file_name):
    return os.path.join(os.path.expanduser('~'), '.flexcomplete', file_name)


class FSLayer(object):
    """Reads candidate files from disk.

    The loader only talks to this interface, so tests can swap in
    :class:`InMemoryFSLayer`.

    """
    def file_contents(self, filename):
        """Return the text contents of ``filename``."""
        try:
            with open(filename, 'r') as f:
                return f.read()
        except (OSError, IOError) as e:
            raise FileReadError(str(e))


class InMemoryFSLayer(object):
    """Same interface as FSLayer, backed by a dict of path -> text."""

    def __init__(self, file_mapping):
        self._file_mapping = file_mapping

    def file_contents(self, filename):
        try:
            return self._file_mapping[filename]
        except KeyError:
            raise FileReadError(filename)
