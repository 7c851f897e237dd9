import unittest

from flexcomplete.loaders import CandidateLoader, CandidateLoadError
from flexcomplete.utils import InMemoryFSLayer


class CandidateLoaderTest(unittest.TestCase):

    def setUp(self):
        self.file_mapping = {}
        self.loader = CandidateLoader(InMemoryFSLayer(self.file_mapping))

    def test_load_text_candidates(self):
        self.file_mapping['/names.txt'] = 'describe\n\n  delete  \ncreate\n'
        items, get_name = self.loader.load_candidates('/names.txt')
        assert items == ['describe', 'delete', 'create']
        assert get_name('describe') == 'describe'

    def test_load_json_names(self):
        self.file_mapping['/names.json'] = '["foo", "bar"]'
        items, get_name = self.loader.load_candidates('/names.json')
        assert items == ['foo', 'bar']

    def test_load_json_objects(self):
        self.file_mapping['/names.json'] = (
            '[{"name": "foo", "doc": "first"}, '
            '{"name": "bar", "doc": "second"}]')
        items, get_name = self.loader.load_candidates('/names.json')
        assert items[1] == {'name': 'bar', 'doc': 'second'}
        assert [get_name(item) for item in items] == ['foo', 'bar']

    def test_custom_name_key(self):
        loader = CandidateLoader(InMemoryFSLayer(self.file_mapping),
                                 name_key='title')
        self.file_mapping['/names.json'] = '[{"title": "foo"}]'
        items, get_name = loader.load_candidates('/names.json')
        assert get_name(items[0]) == 'foo'

    def test_missing_file(self):
        with self.assertRaises(CandidateLoadError):
            self.loader.load_candidates('/does/not/exist.txt')

    def test_malformed_json(self):
        self.file_mapping['/names.json'] = '["foo",'
        with self.assertRaises(CandidateLoadError):
            self.loader.load_candidates('/names.json')

    def test_json_must_be_a_list(self):
        self.file_mapping['/names.json'] = '{"name": "foo"}'
        with self.assertRaises(CandidateLoadError):
            self.loader.load_candidates('/names.json')

    def test_json_objects_need_a_name(self):
        self.file_mapping['/names.json'] = '[{"name": "foo"}, {"doc": "x"}]'
        with self.assertRaises(CandidateLoadError):
            self.loader.load_candidates('/names.json')
