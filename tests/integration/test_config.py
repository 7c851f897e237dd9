# Copyright 2015 Amazon.com, Inc. or its affiliates. All Rights Reserved.
#
# Licensed under the Apache License, Version 2.0 (the "License"). You
# may not use this file except in compliance with the License. A copy of
# the License is located at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# or in the "license" file accompanying this file. This file is
# distributed on an "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF
# ANY KIND, either express or implied. See the License for the specific
# language governing permissions and limitations under the License.
import os
import shutil
import tempfile
import unittest

from flexcomplete.app import FlexShell
from flexcomplete.autocomplete import CandidateMatcher
from flexcomplete.config import Config, SECTION_NAME


class ConfigTest(unittest.TestCase):

    def setUp(self):
        self.tempdir = tempfile.mkdtemp()
        self.config_file = os.path.join(self.tempdir, 'test-flexcompleterc')

    def tearDown(self):
        shutil.rmtree(self.tempdir)

    def create_shell(self):
        return FlexShell(None, CandidateMatcher(),
                         config_file=self.config_file)

    def test_template_copied_on_first_load(self):
        cfg = Config().load('flexcompleterc', self.config_file)
        assert os.path.isfile(self.config_file)
        assert cfg.filename == self.config_file
        assert cfg[SECTION_NAME].as_bool('match_fuzzy') == True
        assert cfg[SECTION_NAME]['theme'] == 'vim'

    def test_creates_missing_config_dir(self):
        self.config_file = os.path.join(self.tempdir, 'nested', 'rc')
        Config().load('flexcompleterc', self.config_file)
        assert os.path.isfile(self.config_file)

    def test_config_off(self):
        self.flex_shell = self.create_shell()
        self.flex_shell.matcher.match_fuzzy = False
        self.flex_shell.matcher.case_fold = False
        self.flex_shell.enable_vi_bindings = False
        self.flex_shell.show_completion_columns = False
        self.flex_shell.theme = 'none'
        self.flex_shell.save_config()
        self.flex_shell = self.create_shell()
        assert self.flex_shell.matcher.match_fuzzy == False
        assert self.flex_shell.matcher.case_fold == False
        assert self.flex_shell.enable_vi_bindings == False
        assert self.flex_shell.show_completion_columns == False
        assert self.flex_shell.theme == 'none'

    def test_config_on(self):
        self.flex_shell = self.create_shell()
        self.flex_shell.matcher.match_fuzzy = True
        self.flex_shell.matcher.case_fold = True
        self.flex_shell.enable_vi_bindings = True
        self.flex_shell.show_completion_columns = True
        self.flex_shell.theme = 'monokai'
        self.flex_shell.save_config()
        self.flex_shell.load_config()
        section = self.flex_shell.config_section
        assert section.as_bool('match_fuzzy') == True
        assert section.as_bool('case_fold') == True
        assert section.as_bool('enable_vi_bindings') == True
        assert section.as_bool('show_completion_columns') == True
        assert section['theme'] == 'monokai'
