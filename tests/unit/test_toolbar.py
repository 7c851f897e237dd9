# Copyright 2015 Amazon.com, Inc. or its affiliates. All Rights Reserved.
#
# Licensed under the Apache License, Version 2.0 (the "License"). You
# may not use this file except in compliance with the License. A copy of
# the License is located at
#
#     http://aws.amazon.com/apache2.0/
#
# or in the "license" file accompanying this file. This file is
# distributed on an "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF
# ANY KIND, either express or implied. See the License for the specific
# language governing permissions and limitations under the License.
import unittest
from pygments.token import Token

from flexcomplete.toolbar import Toolbar


class ToolbarTest(unittest.TestCase):

    def setUp(self):
        self.state = {}
        self.toolbar = Toolbar(
            lambda: self.state['match_fuzzy'],
            lambda: self.state['case_fold'],
            lambda: self.state['enable_vi_bindings'],
            lambda: self.state['show_completion_columns'])

    def test_toolbar_on(self):
        self.state.update(match_fuzzy=True, case_fold=True,
                          enable_vi_bindings=True,
                          show_completion_columns=True)
        expected = [
            (Token.Toolbar.On, ' [F2] Fuzzy: ON '),
            (Token.Toolbar.On, ' [F3] Ignore case: ON '),
            (Token.Toolbar.On, ' [F4] Keys: Vi '),
            (Token.Toolbar.On, ' [F5] Multi Column '),
            (Token.Toolbar, ' [F10] Exit ')]
        assert expected == self.toolbar.handler()

    def test_toolbar_off(self):
        self.state.update(match_fuzzy=False, case_fold=False,
                          enable_vi_bindings=False,
                          show_completion_columns=False)
        expected = [
            (Token.Toolbar.Off, ' [F2] Fuzzy: OFF '),
            (Token.Toolbar.Off, ' [F3] Ignore case: OFF '),
            (Token.Toolbar.On, ' [F4] Keys: Emacs '),
            (Token.Toolbar.On, ' [F5] Single Column '),
            (Token.Toolbar, ' [F10] Exit ')]
        assert expected == self.toolbar.handler()
