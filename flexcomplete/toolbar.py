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
from pygments.token import Token


class Toolbar(object):
    """Show the current matching options in a tool bar.

    :type handler: callable
    :param handler: Wraps the callable `get_toolbar_items`.

    """

    def __init__(self, get_match_fuzzy, get_case_fold,
                 get_enable_vi_bindings, get_show_completion_columns):
        self.handler = self._create_toolbar_handler(
            get_match_fuzzy, get_case_fold,
            get_enable_vi_bindings, get_show_completion_columns)

    def _create_toolbar_handler(self, get_match_fuzzy, get_case_fold,
                                get_enable_vi_bindings,
                                get_show_completion_columns):
        """Create the toolbar handler.

        :type get_match_fuzzy: callable
        :param get_match_fuzzy: Gets the fuzzy matching config.

        :type get_case_fold: callable
        :param get_case_fold: Gets the case folding config.

        :type get_enable_vi_bindings: callable
        :param get_enable_vi_bindings: Gets the vi (or emacs) key bindings
            config.

        :type get_show_completion_columns: callable
        :param get_show_completion_columns: Gets the show completions in
            multiple or single columns config.

        :rtype: callable
        :returns: get_toolbar_items.

        """
        assert callable(get_match_fuzzy)
        assert callable(get_case_fold)
        assert callable(get_enable_vi_bindings)
        assert callable(get_show_completion_columns)

        def get_toolbar_items():
            """Return the toolbar items.

            :rtype: list
            :return: A list of (pygments.Token.Toolbar, str).
            """
            if get_match_fuzzy():
                match_fuzzy_token = Token.Toolbar.On
                match_fuzzy_cfg = 'ON'
            else:
                match_fuzzy_token = Token.Toolbar.Off
                match_fuzzy_cfg = 'OFF'
            if get_case_fold():
                case_fold_token = Token.Toolbar.On
                case_fold_cfg = 'ON'
            else:
                case_fold_token = Token.Toolbar.Off
                case_fold_cfg = 'OFF'
            if get_enable_vi_bindings():
                enable_vi_bindings_cfg = 'Vi'
            else:
                enable_vi_bindings_cfg = 'Emacs'
            if get_show_completion_columns():
                show_columns_cfg = 'Multi'
            else:
                show_columns_cfg = 'Single'
            return [
                (match_fuzzy_token,
                 ' [F2] Fuzzy: {0} '.format(match_fuzzy_cfg)),
                (case_fold_token,
                 ' [F3] Ignore case: {0} '.format(case_fold_cfg)),
                (Token.Toolbar.On,
                 ' [F4] Keys: {0} '.format(enable_vi_bindings_cfg)),
                (Token.Toolbar.On,
                 ' [F5] {0} Column '.format(show_columns_cfg)),
                (Token.Toolbar,
                 ' [F10] Exit ')
            ]

        return get_toolbar_items
