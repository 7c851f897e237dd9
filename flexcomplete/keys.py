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
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.keys import Keys


class KeyManager(object):
    """Builds the :class:`prompt_toolkit.key_binding.KeyBindings`.

    Handles toggling of:
        * Fuzzy or prefix matching.
        * Case sensitive or case folded matching.
        * Vi or Emacs key bindings.
        * Multi or single columns in the autocompletion menu.

    :type bindings: :class:`prompt_toolkit.key_binding.KeyBindings`
    :param bindings: The custom key bindings.
    """

    def __init__(self, get_match_fuzzy, set_match_fuzzy,
                 get_case_fold, set_case_fold,
                 get_enable_vi_bindings, set_enable_vi_bindings,
                 get_show_completion_columns, set_show_completion_columns,
                 stop_input_and_refresh_cli):
        self.bindings = self._create_key_bindings(
            get_match_fuzzy, set_match_fuzzy,
            get_case_fold, set_case_fold,
            get_enable_vi_bindings, set_enable_vi_bindings,
            get_show_completion_columns, set_show_completion_columns,
            stop_input_and_refresh_cli)

    def _create_key_bindings(self, get_match_fuzzy, set_match_fuzzy,
                             get_case_fold, set_case_fold,
                             get_enable_vi_bindings, set_enable_vi_bindings,
                             get_show_completion_columns,
                             set_show_completion_columns,
                             stop_input_and_refresh_cli):
        """Create and initialize the key bindings.

        The getters and setters are callables reading and writing the
        corresponding option on the shell.

        :type stop_input_and_refresh_cli: callable
        :param stop_input_and_refresh_cli: Takes the key press event,
            stops input and forces a rebuild of the prompt session so
            layout options take effect.

        :rtype: :class:`prompt_toolkit.key_binding.KeyBindings`
        :return: The custom key bindings.

        """
        assert callable(get_match_fuzzy)
        assert callable(set_match_fuzzy)
        assert callable(get_case_fold)
        assert callable(set_case_fold)
        assert callable(get_enable_vi_bindings)
        assert callable(set_enable_vi_bindings)
        assert callable(get_show_completion_columns)
        assert callable(set_show_completion_columns)
        assert callable(stop_input_and_refresh_cli)
        bindings = KeyBindings()

        @bindings.add(Keys.F2)
        def handle_f2(_):
            """Toggle fuzzy matching."""
            set_match_fuzzy(not get_match_fuzzy())

        @bindings.add(Keys.F3)
        def handle_f3(_):
            """Toggle case folding."""
            set_case_fold(not get_case_fold())

        @bindings.add(Keys.F4)
        def handle_f4(event):
            """Toggle Vi mode keybindings.

            Disabling Vi keybindings will enable Emacs keybindings.

            """
            set_enable_vi_bindings(not get_enable_vi_bindings())
            stop_input_and_refresh_cli(event)

        @bindings.add(Keys.F5)
        def handle_f5(event):
            """Toggle multiple column completions."""
            set_show_completion_columns(not get_show_completion_columns())
            stop_input_and_refresh_cli(event)

        @bindings.add(Keys.F10)
        def handle_f10(event):
            """Quit when the `F10` key is pressed."""
            event.app.exit(exception=EOFError)

        return bindings
