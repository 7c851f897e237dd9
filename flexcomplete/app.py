"""flexcomplete shell application.

An interactive prompt that completes candidate names as you type,
using the fuzzy ranker (or plain prefix matching) to order them.

"""
import logging
import sys

from prompt_toolkit import PromptSession
from prompt_toolkit.auto_suggest import AutoSuggestFromHistory
from prompt_toolkit.formatted_text import PygmentsTokens
from prompt_toolkit.history import FileHistory, InMemoryHistory
from prompt_toolkit.shortcuts import CompleteStyle

from flexcomplete.config import Config, SECTION_NAME
from flexcomplete.fuzzy import calculate_score
from flexcomplete.keys import KeyManager
from flexcomplete.shellcomplete import FlexShellCompleter
from flexcomplete.style import StyleFactory
from flexcomplete.toolbar import Toolbar
from flexcomplete.utils import build_config_file_path


LOG = logging.getLogger(__name__)


def create_flex_shell(matcher, completer=None, **kwargs):
    if completer is None:
        completer = FlexShellCompleter(matcher)
    return FlexShell(completer, matcher, **kwargs)


class InputInterrupt(Exception):
    """Stops the input of commands.

    Raising `InputInterrupt` is useful to force a session rebuild, which
    is sometimes necessary in order for config changes to take effect.
    """
    pass


class ToggleHandler(object):
    """Base class for the ``.fuzzy`` and ``.casefold`` dot commands.

    With no argument the current state is printed, ``on`` and ``off``
    change it.  Both are idempotent.
    """
    NAME = None

    def __init__(self, output=sys.stdout, err=sys.stderr):
        self._output = output
        self._err = err

    def get(self, application):
        raise NotImplementedError("get")

    def set(self, application, value):
        raise NotImplementedError("set")

    def run(self, command, application):
        if len(command) == 1:
            state = 'on' if self.get(application) else 'off'
            self._output.write("%s: %s\n" % (self.NAME, state))
        elif len(command) == 2 and command[1] in ('on', 'off'):
            self.set(application, command[1] == 'on')
        else:
            self._err.write("Usage: .%s [on|off]\n" % self.NAME)


class FuzzyHandler(ToggleHandler):
    NAME = 'fuzzy'

    def get(self, application):
        return application.matcher.match_fuzzy

    def set(self, application, value):
        if value:
            application.matcher.enable()
        else:
            application.matcher.disable()


class CaseFoldHandler(ToggleHandler):
    NAME = 'casefold'

    def get(self, application):
        return application.matcher.case_fold

    def set(self, application, value):
        application.matcher.case_fold = value


class RankHandler(object):
    """Print every matching candidate with its score."""

    def __init__(self, output=sys.stdout, err=sys.stderr):
        self._output = output
        self._err = err

    def run(self, command, application):
        """Score the query against the shell's candidates.

        :type command: list
        :param command: The dot command as a list split
            on whitespace, e.g ``['.rank', 'abc']``

        :type application: FlexShell
        :param application: The application object.

        """
        if len(command) < 2:
            self._err.write("Usage: .rank QUERY\n")
            return
        query = ' '.join(command[1:])
        matcher = application.matcher
        for item in matcher.autocomplete(query):
            name = matcher.get_name(item)
            score = calculate_score(name, query, matcher.case_fold)
            self._output.write("%.4f  %s\n" % (score, name))


class DotCommandHandler(object):
    HANDLER_CLASSES = {
        'fuzzy': FuzzyHandler,
        'casefold': CaseFoldHandler,
        'rank': RankHandler,
    }

    def __init__(self, output=sys.stdout, err=sys.stderr):
        self._output = output
        self._err = err

    def handle_cmd(self, command, application):
        """Handles running a given dot command from a user.

        :type command: str
        :param command: The full dot command string, e.g. ``.fuzzy``,
            or ``.casefold off``.

        :type application: FlexShell
        :param application: The application object.

        """
        parts = command.split()
        cmd_name = parts[0][1:]
        if cmd_name not in self.HANDLER_CLASSES:
            self._unknown_cmd(parts, application)
        else:
            handler_cls = self.HANDLER_CLASSES[cmd_name]
            handler_cls(self._output, self._err).run(parts, application)

    def _unknown_cmd(self, cmd_parts, application):
        self._err.write("Unknown dot command: %s\n" % cmd_parts[0])


class FlexShell(object):
    """Encapsulates the prompt session, completer, matcher and config.

    Runs the input loop, printing the ranked candidates for every line
    entered and delegating dot commands to :class:`DotCommandHandler`.

    :type refresh_cli: bool
    :param refresh_cli: Flag to rebuild the prompt session.

    :type config_obj: :class:`configobj.ConfigObj`
    :param config_obj: Contains the config information for reading and writing.

    :type config_section: :class:`configobj.Section`
    :param config_section: Convenience attribute to access the main section
        of the config.

    :type matcher: :class:`CandidateMatcher`
    :param matcher: Matches input with candidates.  `FlexShell` sets
        and gets the attributes `match_fuzzy` and `case_fold`.

    :type enable_vi_bindings: bool
    :param enable_vi_bindings: If True, enables Vi key bindings. Else, Emacs
        key bindings are enabled.

    :type show_completion_columns: bool
    :param show_completion_columns: If True, completions are shown in
        multiple columns.  Else, completions are shown in a single
        scrollable column.

    :type theme: str
    :param theme: The pygments theme.
    """

    def __init__(self, completer, matcher, config_file=None,
                 output=sys.stdout, err=sys.stderr):
        self.completer = completer
        self.matcher = matcher
        self.history = InMemoryHistory()
        self._config_file = config_file
        self._output = output
        self._cli = None
        self.refresh_cli = False
        self.key_manager = None
        self._dot_cmd = DotCommandHandler(output, err)

        # These attrs come from the config file.
        self.config_obj = None
        self.config_section = None
        self.enable_vi_bindings = None
        self.show_completion_columns = None
        self.theme = None
        # Matcher settings forced for this session only, never saved.
        self._overrides = {}

        self.load_config()

    def load_config(self):
        """Loads the config from the config file or template."""
        config = Config()
        self.config_obj = config.load('flexcompleterc', self._config_file)
        self.config_section = self.config_obj[SECTION_NAME]
        self.matcher.match_fuzzy = self.config_section.as_bool(
            'match_fuzzy')
        self.matcher.case_fold = self.config_section.as_bool('case_fold')
        self.enable_vi_bindings = self.config_section.as_bool(
            'enable_vi_bindings')
        self.show_completion_columns = self.config_section.as_bool(
            'show_completion_columns')
        self.theme = self.config_section['theme']

    def apply_overrides(self, **overrides):
        """Force matcher settings for this session without saving them.

        An overridden setting is only written back by `save_config`
        if it was changed again after the override, e.g with F2.

        :type overrides: dict
        :param overrides: ``match_fuzzy`` and/or ``case_fold`` values.
        """
        for name, value in overrides.items():
            setattr(self.matcher, name, value)
        self._overrides.update(overrides)

    def _matcher_setting(self, name):
        value = getattr(self.matcher, name)
        if name in self._overrides and self._overrides[name] == value:
            return self.config_section.as_bool(name)
        return value

    def save_config(self):
        """Saves the config to the config file."""
        self.config_section['match_fuzzy'] = self._matcher_setting(
            'match_fuzzy')
        self.config_section['case_fold'] = self._matcher_setting('case_fold')
        self.config_section['enable_vi_bindings'] = self.enable_vi_bindings
        self.config_section['show_completion_columns'] = \
            self.show_completion_columns
        self.config_section['theme'] = self.theme
        self.config_obj.write()

    @property
    def cli(self):
        if self._cli is None or self.refresh_cli:
            self._cli = self.create_session(self.show_completion_columns)
            self.refresh_cli = False
        return self._cli

    def run(self):
        while True:
            try:
                text = self.cli.prompt()
            except InputInterrupt:
                pass
            except (KeyboardInterrupt, EOFError):
                self.save_config()
                break
            else:
                if text.strip() in ['quit', 'exit']:
                    self.save_config()
                    break
                self.handle_input(text)

    def handle_input(self, text):
        if text.startswith('.'):
            self._dot_cmd.handle_cmd(text, application=self)
        elif text.strip():
            for item in self.matcher.autocomplete(text.strip()):
                self._output.write("%s\n" % self.matcher.get_name(item))

    def stop_input_and_refresh_cli(self, event):
        """Stops input with an `InputInterrupt`, forces a session rebuild.

        The rebuild is necessary because changing options such as key
        bindings and single vs multi column menu completions require a
        new prompt session.

        :type event: :class:`prompt_toolkit.key_binding.KeyPressEvent`
        :param event: The key press that changed the option.
        """
        self.refresh_cli = True
        event.app.exit(exception=InputInterrupt())

    def create_key_manager(self):
        """Creates the :class:`KeyManager`.

        The inputs to KeyManager are expected to be callable, so we can't
        use the standard @property and @attrib.setter for these attributes.
        Lambdas cannot contain assignments so we're forced to define setters.

        :rtype: :class:`KeyManager`
        :return: A KeyManager with callables to set the toolbar options.
        """

        def set_match_fuzzy(match_fuzzy):
            if match_fuzzy:
                self.matcher.enable()
            else:
                self.matcher.disable()

        def set_case_fold(case_fold):
            self.matcher.case_fold = case_fold

        def set_enable_vi_bindings(enable_vi_bindings):
            self.enable_vi_bindings = enable_vi_bindings

        def set_show_completion_columns(show_completion_columns):
            self.show_completion_columns = show_completion_columns

        return KeyManager(
            lambda: self.matcher.match_fuzzy, set_match_fuzzy,
            lambda: self.matcher.case_fold, set_case_fold,
            lambda: self.enable_vi_bindings, set_enable_vi_bindings,
            lambda: self.show_completion_columns, set_show_completion_columns,
            self.stop_input_and_refresh_cli)

    def create_toolbar(self):
        return Toolbar(
            lambda: self.matcher.match_fuzzy,
            lambda: self.matcher.case_fold,
            lambda: self.enable_vi_bindings,
            lambda: self.show_completion_columns)

    def create_session(self, display_completions_in_columns):
        self.key_manager = self.create_key_manager()
        toolbar = self.create_toolbar()
        style = None
        if self.theme != 'none':
            style = StyleFactory(self.theme).style
        if display_completions_in_columns:
            complete_style = CompleteStyle.MULTI_COLUMN
        else:
            complete_style = CompleteStyle.COLUMN
        LOG.debug("Creating prompt session, vi=%s, columns=%s",
                  self.enable_vi_bindings, display_completions_in_columns)
        return PromptSession(
            u'flex> ',
            completer=self.completer,
            complete_while_typing=True,
            complete_style=complete_style,
            history=self.create_history(),
            auto_suggest=AutoSuggestFromHistory(),
            enable_history_search=False,
            bottom_toolbar=lambda: PygmentsTokens(toolbar.handler()),
            style=style,
            key_bindings=self.key_manager.bindings,
            vi_mode=self.enable_vi_bindings,
        )

    def create_history(self):
        if self._config_file is None:
            return FileHistory(build_config_file_path('history'))
        return self.history
