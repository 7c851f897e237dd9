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
from pygments.util import ClassNotFound
from pygments.styles import get_style_by_name
from prompt_toolkit.styles import Style
from prompt_toolkit.styles import merge_styles
from prompt_toolkit.styles import style_from_pygments_cls
from prompt_toolkit.styles import style_from_pygments_dict


class StyleFactory(object):
    """Provides styles for the autocomplete menu and the toolbar.

    :type style: :class:`prompt_toolkit.styles.BaseStyle`
    :param style: The merged prompt_toolkit style.
    """

    def __init__(self, style_name):
        self.style = self.style_factory(style_name)

    def style_factory(self, style_name):
        """Builds a prompt_toolkit style from the named pygments style.

        If the specified style is not found, the vim style is used.

        :type style_name: str
        :param style_name: The pygments style name.

        :rtype: :class:`prompt_toolkit.styles.BaseStyle`
        :return: The style for the prompt session.
        """
        try:
            style = get_style_by_name(style_name)
        except ClassNotFound:
            style = get_style_by_name('vim')

        return merge_styles([
            style_from_pygments_cls(style),
            style_from_pygments_dict({
                Token.Toolbar: 'bg:#222222 #cccccc',
                Token.Toolbar.Off: 'bg:#222222 #696969',
                Token.Toolbar.On: 'bg:#222222 #ffffff',
            }),
            Style.from_dict({
                'bottom-toolbar': 'noreverse',
                'completion-menu.completion.current': 'bg:#00aaaa #000000',
                'completion-menu.completion': 'bg:#008888 #ffffff',
                'completion-menu.meta.completion.current':
                    'bg:#00aaaa #000000',
                'completion-menu.meta.completion': 'bg:#00aaaa #ffffff',
            }),
        ])
