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
import os
import shutil
import logging

from configobj import ConfigObj

from flexcomplete.utils import build_config_file_path


LOG = logging.getLogger(__name__)
SECTION_NAME = 'flexcomplete'


class Config(object):
    """Reads and writes the flexcompleterc template and user config file."""

    def load(self, config_template, config_file=None):
        """Read the user config merged over the packaged template.

        The user config file is created from the template the first
        time it's loaded.

        :type config_template: str
        :param config_template: The template file name, relative to the
            flexcomplete package.

        :type config_file: str
        :param config_file: (Optional) The user config file name,
            relative to ``~/.flexcomplete`` unless it's an absolute path.
            If None, the template file name is used.

        :rtype: :class:`configobj.ConfigObj`
        :return: The config information for reading and writing.
        """
        if config_file is None:
            config_file = config_template
        config_path = os.path.expanduser(build_config_file_path(config_file))
        template_path = os.path.join(os.path.dirname(__file__),
                                     config_template)
        self._copy_template_to_config(template_path, config_path)
        cfg = ConfigObj()
        cfg.filename = config_path
        cfg.merge(ConfigObj(template_path, interpolation=False))
        cfg.merge(ConfigObj(config_path, interpolation=False))
        return cfg

    def _copy_template_to_config(self, template_path, config_path):
        """Write the default config from the template if there's none yet.

        :raises: :class:`OSError <exceptions.OSError>`
        """
        if os.path.isfile(config_path):
            return
        config_dir = os.path.dirname(config_path)
        if not os.path.isdir(config_dir):
            os.makedirs(config_dir)
        LOG.debug("Creating %s from %s", config_path, template_path)
        shutil.copyfile(template_path, config_path)
