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


def substring_search(word, collection, case_fold=False, get_name=str):
    """Find all matches in the `collection` for the specified `word`.

    If `word` is empty, returns all items in `collection`.

    :type word: str
    :param word: The prefix to search for.

    :type collection: collection, usually a list
    :param collection: A collection of items to match.

    :type case_fold: bool
    :param case_fold: If True, the prefix comparison ignores case.

    :type get_name: callable
    :param get_name: Maps an item in `collection` to the name that
        gets compared against `word`.

    :rtype: list
    :return: The matching items from collection, sorted by name.
    """
    if case_fold:
        word = word.lower()
        return [item for item in sorted(collection, key=get_name)
                if get_name(item).lower().startswith(word)]
    return [item for item in sorted(collection, key=get_name)
            if get_name(item).startswith(word)]
