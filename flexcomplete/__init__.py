import argparse
import logging
import sys

from flexcomplete import app
from flexcomplete import autocomplete
from flexcomplete import loaders
from flexcomplete.fuzzy import calculate_score, fuzzy_search, rank


__version__ = '0.1.0'

__all__ = ['calculate_score', 'fuzzy_search', 'rank', 'main']


def configure_file_logging(filename):
    handler = logging.FileHandler(filename)
    handler.setFormatter(logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s'))
    logger = logging.getLogger('flexcomplete')
    logger.setLevel(logging.DEBUG)
    logger.addHandler(handler)


def main(args=None):
    parser = argparse.ArgumentParser(
        prog='flexcomplete',
        description='Interactively complete names from a candidate file.')
    parser.add_argument('candidates', help='A text file with one candidate '
                        'per line, or a JSON list of names or objects.')
    parser.add_argument('-q', '--query', help='Print the ranked matches '
                        'for QUERY and exit instead of starting the shell. '
                        'Matching settings come from the config file, as '
                        'in the shell.')
    parser.add_argument('--name-key', default='name', help='The key holding '
                        'the candidate name in JSON objects.')
    parser.add_argument('--no-case-fold', action='store_true',
                        help='Match case exactly.')
    parser.add_argument('--no-fuzzy', action='store_true',
                        help='Use prefix matching instead of fuzzy ranking.')
    parser.add_argument('--log-file', help='Write debug logs to this file.')
    parsed = parser.parse_args(args)

    if parsed.log_file:
        configure_file_logging(parsed.log_file)

    loader = loaders.CandidateLoader(name_key=parsed.name_key)
    try:
        items, get_name = loader.load_candidates(parsed.candidates)
    except loaders.CandidateLoadError as e:
        sys.stderr.write("Unable to load candidates: %s\n" % e)
        return 1
    matcher = autocomplete.CandidateMatcher(items, get_name)
    shell = app.create_flex_shell(matcher)
    # Command line flags win over the config file for this run only.
    overrides = {}
    if parsed.no_case_fold:
        overrides['case_fold'] = False
    if parsed.no_fuzzy:
        overrides['match_fuzzy'] = False
    shell.apply_overrides(**overrides)

    if parsed.query is not None:
        for item in matcher.autocomplete(parsed.query):
            sys.stdout.write("%s\n" % get_name(item))
        return 0
    shell.run()
    return 0


if __name__ == '__main__':
    sys.exit(main())
