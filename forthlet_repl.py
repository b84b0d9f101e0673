import argparse
import logging
import readline
import sys

import forthlet
from forthlet.parser import LEGACY_EXTRA_CHARS

PROMPT = ''
OK = ' ok'
ERROR_FORMAT = ' ? %s'

logger = logging.getLogger('forthlet_repl')


def respond(evaluator, line):
    """ Evaluates one line and returns what the prompt should say about it. """
    try:
        evaluator.eval(line)
    except forthlet.ForthError as e:
        return ERROR_FORMAT % e
    return evaluator.format_stack() + OK


def forth_repl(evaluator):
    print('Type "BYE" or input an end of file (Ctrl+D) to quit.')

    cmd = input(PROMPT)
    while cmd.strip().upper() != 'BYE':
        print(respond(evaluator, cmd))
        cmd = input(PROMPT)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description='Interactive forthlet prompt.')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='print status messages')
    parser.add_argument('--debug', action='store_true',
                        help='print debug messages')
    parser.add_argument('--legacy-charset', action='store_true',
                        help='also accept %s in input' % LEGACY_EXTRA_CHARS)
    return parser.parse_args(argv)


def main(argv=None):
    options = parse_args(argv)

    logging.basicConfig(level=logging.WARNING)
    if options.debug:
        logging.getLogger().setLevel(logging.DEBUG)
    elif options.verbose:
        logging.getLogger().setLevel(logging.INFO)

    extra_chars = LEGACY_EXTRA_CHARS if options.legacy_charset else ''
    logger.info('starting evaluator (extra characters: %r)', extra_chars)

    try:
        forth_repl(forthlet.new(extra_chars))
    except EOFError:
        pass  # perfectly acceptable
    return 0


if __name__ == '__main__':
    sys.exit(main())
