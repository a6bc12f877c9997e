"""
Main entry point for Wordle Filter application.
"""

import argparse
import logging
import sys
from pathlib import Path

# Add src to path if running from project root
sys.path.insert(0, str(Path(__file__).parent))

from config import load_settings
from dictionary import get_word_list
from session import Session

DESCRIPTION = """Narrow down Wordle candidates. Enter letter constraints round by round
and see the words that still fit, most frequent first."""


def make_argparser():
    parser = argparse.ArgumentParser(description=DESCRIPTION)
    options = parser.add_argument_group('Options')
    options.add_argument('-w', '--words', type=Path,
        help='Word list file ("+word"/"-word" or "word [rank]" lines). Default: data/words.txt')
    options.add_argument('-L', '--word-length', type=int,
        help='Number of letters per word. Default: 5')
    options.add_argument('-n', '--max-words', type=int,
        help='Number of matches to show. Default: 10')
    options.add_argument('-r', '--common-rank', type=int,
        help='Words with this rank or higher are shown greyed out.')
    options.add_argument('-c', '--config', type=Path,
        help='Settings JSON file. Default: config/settings.json')
    options.add_argument('--cli', action='store_true',
        help='Use the terminal instead of the GUI.')
    logs = parser.add_argument_group('Logging')
    logs.add_argument('-l', '--log', type=argparse.FileType('w'), default=sys.stderr,
        help='Print log messages to this file instead of to stderr.')
    volume = logs.add_mutually_exclusive_group()
    volume.add_argument('-q', '--quiet', dest='volume', action='store_const', const=logging.CRITICAL,
        default=logging.WARNING)
    volume.add_argument('-v', '--verbose', dest='volume', action='store_const', const=logging.INFO)
    volume.add_argument('-D', '--debug', dest='volume', action='store_const', const=logging.DEBUG)
    return parser


def build_session(args) -> Session:
    """Load settings and word list, command line flags taking precedence."""
    settings = load_settings(args.config)
    for key in ('words', 'word_length', 'max_words', 'common_rank'):
        value = getattr(args, key)
        if value is not None:
            settings['words_file' if key == 'words' else key] = value

    if settings['word_length'] < 1 or settings['max_words'] < 1:
        raise ValueError('Word length and number of matches must be positive')

    store = get_word_list(settings['words_file'], settings['word_length'])
    return Session(
        store,
        max_words=settings['max_words'],
        common_cutoff=settings['common_rank'],
        starting_words=settings['starting_words']
    )


def main(argv=None):
    """Launch Wordle Filter in the GUI or the terminal."""
    parser = make_argparser()
    args = parser.parse_args(sys.argv[1:] if argv is None else argv)

    logging.basicConfig(stream=args.log, level=args.volume, format='%(message)s')

    try:
        session = build_session(args)
    except (OSError, ValueError) as e:
        logging.critical(f'Error: {e}')
        return 1

    if args.cli:
        from cli import run
        run(session, use_color=sys.stdout.isatty())
        return 0

    import tkinter as tk
    from ui import WordleFilterApp

    root = tk.Tk()
    WordleFilterApp(root, session)
    root.mainloop()
    return 0


if __name__ == "__main__":
    sys.exit(main())
