__all__ = ['parser']

import argparse
from pathlib import Path

from torrentmeta.version import TM_VER




class _CustomHelpFormatter(argparse.HelpFormatter):

    def __init__(self, prog):
        super().__init__(prog, max_help_position=50, width=100)

    def _format_action_invocation(self, action):
        if not action.option_strings or action.nargs == 0:
            return super()._format_action_invocation(action)
        default = self._get_default_metavar_for_optional(action)
        args_string = self._format_args(action, default)
        return ', '.join(action.option_strings) + ' ' + args_string




parser = argparse.ArgumentParser(prog='tm', formatter_class=lambda prog: _CustomHelpFormatter(prog))

parser.add_argument(
    '-v',
    '--verbose',
    dest='verbose',
    action='store_true',
    help='show debug messages',
    )
parser.add_argument('--version', action='version', version=TM_VER)

subparsers = parser.add_subparsers(dest='command', required=True, metavar='command')

decode_parser = subparsers.add_parser(
    'decode',
    help='decode a bencoded value and print it as json',
    formatter_class=lambda prog: _CustomHelpFormatter(prog),
    )
decode_parser.add_argument(
    'value',
    type=str,
    help='the bencoded value, e.g. d3:foo3:bare',
    metavar='value',
    )

info_parser = subparsers.add_parser(
    'info',
    help='print the tracker, size, info hash and piece hashes of a torrent',
    formatter_class=lambda prog: _CustomHelpFormatter(prog),
    )
info_parser.add_argument(
    'torrent',
    type=Path,
    help='path to the torrent file',
    metavar='path',
    )
