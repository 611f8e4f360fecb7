import sys
import logging
import argparse
from typing import Optional, Sequence

from torrentmeta.cli import parser
from torrentmeta.bencode import bdecode
from torrentmeta.torrent import fromTorrent
from torrentmeta.render import dumpJSON, formatInfo
from torrentmeta.error import BencodeError, MetainfoError


logger = logging.getLogger('torrentmeta')




class Main():

    def __init__(self, args: argparse.Namespace):
        self.args = args
        logging.basicConfig(
            level=logging.DEBUG if args.verbose else logging.WARNING,
            format='%(asctime)s - %(levelname)s - %(message)s',
            datefmt='%H:%M:%S',
            )
        # non-canonical input warnings go through the same handler
        logging.captureWarnings(True)

    def __call__(self) -> int:
        try:
            if self.args.command == 'decode':
                self._decode()
            elif self.args.command == 'info':
                self._info()
            else:
                return self.__exit(f"Invalid command: {self.args.command}.")
        except (BencodeError, MetainfoError) as e:
            return self.__exit(f"E: {e}.")
        except OSError as e:
            return self.__exit(f"E: Cannot read '{self.args.torrent}' ({e.strerror or e}).")
        return 0

    def _decode(self):
        # argv was decoded with surrogateescape, this restores the raw bytes
        bchars = self.args.value.encode('utf-8', errors='surrogateescape')
        logger.debug('Decoding %d bytes from command line', len(bchars))
        print(dumpJSON(bdecode(bchars, warn_non_canonical=True)))

    def _info(self):
        torrent = fromTorrent(self.args.torrent, warn_non_canonical=True)
        for line in formatInfo(torrent):
            print(line)

    @staticmethod
    def __exit(message: str) -> int:
        print(message, file=sys.stderr)
        return 1




def main(argv: Optional[Sequence[str]] = None) -> int:
    return Main(parser.parse_args(argv))()




if __name__ == '__main__':
    sys.exit(main())
