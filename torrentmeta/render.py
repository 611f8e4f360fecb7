'''Human readable projections of decoded values and torrents.'''

__all__ = ['toJSON', 'dumpJSON', 'formatInfo']

import json
import posixpath
from typing import Any

from torrentmeta.type import Value
from torrentmeta.config import ENCODING
from torrentmeta.torrent import Torrent




def toJSON(obj: Value) -> Any:
    '''
    Project a decoded value onto json types.
    Byte strings become text, bytes that are not valid utf-8 are replaced by U+FFFD.
    '''
    if isinstance(obj, bytes):
        return obj.decode(ENCODING, errors='replace')
    elif isinstance(obj, bool):
        raise TypeError('Decoded values never contain bool.')
    elif isinstance(obj, int):
        return obj
    elif isinstance(obj, list):
        return [toJSON(elem) for elem in obj]
    elif isinstance(obj, dict):
        return {key.decode(ENCODING, errors='replace'): toJSON(val) for key, val in obj.items()}
    else:
        raise TypeError(f'Expect int|bytes|list|dict, not {type(obj)}.')




def dumpJSON(obj: Value) -> str:
    '''Return the compact json text of a decoded value, e.g. `{"foo":"bar"}`.'''
    return json.dumps(toJSON(obj), ensure_ascii=False, separators=(',', ':'))




def formatInfo(torrent: Torrent) -> list[str]:
    '''Return the lines describing a torrent: tracker, size, info hash and piece hashes.'''
    info = torrent.info
    ret = [
        f'Tracker URL: {torrent.announce}',
        f'Length: {info.length}',
        f'Info Hash: {torrent.hash}',
        f'Piece Length: {info.piece_length}',
        'Piece Hashes:',
        ]
    ret += info.pieces.hex()
    if info.is_multi_file:
        ret.append('Files:')
        ret += [f'{f.length} {posixpath.join(*f.path)}' if f.path else f'{f.length}' for f in info.files]
    return ret
