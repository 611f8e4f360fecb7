from __future__ import annotations


__all__ = ['Torrent', 'Info', 'SingleFile', 'MultiFile', 'File', 'fromBytes', 'toBytes', 'fromTorrent']

import logging
from pathlib import Path
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping, Optional

from torrentmeta.type import Value
from torrentmeta.config import ENCODING, WARN_NON_CANONICAL
from torrentmeta.pieces import Pieces
from torrentmeta.hasher import fingerprint
from torrentmeta.bencode import bencode, bdecode
from torrentmeta.error import (
    MissingField,
    FieldTypeError,
    InvalidUtf8,
    InvalidPieceLength,
    InvalidFileLength,
    ConflictingFileLayout,
    )


logger = logging.getLogger(__name__)

# keys of the info dict modelled by `Info`, anything else is kept in `Info.extra`
_INFO_KEYS = frozenset({b'name', b'piece length', b'pieces', b'length', b'files'})
_TORRENT_KEYS = frozenset({b'announce', b'info'})


def fromBytes(bchars: bytes, warn_non_canonical: bool = WARN_NON_CANONICAL) -> Torrent:
    '''Decode a metainfo document from its bencoded bytes.'''
    torrent = Torrent.fromValue(bdecode(bchars, warn_non_canonical=warn_non_canonical))
    logger.debug(
        "Decoded torrent '%s' (%s, %d pieces)",
        torrent.info.name,
        'multi-file' if torrent.info.is_multi_file else 'single-file',
        torrent.info.num_pieces,
        )
    return torrent


def toBytes(torrent: Torrent) -> bytes:
    '''Encode a metainfo document in canonical bencode.'''
    return bencode(torrent.toValue())


def fromTorrent(path: str|Path, warn_non_canonical: bool = WARN_NON_CANONICAL) -> Torrent:
    '''Wrapper function to read a torrent file and return it.'''
    tpath = Path(path)
    if not tpath.is_file():
        raise FileNotFoundError(f"The supplied '{tpath}' does not exist.")
    logger.debug("Reading torrent file '%s'", tpath)
    return fromBytes(tpath.read_bytes(), warn_non_canonical)


#* ---------------------------------------------------------------------------------------------------------------------
#* field checks shared by the model classes, `at` is the dotted location reported in errors
#* ---------------------------------------------------------------------------------------------------------------------


def _get(d: dict[bytes, Value], key: bytes, at: str) -> Value:
    if key not in d:
        raise MissingField(at)
    return d[key]


def _int(value: Any, at: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise FieldTypeError(at, 'integer', value)
    return value


def _dict(value: Any, at: str) -> dict[bytes, Value]:
    if not isinstance(value, dict):
        raise FieldTypeError(at, 'dictionary', value)
    return value


def _list(value: Any, at: str) -> list[Value]:
    if not isinstance(value, list):
        raise FieldTypeError(at, 'list', value)
    return value


def _bytes(value: Any, at: str) -> bytes:
    if not isinstance(value, bytes):
        raise FieldTypeError(at, 'byte string', value)
    return value


def _text(value: Any, at: str) -> str:
    try:
        return _bytes(value, at).decode(ENCODING)
    except UnicodeDecodeError:
        raise InvalidUtf8(at) from None


def _length(value: Any, at: str) -> int:
    if (length := _int(value, at)) < 0:
        raise InvalidFileLength(f'file length cannot be negative, not {length}', at)
    return length


#* ---------------------------------------------------------------------------------------------------------------------
#* the file layout variants
#* ---------------------------------------------------------------------------------------------------------------------


@dataclass(frozen=True)
class File():

    '''A file of a multi-file torrent: its size and path parts under the torrent name.'''

    length: int
    path: tuple[str, ...]

    def __post_init__(self):
        _length(self.length, 'length')
        object.__setattr__(self, 'path', tuple(self.path))
        if not all(isinstance(part, str) for part in self.path):
            raise TypeError('File path parts must be str.')

    @classmethod
    def fromValue(cls, value: Value, at: str = 'file') -> File:
        d = _dict(value, at)
        length = _length(_get(d, b'length', f'{at}.length'), f'{at}.length')
        parts = _list(_get(d, b'path', f'{at}.path'), f'{at}.path')
        return cls(length, tuple(_text(part, f'{at}.path[{i}]') for i, part in enumerate(parts)))

    def toValue(self) -> dict[bytes, Value]:
        return {b'length': self.length, b'path': [part.encode(ENCODING) for part in self.path]}


@dataclass(frozen=True)
class SingleFile():

    length: int

    def __post_init__(self):
        _length(self.length, 'length')

    def toValue(self) -> dict[bytes, Value]:
        return {b'length': self.length}


@dataclass(frozen=True)
class MultiFile():

    files: tuple[File, ...]

    def __post_init__(self):
        object.__setattr__(self, 'files', tuple(self.files))
        if not all(isinstance(f, File) for f in self.files):
            raise TypeError('MultiFile expects File entries.')

    def toValue(self) -> dict[bytes, Value]:
        return {b'files': [f.toValue() for f in self.files]}


#* ---------------------------------------------------------------------------------------------------------------------
#* the info dict and the whole document
#* ---------------------------------------------------------------------------------------------------------------------


@dataclass(frozen=True)
class Info():

    '''
    The `info` dict of a torrent, the part identified by the info hash.
    Keys other than the modelled ones (e.g. `private`, `source`) are kept as decoded values in `extra`
    so that they still count in the hash.
    '''

    name: str  # the suggested file or directory name
    piece_length: int  # the piece size in bytes
    pieces: Pieces  # the sha1 digest of every piece
    layout: SingleFile|MultiFile  # exactly one of `length` or `files`
    extra: Mapping[bytes, Value] = field(default_factory=dict)  # read-only view over a private copy

    def __post_init__(self):
        if not isinstance(self.name, str):
            raise TypeError(f'Torrent name must be str, not {type(self.name)}.')
        if _int(self.piece_length, 'piece length') <= 0:
            raise InvalidPieceLength(f'piece length must be positive, not {self.piece_length}', 'piece length')
        if not isinstance(self.pieces, Pieces):
            object.__setattr__(self, 'pieces', Pieces.fromBytes(self.pieces))
        if not isinstance(self.layout, (SingleFile, MultiFile)):
            raise TypeError(f'Layout must be SingleFile or MultiFile, not {type(self.layout)}.')
        if clash := _INFO_KEYS.intersection(self.extra):
            raise ValueError(f'Extra keys {sorted(clash)} are modelled fields.')
        object.__setattr__(self, 'extra', MappingProxyType(dict(self.extra)))

    def __hash__(self) -> int:
        return hash(self.hash)

    @classmethod
    def fromValue(cls, value: Value, at: str = 'info') -> Info:
        d = _dict(value, at)
        name = _text(_get(d, b'name', f'{at}.name'), f'{at}.name')
        piece_length = _int(_get(d, b'piece length', f'{at}.piece length'), f'{at}.piece length')
        if piece_length <= 0:
            raise InvalidPieceLength(f'piece length must be positive, not {piece_length}', f'{at}.piece length')
        pieces = Pieces.fromBytes(_bytes(_get(d, b'pieces', f'{at}.pieces'), f'{at}.pieces'), f'{at}.pieces')

        has_length, has_files = b'length' in d, b'files' in d
        if has_length and has_files:
            raise ConflictingFileLayout('both `length` and `files` are present', at)
        elif has_length:
            layout = SingleFile(_length(d[b'length'], f'{at}.length'))
        elif has_files:
            files = _list(d[b'files'], f'{at}.files')
            layout = MultiFile(tuple(File.fromValue(f, f'{at}.files[{i}]') for i, f in enumerate(files)))
        else:
            raise ConflictingFileLayout('neither `length` nor `files` is present', at)

        extra = {key: val for key, val in d.items() if key not in _INFO_KEYS}
        return cls(name, piece_length, pieces, layout, extra)

    def toValue(self) -> dict[bytes, Value]:
        '''Return the `info` dict as bencode values, with the same field set as decoded.'''
        ret: dict[bytes, Value] = dict(self.extra)
        ret[b'name'] = self.name.encode(ENCODING)
        ret[b'piece length'] = self.piece_length
        ret[b'pieces'] = self.pieces.toBytes()
        ret.update(self.layout.toValue())
        return ret

    @property
    def is_multi_file(self) -> bool:
        return isinstance(self.layout, MultiFile)

    @property
    def files(self) -> list[File]:
        '''
        Return the files of the torrent.
        A single-file torrent gives one file whose path is just the torrent name.
        '''
        if isinstance(self.layout, MultiFile):
            return list(self.layout.files)
        return [File(self.layout.length, (self.name,))]

    @property
    def length(self) -> int:
        '''Return the total size of all files.'''
        return sum(f.length for f in self.files)

    @property
    def num_pieces(self) -> int:
        return len(self.pieces)

    @property
    def hash(self) -> bytes:
        return fingerprint(self)


@dataclass(frozen=True)
class Torrent():

    '''
    A metainfo document: the tracker url and the `info` dict.
    Other top level keys (e.g. `announce-list`, `comment`) are kept as decoded values in `extra`.
    '''

    announce: str  # the tracker url
    info: Info
    extra: Mapping[bytes, Value] = field(default_factory=dict)  # read-only view over a private copy

    def __post_init__(self):
        if not isinstance(self.announce, str):
            raise TypeError(f'Tracker url must be str, not {type(self.announce)}.')
        if not isinstance(self.info, Info):
            raise TypeError(f'Expect Info, not {type(self.info)}.')
        if clash := _TORRENT_KEYS.intersection(self.extra):
            raise ValueError(f'Extra keys {sorted(clash)} are modelled fields.')
        object.__setattr__(self, 'extra', MappingProxyType(dict(self.extra)))

    def __hash__(self) -> int:
        # `extra` is left out, its values are lists and dicts
        return hash((self.announce, self.info))

    @classmethod
    def fromValue(cls, value: Value) -> Torrent:
        d = _dict(value, 'torrent')
        announce = _text(_get(d, b'announce', 'announce'), 'announce')
        info = Info.fromValue(_get(d, b'info', 'info'), 'info')
        extra = {key: val for key, val in d.items() if key not in _TORRENT_KEYS}
        return cls(announce, info, extra)

    def toValue(self) -> dict[bytes, Value]:
        ret: dict[bytes, Value] = dict(self.extra)
        ret[b'announce'] = self.announce.encode(ENCODING)
        ret[b'info'] = self.info.toValue()
        return ret

    def get(self, key: str, default: Optional[Value] = None) -> Optional[Value]:
        '''Return a raw top level value not modelled by the class, e.g. `comment`.'''
        return self.extra.get(key.encode(ENCODING), default)

    @property
    def info_hash(self) -> bytes:
        '''Return the 20-byte sha1 of the canonical `info` dict.'''
        return self.info.hash

    @property
    def hash(self) -> str:
        '''Return the info hash in lowercase hex.'''
        return self.info_hash.hex()
