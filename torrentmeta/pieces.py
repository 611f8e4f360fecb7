from __future__ import annotations


__all__ = ['Pieces']

from collections.abc import Sequence, Iterable, Iterator
from typing import overload

from torrentmeta.type import Digest
from torrentmeta.config import DIGEST_SIZE
from torrentmeta.error import InvalidDigestSequenceLength




class Pieces(Sequence):

    '''
    The piece hashes of a torrent: an immutable sequence of 20-byte sha1 digests.
    All digests share one backing bytes object, they are sliced out on access.
    '''

    __slots__ = ('_raw',)

    def __init__(self, raw: bytes = b'', field: str = 'pieces'):
        if not isinstance(raw, (bytes, bytearray, memoryview)):
            raise TypeError(f'Pieces expects bytes, not {type(raw)}.')
        raw = bytes(raw)
        if len(raw) % DIGEST_SIZE:
            raise InvalidDigestSequenceLength(
                f'length {len(raw)} is not a multiple of {DIGEST_SIZE}', field
                )
        self._raw = raw

    @classmethod
    def fromBytes(cls, raw: bytes, field: str = 'pieces') -> Pieces:
        '''Split the concatenated digests, refusing any length not a multiple of 20.'''
        return cls(raw, field)

    @classmethod
    def fromDigests(cls, digests: Iterable[Digest]) -> Pieces:
        '''Join the digests in order, each of which must be exactly 20 bytes.'''
        digests = list(digests)
        for i, digest in enumerate(digests):
            if not isinstance(digest, (bytes, bytearray)) or len(digest) != DIGEST_SIZE:
                raise ValueError(f'Digest {i} is not {DIGEST_SIZE} bytes.')
        return cls(b''.join(digests))

    def toBytes(self) -> bytes:
        return self._raw

    def __bytes__(self) -> bytes:
        return self._raw

    def __len__(self) -> int:
        return len(self._raw) // DIGEST_SIZE

    @overload
    def __getitem__(self, index: int) -> Digest:
        ...

    @overload
    def __getitem__(self, index: slice) -> Pieces:
        ...

    def __getitem__(self, index):
        if isinstance(index, slice):
            return Pieces.fromDigests(self[i] for i in range(*index.indices(len(self))))
        if not isinstance(index, int):
            raise TypeError(f'Pieces index must be int or slice, not {type(index)}.')
        n = len(self)
        if not -n <= index < n:
            raise IndexError('Pieces index out of range.')
        index %= n
        return self._raw[index * DIGEST_SIZE:(index+1) * DIGEST_SIZE]

    def __iter__(self) -> Iterator[Digest]:
        for i in range(0, len(self._raw), DIGEST_SIZE):
            yield self._raw[i:i + DIGEST_SIZE]

    def __eq__(self, other) -> bool:
        if isinstance(other, Pieces):
            return self._raw == other._raw
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._raw)

    def __repr__(self) -> str:
        return f'Pieces(<{len(self)} digests>)'

    def hex(self) -> list[str]:
        '''Return every digest in lowercase hex.'''
        return [digest.hex() for digest in self]
