from __future__ import annotations


__all__ = ['toSHA1', 'fingerprint']

import hashlib
import logging
from typing import TYPE_CHECKING

from torrentmeta.bencode import bencode

if TYPE_CHECKING:
    from torrentmeta.torrent import Info


logger = logging.getLogger(__name__)




def toSHA1(bchars: bytes) -> bytes:
    '''Return the sha1 hash for the given bytes.'''
    if isinstance(bchars, bytes):
        hasher = hashlib.sha1()
        hasher.update(bchars)
        return hasher.digest()
    else:
        raise TypeError(f"Expect bytes, not {type(bchars)}.")




def fingerprint(info: Info) -> bytes:
    '''
    Return the info hash: the sha1 of the canonical bencoding of the `info` dict.
    Only the decoded values matter, the key order of the input document does not.
    '''
    bchars = bencode(info.toValue())
    ret = toSHA1(bchars)
    logger.debug('Info hash %s over %d bencoded bytes', ret.hex(), len(bchars))
    return ret
