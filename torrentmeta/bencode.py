'''This module provides bencode and bdecode functions.'''

__all__ = ['bencode', 'bdecode', 'bdecodeHead']

import warnings
from typing import Any

from torrentmeta.type import Value
from torrentmeta.config import ENCODING, MAX_DEPTH, REJECT_DUPLICATE_KEY, WARN_NON_CANONICAL
from torrentmeta.config import INT_MIN, INT_MAX, INT_REGEX
from torrentmeta.error import (
    MalformedInteger,
    MalformedLength,
    TruncatedByteString,
    UnterminatedList,
    UnterminatedDictionary,
    UnrecognizedTag,
    NestingTooDeep,
    NonStringDictKey,
    DuplicateDictKey,
    TrailingContent,
    NonCanonicalWarning,
    )


_MAX_INT_CHARS = len(str(INT_MIN))  # sign included




_END = object()  # closes a list or dict on the encoder stack




def _dictItems(obj: dict, encoding: str) -> dict[bytes, Any]:
    items: dict[bytes, Any] = {}
    for key, val in obj.items():
        if isinstance(key, str):
            key = key.encode(encoding)
        elif not isinstance(key, bytes):
            raise TypeError(f'Bencode expects dict key as str|bytes, not {type(key)}.')
        if key in items:
            raise ValueError(f'Bencode hits duplicate dict key {key!r}.')
        items[key] = val
    return items




def bencode(obj: int|str|bytes|list|tuple|dict, encoding: str = ENCODING) -> bytes:
    '''
    Bencode a value. Dict keys are always emitted in ascending byte order,
    so logically equal values give identical bytes.
    Nested values are walked with an explicit stack, so any depth the decoder accepts can be encoded.

    Arguments:
    obj: int, bytes, str, list/tuple or dict with str|bytes keys, nested freely.
    encoding: the text encoding applied to str, both values and dict keys.
    '''
    ret = bytearray()
    stack: list[Any] = [obj]
    while stack:
        obj = stack.pop()
        if obj is _END:
            ret += b'e'
        elif isinstance(obj, (bytes, bytearray, memoryview)):
            obj = bytes(obj)
            ret += str(len(obj)).encode() + b':' + obj
        elif isinstance(obj, str):
            obj = obj.encode(encoding)
            ret += str(len(obj)).encode() + b':' + obj
        elif isinstance(obj, bool):
            raise TypeError('Bencode does not accept bool, use int instead.')
        elif isinstance(obj, int):
            ret += b'i' + str(int(obj)).encode() + b'e'
        elif isinstance(obj, (list, tuple)):
            ret += b'l'
            stack.append(_END)
            stack.extend(reversed(obj))
        elif isinstance(obj, dict):
            items = _dictItems(obj, encoding)
            ret += b'd'
            stack.append(_END)
            # pushed in reverse so the smallest key is popped first, followed by its value
            for key in sorted(items, reverse=True):
                stack.append(items[key])
                stack.append(key)
        else:
            raise TypeError(f'Bencode expects int|bytes|str|list|dict, not {type(obj)}.')
    return bytes(ret)




class _Decoder():

    '''Recursive descent over one input, using one stack frame per nesting level.'''

    def __init__(self, bchars: bytes, max_depth: int, reject_duplicate: bool, warn_non_canonical: bool):
        self.bchars = bchars
        self.max_depth = max_depth
        self.reject_duplicate = reject_duplicate
        self.warn_non_canonical = warn_non_canonical

    def decode(self, pos: int, depth: int) -> tuple[Value, int]:
        '''Decode the value starting at `pos`, return it with the position right after it.'''
        bchars = self.bchars
        tag = bchars[pos:pos + 1]

        if tag == b'i':
            end = bchars.find(b'e', pos + 1)
            if end < 0:
                raise MalformedInteger('Integer has no terminating "e"', pos)
            digits = bchars[pos + 1:end]
            if not INT_REGEX.fullmatch(digits) or digits == b'-0':
                raise MalformedInteger(f'Invalid integer {digits!r}', pos)
            if len(digits) > _MAX_INT_CHARS or not INT_MIN <= (n := int(digits)) <= INT_MAX:
                raise MalformedInteger(f'Integer {digits!r} overflows 64 bits', pos)
            return n, end + 1

        elif tag.isdigit():
            colon = bchars.find(b':', pos)
            if colon < 0:
                raise MalformedLength('Byte string length has no terminating ":"', pos)
            prefix = bchars[pos:colon]
            if not prefix.isdigit():
                raise MalformedLength(f'Invalid byte string length {prefix!r}', pos)
            start = colon + 1
            length = prefix.lstrip(b'0') or b'0'
            # a length with more digits than the input size can never be satisfied
            if len(length) > len(str(len(bchars))) or (end := start + int(length)) > len(bchars):
                raise TruncatedByteString(
                    f'Byte string expects {prefix.decode()} bytes but only {len(bchars) - start} remain', pos
                    )
            return bchars[start:end], end

        elif tag == b'l':
            if depth >= self.max_depth:
                raise NestingTooDeep(f'Nesting exceeds {self.max_depth} levels', pos)
            lst: list[Value] = []
            cur = pos + 1
            while True:
                if cur >= len(bchars):
                    raise UnterminatedList('List has no terminating "e"', pos)
                if bchars[cur:cur + 1] == b'e':
                    return lst, cur + 1
                elem, cur = self.decode(cur, depth + 1)
                lst.append(elem)

        elif tag == b'd':
            if depth >= self.max_depth:
                raise NestingTooDeep(f'Nesting exceeds {self.max_depth} levels', pos)
            dct: dict[bytes, Value] = {}
            last_key: bytes|None = None
            sorted_keys = True
            cur = pos + 1
            while True:
                if cur >= len(bchars):
                    raise UnterminatedDictionary('Dict has no terminating "e"', pos)
                if bchars[cur:cur + 1] == b'e':
                    break
                if not bchars[cur:cur + 1].isdigit():
                    raise NonStringDictKey(f'Dict key must be a byte string, not {bchars[cur:cur + 1]!r}', cur)
                key_pos = cur
                key, cur = self.decode(cur, depth + 1)
                if cur >= len(bchars):
                    raise UnterminatedDictionary(f'Dict key {key!r} has no value', pos)
                if key in dct and self.reject_duplicate:
                    raise DuplicateDictKey(f'Dict key {key!r} appears again', key_pos)
                if last_key is not None and key <= last_key:
                    sorted_keys = False
                last_key = key
                dct[key], cur = self.decode(cur, depth + 1)
            if not sorted_keys and self.warn_non_canonical:
                warnings.warn(
                    f'Dict at offset {pos} has unsorted or duplicate keys, its re-encoded bytes will differ.',
                    NonCanonicalWarning,
                    )
            return dct, cur + 1

        elif not tag:
            raise UnrecognizedTag('Bdecode hits end of input where a value is expected', pos)
        else:
            raise UnrecognizedTag(f'Bdecode hits unknown tag {tag!r}', pos)




def _asBytes(bchars: bytes) -> bytes:
    if isinstance(bchars, bytes):
        return bchars
    elif isinstance(bchars, (bytearray, memoryview)):
        return bytes(bchars)
    else:
        raise TypeError(f'Bdecode expects bytes, not {type(bchars)}.')




def bdecodeHead(
    bchars: bytes,
    max_depth: int = MAX_DEPTH,
    *,
    reject_duplicate: bool = REJECT_DUPLICATE_KEY,
    warn_non_canonical: bool = WARN_NON_CANONICAL,
    ) -> tuple[Value, bytes]:
    '''
    Decode one value from the front of `bchars`.

    Return:
    A tuple of the decoded value and the bytes left after it.
    '''
    bchars = _asBytes(bchars)
    ret, end = _Decoder(bchars, max_depth, reject_duplicate, warn_non_canonical).decode(0, 0)
    return ret, bchars[end:]




def bdecode(
    bchars: bytes,
    max_depth: int = MAX_DEPTH,
    *,
    reject_duplicate: bool = REJECT_DUPLICATE_KEY,
    warn_non_canonical: bool = WARN_NON_CANONICAL,
    ) -> Value:
    '''Decode `bchars` which must hold exactly one value.'''
    bchars = _asBytes(bchars)
    ret, end = _Decoder(bchars, max_depth, reject_duplicate, warn_non_canonical).decode(0, 0)
    if end != len(bchars):
        raise TrailingContent(f'Bdecode hits {len(bchars) - end} bytes of trailing content', end)
    return ret
