__all__ = [
    'MAX_DEPTH',
    'DIGEST_SIZE',
    'ENCODING',
    'REJECT_DUPLICATE_KEY',
    'WARN_NON_CANONICAL',
    'INT_MIN',
    'INT_MAX',
    'INT_REGEX',
    ]

MAX_DEPTH: int = 512  # the maximum number of nested lists and dicts
DIGEST_SIZE: int = 20  # sha1
ENCODING: str = 'utf-8'
REJECT_DUPLICATE_KEY: bool = False  # keep the last value if False
WARN_NON_CANONICAL: bool = False  # warn on unsorted dict keys, the cli turns it on
INT_MIN: int = -(1 << 63)
INT_MAX: int = (1 << 63) - 1

import re


INT_REGEX = re.compile(rb'-?(?:0|[1-9][0-9]*)')

del re
