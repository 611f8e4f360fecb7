__all__ = [
    'BencodeError',
    'MalformedInteger',
    'MalformedLength',
    'TruncatedByteString',
    'UnterminatedList',
    'UnterminatedDictionary',
    'UnrecognizedTag',
    'NestingTooDeep',
    'NonStringDictKey',
    'DuplicateDictKey',
    'TrailingContent',
    'MetainfoError',
    'MissingField',
    'FieldTypeError',
    'InvalidUtf8',
    'InvalidPieceLength',
    'InvalidFileLength',
    'InvalidDigestSequenceLength',
    'ConflictingFileLayout',
    'NonCanonicalWarning',
    ]




class BencodeError(ValueError):

    '''The input violates the bencode grammar at `offset`.'''

    def __init__(self, message: str, offset: int):
        super().__init__(f'{message} at offset {offset}')
        self.offset = offset




class MalformedInteger(BencodeError):
    pass




class MalformedLength(BencodeError):
    pass




class TruncatedByteString(BencodeError):
    pass




class UnterminatedList(BencodeError):
    pass




class UnterminatedDictionary(BencodeError):
    pass




class UnrecognizedTag(BencodeError):
    pass




class NestingTooDeep(BencodeError):
    pass




class NonStringDictKey(BencodeError):
    pass




class DuplicateDictKey(BencodeError):
    pass




class TrailingContent(BencodeError):
    pass




class MetainfoError(ValueError):

    '''The decoded document is not a valid metainfo at `field`.'''

    def __init__(self, message: str, field: str):
        super().__init__(f'{field}: {message}')
        self.field = field




class MissingField(MetainfoError):

    def __init__(self, field: str):
        super().__init__('required key is missing', field)




class FieldTypeError(MetainfoError):

    def __init__(self, field: str, expected: str, actual: object):
        super().__init__(f'expect {expected}, not {type(actual).__name__}', field)
        self.expected = expected




class InvalidUtf8(MetainfoError):

    def __init__(self, field: str):
        super().__init__('text is not valid utf-8', field)




class InvalidPieceLength(MetainfoError):
    pass




class InvalidFileLength(MetainfoError):
    pass




class InvalidDigestSequenceLength(MetainfoError):
    pass




class ConflictingFileLayout(MetainfoError):
    pass




class NonCanonicalWarning(UserWarning):
    pass
