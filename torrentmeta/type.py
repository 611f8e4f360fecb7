__all__ = ['Value', 'Digest']


# a bencoded value as held in memory: Integer, ByteString, List or Dictionary
Value = int|bytes|list['Value']|dict[bytes, 'Value']
# a 20-byte sha1 digest
Digest = bytes
