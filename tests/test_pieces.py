import pytest

from torrentmeta.pieces import Pieces
from torrentmeta.error import InvalidDigestSequenceLength, MetainfoError


DIGEST_A = b'\xaa' * 20
DIGEST_B = bytes(range(20))


def test_split_in_order():
    pieces = Pieces.fromBytes(DIGEST_A + DIGEST_B)
    assert len(pieces) == 2
    assert list(pieces) == [DIGEST_A, DIGEST_B]
    assert pieces[0] == DIGEST_A
    assert pieces[1] == DIGEST_B
    assert pieces[-1] == DIGEST_B


def test_empty():
    pieces = Pieces.fromBytes(b'')
    assert len(pieces) == 0
    assert list(pieces) == []
    assert Pieces() == pieces


@pytest.mark.parametrize('size', [1, 19, 21, 25, 39, 41])
def test_rejects_partial_digest(size):
    with pytest.raises(InvalidDigestSequenceLength) as e:
        Pieces.fromBytes(bytes(size))
    assert e.value.field == 'pieces'
    assert str(size) in str(e.value)
    assert isinstance(e.value, MetainfoError)


def test_error_names_given_field():
    with pytest.raises(InvalidDigestSequenceLength) as e:
        Pieces.fromBytes(bytes(25), 'info.pieces')
    assert e.value.field == 'info.pieces'


def test_rejects_non_bytes():
    with pytest.raises(TypeError):
        Pieces('0' * 20)


def test_encode_concatenates():
    pieces = Pieces.fromDigests([DIGEST_B, DIGEST_A])
    assert pieces.toBytes() == DIGEST_B + DIGEST_A
    assert bytes(pieces) == DIGEST_B + DIGEST_A
    assert len(pieces.toBytes()) % 20 == 0


def test_from_digests_checks_size():
    with pytest.raises(ValueError):
        Pieces.fromDigests([DIGEST_A, b'\x00' * 19])
    with pytest.raises(ValueError):
        Pieces.fromDigests([DIGEST_A + b'\x00'])


def test_index_out_of_range():
    pieces = Pieces.fromBytes(DIGEST_A)
    with pytest.raises(IndexError):
        pieces[1]
    with pytest.raises(IndexError):
        pieces[-2]
    with pytest.raises(TypeError):
        pieces['0']


def test_slice_gives_pieces():
    pieces = Pieces.fromDigests([DIGEST_A, DIGEST_B, DIGEST_A])
    assert pieces[1:] == Pieces.fromDigests([DIGEST_B, DIGEST_A])
    assert pieces[::2] == Pieces.fromDigests([DIGEST_A, DIGEST_A])
    assert pieces[5:] == Pieces()


def test_sequence_behaviour():
    pieces = Pieces.fromDigests([DIGEST_A, DIGEST_B])
    assert DIGEST_B in pieces
    assert pieces.index(DIGEST_B) == 1
    assert pieces.count(DIGEST_A) == 1


def test_value_equality():
    assert Pieces(DIGEST_A) == Pieces(bytearray(DIGEST_A))
    assert Pieces(DIGEST_A) != Pieces(DIGEST_B)
    assert hash(Pieces(DIGEST_A)) == hash(Pieces(DIGEST_A))
    assert Pieces(DIGEST_A) != DIGEST_A


def test_hex():
    assert Pieces.fromDigests([DIGEST_B]).hex() == ['000102030405060708090a0b0c0d0e0f10111213']
    assert repr(Pieces(DIGEST_A)) == 'Pieces(<1 digests>)'
