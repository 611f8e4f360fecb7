import pytest

from torrentmeta.bencode import bencode


TRACKER = b'http://tracker.example.org:6969/announce'


@pytest.fixture()
def single_info():
    return {b'length': 100, b'name': b'x', b'piece length': 4, b'pieces': bytes(20)}


@pytest.fixture()
def multi_info():
    return {
        b'files': [
            {b'length': 3, b'path': [b'dir', b'a.txt']},
            {b'length': 5, b'path': [b'b.bin']},
        ],
        b'name': b'folder',
        b'piece length': 4,
        b'pieces': b'\x01' * 20 + b'\x02' * 20,
    }


@pytest.fixture()
def make_torrent():
    '''Bencode a document around the given info dict, with optional extra top level keys.'''
    def _make(info, announce=TRACKER, **extra):
        d = {b'announce': announce, b'info': info}
        d.update({key.replace('_', ' ').encode(): val for key, val in extra.items()})
        return bencode(d)

    return _make


@pytest.fixture()
def single_torrent(make_torrent, single_info):
    return make_torrent(single_info)


@pytest.fixture()
def multi_torrent(make_torrent, multi_info):
    return make_torrent(multi_info)
