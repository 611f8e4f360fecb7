__all__ = ['TM_VER']

TM_VER = 'TorrentMeta 0.1.0'
