import os
import stat
import logging
from typing import List, Optional

from betterls.connector import Connector
from betterls.utils.entry import EntryType, FSEntry, format_modified

logger = logging.getLogger(__name__)

UNKNOWN_NAME = 'unknown name'


class LocalConnector(Connector):
    """Local file system connector."""

    def exists(self, path: str) -> bool:
        try:
            os.stat(path)
        except FileNotFoundError:
            return False
        return True

    def scandir(self, path: str = '.') -> List[FSEntry]:
        result = []
        try:
            with os.scandir(path) as it:
                for entry in it:
                    fs_entry = self._make_entry(entry)
                    if fs_entry is not None:
                        result.append(fs_entry)
        except OSError as err:
            # an unreadable directory lists as empty; a failure mid-iteration keeps what was read
            logger.debug("Can't read directory '%s': %s", path, err)
        return result

    @staticmethod
    def _make_entry(entry: os.DirEntry) -> Optional[FSEntry]:
        try:
            st = entry.stat()
        except OSError as err:
            logger.debug("Skipping '%s': %s", entry.path, err)
            return None
        return FSEntry(
            name=_decode_name(entry.name),
            type=EntryType.DIR if stat.S_ISDIR(st.st_mode) else EntryType.FILE,
            size=st.st_size,
            modified=format_modified(st.st_mtime),
        )


def _decode_name(name: str) -> str:
    # undecodable bytes come back from os.scandir as lone surrogates
    try:
        name.encode('utf-8')
    except UnicodeEncodeError:
        return UNKNOWN_NAME
    return name
