from abc import ABC, abstractmethod

from betterls.utils.entry import FSEntry


class Connector(ABC):
    """Abstract class for connector."""

    @abstractmethod
    def exists(self, path: str) -> bool:
        """Check whether path exists.

        Parameters
        ----------
        path : str
            File or directory path.

        Returns
        -------
        bool
            True if path exists.

        Raises
        ------
        OSError
            If the check itself fails, e.g. permission denied on a parent directory.
        """
        pass

    @abstractmethod
    def scandir(self, path: str = '.') -> list[FSEntry]:
        """List directory content with metadata.

        Entries are returned in the order the file system yields them.
        Entries whose metadata can't be read are skipped, and a directory
        that can't be opened gives an empty list.

        Parameters
        ----------
        path : str, default='.'
            Directory path.

        Returns
        -------
        list[FSEntry]
            List of directory contents with metadata.
        """
        pass
