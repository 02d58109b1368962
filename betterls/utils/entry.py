import datetime
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict


class EntryType(Enum):
    FILE = 'File'
    DIR = 'Dir'

    def __str__(self) -> str:
        return self.value


def format_modified(timestamp: float) -> str:
    """Format a POSIX timestamp as a UTC calendar date, e.g. ``Sat Oct  3 2026``.

    Returns an empty string if the timestamp can't be converted.
    """
    try:
        date = datetime.datetime.fromtimestamp(timestamp, tz=datetime.timezone.utc)
    except (OverflowError, OSError, ValueError):
        return ''
    return f'{date:%a %b} {date.day:>2} {date:%Y}'


@dataclass(frozen=True)
class FSEntry:
    name: str
    type: EntryType
    size: int
    modified: str = ''

    def to_dict(self) -> Dict[str, Any]:
        return {
            'name': self.name,
            'e_type': self.type.value,
            'len_bytes': self.size,
            'modified': self.modified,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'FSEntry':
        return cls(
            name=data['name'],
            type=EntryType(data['e_type']),
            size=data['len_bytes'],
            modified=data['modified'],
        )
