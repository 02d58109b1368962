import os
from dataclasses import dataclass, fields
from typing import Dict

import yaml

RESET = '\033[0m'

_BASE_COLORS = ['black', 'red', 'green', 'yellow', 'blue', 'magenta', 'cyan', 'white']

COLORS: Dict[str, str] = {}
for _code, _name in enumerate(_BASE_COLORS):
    COLORS[_name] = f'\033[{30 + _code}m'
    COLORS[f'bright_{_name}'] = f'\033[{90 + _code}m'


def colors_disabled() -> bool:
    """True if the NO_COLOR environment variable is set to a non-empty value."""
    return bool(os.environ.get('NO_COLOR'))


def colorize(text: str, color: str, enabled: bool = True) -> str:
    if not enabled:
        return text
    if color not in COLORS:
        raise ValueError(f"unknown color: '{color}'")
    return f'{COLORS[color]}{text}{RESET}'


@dataclass
class TableStyle:
    """Table color scheme.

    Attributes
    ----------
    header : str
        Header row color.
    name : str
        Name column color.
    size : str
        Size column color.
    modified : str
        Modified column color.
    color : bool
        Emit ANSI colors at all.
    """

    header: str = 'bright_green'
    name: str = 'bright_cyan'
    size: str = 'bright_magenta'
    modified: str = 'bright_yellow'
    color: bool = True

    def __post_init__(self):
        if not isinstance(self.color, bool):
            raise ValueError(f"'color' must be true or false, got: {self.color!r}")
        for field_name in ['header', 'name', 'size', 'modified']:
            value = getattr(self, field_name)
            if not isinstance(value, str) or value not in COLORS:
                raise ValueError(f"unknown color for '{field_name}': '{value}'")

    @classmethod
    def from_yaml(cls, path: str) -> 'TableStyle':
        """Creates class instance from configuration path.

        Parameters
        ----------
        path : str
            path to configuration file.

        Returns
        -------
        TableStyle
            Class instance.
        """
        with open(path) as f:
            config = yaml.safe_load(f) or {}
        if not isinstance(config, dict):
            raise ValueError(f"configuration file '{path}' must contain a mapping")
        known = {field.name for field in fields(cls)}
        unknown = sorted(set(config) - known)
        if unknown:
            raise ValueError(f"unknown configuration fields: {unknown}")
        return cls(**config)
