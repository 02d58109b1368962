__version__ = '1.0'

from betterls.connector import Connector
from betterls.local import LocalConnector
from betterls.render import OutputMode, render
from betterls.utils.entry import EntryType, FSEntry

__all__ = ['Connector', 'LocalConnector', 'OutputMode', 'render', 'EntryType', 'FSEntry']
