import argparse
import logging
import sys
from typing import List, Optional

from betterls import __version__
from betterls.connector import Connector
from betterls.local import LocalConnector
from betterls.render import OutputMode, render
from betterls.utils.style import TableStyle, colorize, colors_disabled

logger = logging.getLogger(__name__)

NOT_EXISTS_MESSAGE = 'Path does not exist.'
READ_ERROR_MESSAGE = 'Error reading directory.'


class CLI:
    """Directory listing command.

    Attributes
    ----------
    connector : Connector
        File system connector.
    style : TableStyle
        Table color scheme.
    """

    def __init__(
        self,
        connector: Connector,
        style: Optional[TableStyle] = None
    ):
        self.connector = connector
        self.style = style if style is not None else TableStyle()

    def run(self, path: str = '.', mode: OutputMode = OutputMode.TABLE) -> str:
        """List directory and print it.

        Parameters
        ----------
        path : str, default='.'
            Directory path.
        mode : OutputMode, default=OutputMode.TABLE
            Output mode.

        Returns
        -------
        str
            Printed text.
        """
        try:
            exists = self.connector.exists(path)
        except (OSError, ValueError) as err:
            logger.debug("Existence check failed for '%s': %s", path, err)
            return self._print(colorize(READ_ERROR_MESSAGE, 'red', self.style.color))
        if not exists:
            return self._print(colorize(NOT_EXISTS_MESSAGE, 'red', self.style.color))
        entries = self.connector.scandir(path)
        logger.debug("Read %d entries from '%s'", len(entries), path)
        return self._print(render(entries, mode, self.style))

    @staticmethod
    def _print(text: str) -> str:
        print(text)
        return text


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='betterls',
        description='The better ls command'
    )
    parser.add_argument('path', nargs='?', default='.', type=str, help='directory path (default: current directory)')
    parser.add_argument('-j', '--json', action='store_true', dest='json', help='print JSON instead of a table')
    parser.add_argument('--config_path', type=str, default=None, help='path to table style configuration file')
    parser.add_argument('--no-color', action='store_true', dest='no_color', help='disable colors')
    parser.add_argument('-v', '--verbose', action='store_true', dest='verbose', help='log debug messages to stderr')
    parser.add_argument('-V', '--version', action='version', version=f'%(prog)s {__version__}')
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
        stream=sys.stderr,
    )

    style = TableStyle.from_yaml(args.config_path) if args.config_path else TableStyle()
    if args.no_color or colors_disabled():
        style.color = False

    mode = OutputMode.JSON if args.json else OutputMode.TABLE
    CLI(LocalConnector(), style).run(args.path, mode)
