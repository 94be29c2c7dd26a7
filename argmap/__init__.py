import os
import sys
import logging

from . import (
    cmds,
    const,
    vt100,
)
from .args import (  # noqa: F401 re-exported
    Absent,
    Arguments,
    Lookup,
    NotFound,
    Present,
    Value,
    parse,
)

_logger = logging.getLogger(__name__)


class logger:
    @staticmethod
    def isVerbose(opts: Arguments) -> bool:
        return opts.contains("v") or opts.contains("verbose") or opts.contains("-verbose")

    @staticmethod
    def setup(opts: Arguments):
        if logger.isVerbose(opts):
            logging.basicConfig(
                level=logging.DEBUG,
                format=f"{vt100.CYAN}%(asctime)s{vt100.RESET} {vt100.YELLOW}%(levelname)s{vt100.RESET} %(name)s: %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
            return

        logFile = os.environ.get(const.LOG_FILE_ENV, None)
        if logFile:
            logging.basicConfig(
                level=logging.INFO,
                filename=logFile,
                filemode="w",
                format="%(asctime)s %(levelname)s %(name)s: %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        else:
            logging.basicConfig(
                level=logging.WARNING,
                format="%(levelname)s %(name)s: %(message)s",
            )


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    try:
        opts, rest = cmds.splitOptions(argv)
        logger.setup(opts)
        cmds.exec(rest)
        return 0

    except RuntimeError as e:
        _logger.info(e, exc_info=True)
        vt100.error(str(e))
        cmds.usage()
        return 1

    except KeyboardInterrupt:
        print()
        return 1
