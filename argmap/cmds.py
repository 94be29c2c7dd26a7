import inspect
import json
import logging

from dataclasses import dataclass
from typing import Callable

from argmap import const, vt100
from argmap.args import Arguments, Lookup, NotFound, Present, parse

Callback = Callable[[list[str]], None]

_logger = logging.getLogger(__name__)


@dataclass
class Cmd:
    shortName: str
    longName: str
    helpText: str
    isPlugin: bool
    callback: Callback


cmds: list[Cmd] = []


def cmd(shortName: str, longName: str, helpText: str):
    curframe = inspect.currentframe()
    calframe = inspect.getouterframes(curframe, 2)

    def wrap(fn: Callback):
        cmds.append(
            Cmd(shortName, longName, helpText, calframe[1].filename != __file__, fn)
        )
        return fn

    return wrap


def formatValue(value: Lookup) -> str:
    if isinstance(value, Present):
        return value.value
    return f"{vt100.BRIGHT_BLACK}(no value){vt100.RESET}"


@cmd("d", "dump", "Show every flag and its values")
def dumpCmd(tokens: list[str]):
    args = parse(tokens)

    vt100.title("Flags")
    if args.isEmpty():
        print("   (No flags)")
        return

    for key in args:
        print(f" {vt100.GREEN}{key}{vt100.RESET}")
        for value in args.getVec(key) or []:
            print(vt100.indent(formatValue(value)))


@cmd("g", "get", "Show the first value of a flag")
def getCmd(tokens: list[str]):
    if len(tokens) == 0:
        raise RuntimeError("Flag name not specified")

    key, rest = tokens[0], tokens[1:]
    value = parse(rest).get(key)

    if isinstance(value, NotFound):
        raise RuntimeError(f"Flag '{key}' not found")

    print(formatValue(value))


@cmd("j", "json", "Show the flags as JSON")
def jsonCmd(tokens: list[str]):
    print(json.dumps(parse(tokens).toDict(), indent=2))


@cmd("h", "help", "Show this help message")
def helpCmd(tokens: list[str]):
    usage()

    print()

    vt100.title("Description")
    print(f"    {const.DESCRIPTION}")

    print()
    vt100.title("Commands")
    for c in cmds:
        pluginText = ""
        if c.isPlugin:
            pluginText = f"{vt100.CYAN}(plugin){vt100.RESET}"

        print(
            f" {vt100.GREEN}{c.shortName or ' '}{vt100.RESET}  {c.longName} - {c.helpText} {pluginText}"
        )

    print()
    vt100.title("Options")
    print("    -v, -verbose  Enable verbose logging")


@cmd("v", "version", "Show current version")
def versionCmd(tokens: list[str]):
    print(f"{const.ARGV0} v{const.VERSION_STR}")


def usage():
    print(f"Usage: {const.ARGV0} [-verbose] <command> [tokens...]")


def splitOptions(argv: list[str]) -> tuple[Arguments, list[str]]:
    """Splits the leading options meant for argmap itself from the command and its tokens."""
    rest = argv[:]
    head: list[str] = []
    while len(rest) > 0 and rest[0].startswith("-"):
        head.append(rest.pop(0))
    return parse(head), rest


def exec(argv: list[str]):
    if len(argv) == 0:
        raise RuntimeError("No command specified")

    name, tokens = argv[0], argv[1:]

    for c in cmds:
        if c.shortName == name or c.longName == name:
            _logger.info(f"Running command '{c.longName}' with {len(tokens)} tokens")
            c.callback(tokens)
            return

    raise RuntimeError(f"Unknown command {name}")
