import dataclasses as dt
import logging

from typing import Iterable, Iterator, Optional

_logger = logging.getLogger(__name__)

# --- Values ----------------------------------------------------------------- #


@dt.dataclass(frozen=True)
class Lookup:
    """
    Base class for the result of looking up a flag.
    """


@dt.dataclass(frozen=True)
class Present(Lookup):
    """
    The flag was followed by a value.

    Attributes:
        value: The token that followed the flag (e.g., "out.txt" for "-o out.txt").
    """

    value: str


@dt.dataclass(frozen=True)
class Absent(Lookup):
    """
    The flag was given, but nothing usable followed it.
    """


@dt.dataclass(frozen=True)
class NotFound(Lookup):
    """
    The flag was never given.
    """


Value = Present | Absent


def _valueFor(candidate: str) -> Value:
    """Classifies the token that follows a flag."""
    if candidate == "" or candidate.startswith("-"):
        return Absent()
    return Present(candidate)


# --- Arguments -------------------------------------------------------------- #


class Arguments:
    """
    A read-only index of the flags found in a list of tokens.

    Every flag name maps to the values of all its occurrences, in the order
    they appeared.
    """

    _index: dict[str, list[Value]]

    def __init__(self, index: dict[str, list[Value]]):
        self._index = index

    @staticmethod
    def parse(args: Iterable[str]) -> "Arguments":
        """
        Parses a list of tokens. This never fails.

        A flag is any token starting with a single `-`, which is stripped to
        get its name. The token right after a flag is its value, unless it is
        empty or is itself a flag. That next token is still looked at as a
        flag of its own.

        Args:
            args: The tokens, usually `sys.argv[1:]`.
        """
        tokens = list(args)
        index: dict[str, list[Value]] = {}

        for i in range(len(tokens)):
            key = tokens[i]
            if not key.startswith("-"):
                continue

            candidate = tokens[i + 1] if i + 1 < len(tokens) else ""
            index.setdefault(key[1:], []).append(_valueFor(candidate))

        _logger.debug(f"Parsed {len(tokens)} tokens into flags {list(index.keys())}")
        return Arguments(index)

    def contains(self, key: str) -> bool:
        """Checks whether the flag was given at least once."""
        return key in self._index

    def containsVal(self, key: str) -> bool:
        """Checks whether the flag was given at least once with a value."""
        return any(isinstance(v, Present) for v in self._index.get(key, []))

    def get(self, key: str) -> Lookup:
        """
        Gets the value of the first occurrence of a flag.

        Returns:
            `Present` or `Absent` for the first occurrence, `NotFound` if the
            flag was never given.
        """
        values = self._index.get(key)
        if values is None:
            return NotFound()
        return values[0]

    def getVec(self, key: str) -> Optional[list[Value]]:
        """
        Gets the values of every occurrence of a flag, in input order.

        Returns:
            A new list, or None if the flag was never given.
        """
        values = self._index.get(key)
        if values is None:
            return None
        return list(values)

    def getOr(self, key: str, default: Optional[str] = None) -> Optional[str]:
        """Gets the first value of a flag as a string, or `default`."""
        value = self.get(key)
        if isinstance(value, Present):
            return value.value
        return default

    def count(self, key: str) -> int:
        return len(self._index.get(key, []))

    def total(self) -> int:
        """Returns the number of flag occurrences across all flags."""
        return sum(len(values) for values in self._index.values())

    def isEmpty(self) -> bool:
        return len(self._index) == 0

    def keys(self) -> list[str]:
        return list(self._index.keys())

    def toDict(self) -> dict[str, list[str | None]]:
        """Returns a plain copy of the index, with None for absent values."""
        return {
            key: [v.value if isinstance(v, Present) else None for v in values]
            for key, values in self._index.items()
        }

    def __len__(self) -> int:
        return len(self._index)

    def __contains__(self, key: object) -> bool:
        return key in self._index

    def __iter__(self) -> Iterator[str]:
        return iter(self.keys())

    def __repr__(self) -> str:
        return f"Arguments({self.toDict()!r})"


def parse(args: Iterable[str]) -> Arguments:
    """Parses a list of tokens into an `Arguments` index."""
    return Arguments.parse(args)
