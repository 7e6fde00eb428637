"""Parameter domain model."""

from dataclasses import dataclass
from typing import Optional


class ParameterRecord:
    """A parameter as returned by the store.

    ``value`` is None when the value could not be fetched.
    """

    def __init__(self, name: str, value: Optional[str] = None):
        self.name = name
        self.value = value

    @property
    def env_name(self) -> str:
        """Environment variable name for this parameter."""
        return to_environment_variable(self.name)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ParameterRecord):
            return NotImplemented
        return self.name == other.name and self.value == other.value

    def __repr__(self) -> str:
        # Values are often SecureStrings, keep them out of logs and tracebacks
        return f"ParameterRecord(name={self.name!r})"


def to_environment_variable(name: str) -> str:
    """
    Convert a parameter name to an environment variable name.

    Everything up to and including the last ``/`` is dropped. Letters are
    uppercased, decimal digits are kept and any other character becomes ``_``.

    Examples:
        >>> to_environment_variable("/service/db-url")
        'DB_URL'
        >>> to_environment_variable("*X()_test")
        '_X___TEST'
    """
    chars = []
    for c in name[name.rfind("/") + 1:]:
        if c.isalpha():
            upper = c.upper()
            chars.append(upper if len(upper) == 1 else c)
        elif c.isdecimal():
            chars.append(c)
        else:
            chars.append("_")
    return "".join(chars)


@dataclass(frozen=True)
class FetchMode:
    """How parameters are pulled from the store for one invocation."""

    @staticmethod
    def select(path: Optional[str], recursive: Optional[bool] = False) -> "FetchMode":
        """Pick the fetch mode: path-scoped when a path is given, flat otherwise."""
        if not path:
            return FlatFetch()
        return PathScopedFetch(path=path, recursive=bool(recursive))


@dataclass(frozen=True)
class FlatFetch(FetchMode):
    """List every parameter name, then fetch each value by name."""

    @property
    def name(self) -> str:
        return "flat"


@dataclass(frozen=True)
class PathScopedFetch(FetchMode):
    """Fetch names and values under a hierarchy path."""

    path: str = ""
    recursive: bool = False

    @property
    def name(self) -> str:
        return "path"
