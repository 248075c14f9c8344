r"""
aparseopt parse results.

Overview
- CmdArgKind: the six kinds of classified arguments.
  • ARGUMENT      positional value ("file.txt", "-", anything after a bare word)
  • SHORT_FLAG    "-v" where 'v' is a known short flag (also each letter of "-abc")
  • LONG_FLAG     "--verbose" where "verbose" is a known long flag
  • SHORT_OPTION  "-o val", "-oval", "-o:val", "-o=val"
  • LONG_OPTION   "--out val", "--out:val", "--out=val"
  • STOP_PARSING  "--"

- CmdArg: immutable (kind, key, val) triple produced by the parser on each step.
  • key is the flag/option name ("" for ARGUMENT and STOP_PARSING).
  • val is the option value or the positional text ("" for flags and STOP_PARSING).
  • str(arg) renders the argument back as a single command-line token, using '='
    as the delimiter; classifying that token yields an equivalent argument.

Quick example:
    >>> CmdArg(CmdArgKind.SHORT_OPTION, "o", "out.txt")
    CmdArg(kind=<CmdArgKind.SHORT_OPTION: 4>, key='o', val='out.txt')
    >>> str(_)
    '-o=out.txt'
"""
from enum import IntEnum, auto

from .utils import *


class CmdArgKind(IntEnum):
    """
    kinds of classified command-line arguments.

    values are stable and ordered the way the parser documents them; they are
    safe to persist or compare.
    """
    ARGUMENT = auto()
    SHORT_FLAG = auto()
    LONG_FLAG = auto()
    SHORT_OPTION = auto()
    LONG_OPTION = auto()
    STOP_PARSING = auto()

    @property
    def keyed(self):
        """whether arguments of this kind carry a key (a flag or option name)."""
        return self not in (CmdArgKind.ARGUMENT, CmdArgKind.STOP_PARSING)

    @property
    def valued(self):
        """whether arguments of this kind carry a value."""
        return self in (CmdArgKind.ARGUMENT, CmdArgKind.SHORT_OPTION, CmdArgKind.LONG_OPTION)

    @property
    def short(self):
        return self in (CmdArgKind.SHORT_FLAG, CmdArgKind.SHORT_OPTION)


class CmdArg:
    """
    A single classified command-line argument.

    Properties
    - kind: CmdArgKind
    - key: str, the flag or option name; a single character for short kinds.
    - val: str, the option value or positional text.

    Instances are immutable and hashable; equality compares (kind, key, val).
    """
    __slots__ = ("_kind", "_key", "_val")

    kind = mirror("kind")
    key = mirror("key")
    val = mirror("val")

    def __init__(self, kind=CmdArgKind.ARGUMENT, key="", val=""):
        """
        Build a classified argument.

        Parameters
        - kind: CmdArgKind (or its integer value)
        - key: str, must be empty for ARGUMENT and STOP_PARSING; a single
          character for SHORT_FLAG and SHORT_OPTION.
        - val: str, must be empty for flags and STOP_PARSING.

        Raises
        - TypeError: when key or val is not a string.
        - ValueError: when kind is unknown or key/val do not fit the kind.
        """
        kind = CmdArgKind(kind)
        if not isinstance(key, str):
            raise TypeError("cmd-arg 'key' must be a string")
        if not isinstance(val, str):
            raise TypeError("cmd-arg 'val' must be a string")
        if key and not kind.keyed:
            raise ValueError(f"{kind.name.lower()} cannot have a 'key'")
        if kind.short and len(key) != 1:
            raise ValueError(f"{kind.name.lower()} 'key' must be a single character")
        if val and not kind.valued:
            raise ValueError(f"{kind.name.lower()} cannot have a 'val'")
        self._kind = kind
        self._key = key
        self._val = val

    def __eq__(self, other):
        if not isinstance(other, CmdArg):
            return NotImplemented
        return (self._kind, self._key, self._val) == (other._kind, other._key, other._val)

    def __hash__(self):
        return hash((self._kind, self._key, self._val))

    def __repr__(self):
        return f"CmdArg({', '.join('%s=%r' % pair for pair in self.__rich_repr__())})"

    def __rich_repr__(self):
        yield "kind", self._kind
        yield "key", self._key
        yield "val", self._val

    def __str__(self):
        """
        render back as one command-line token (inline '=' for option values).
        """
        match self._kind:
            case CmdArgKind.ARGUMENT:
                return self._val
            case CmdArgKind.SHORT_FLAG:
                return "-" + self._key
            case CmdArgKind.LONG_FLAG:
                return "--" + self._key
            case CmdArgKind.SHORT_OPTION:
                return "-%s=%s" % (self._key, self._val)
            case CmdArgKind.LONG_OPTION:
                return "--%s=%s" % (self._key, self._val)
            case CmdArgKind.STOP_PARSING:
                return "--"


__all__ = (
    "CmdArgKind",
    "CmdArg",
)
