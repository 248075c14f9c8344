r"""
aparseopt lexical shapes and the classifier.

Overview
- classify(arg) inspects one raw argument and reports its lexical shape. It is a
  pure function: it never consults parser state nor the known flag names, so the
  same string always yields the same shape.

- Shapes (one class per variant, matched with class patterns)
  • ShortSingle(name)                    "-a"       flag, or option taking the next argument
  • ShortBundleOrInlineValue(name, rest) "-abcd"    flag bundle, or "-afile" inline value
  • ShortDelimited(name, value)          "-o:val"   option (also "-o=val")
  • LongSingle(name)                     "--name"   flag, or option taking the next argument
  • LongDelimited(name, value)           "--o:val"  option (also "--o=val")
  • StopDirective()                      "--"
  • PlainArgument()                      everything else, including "-" and ""

Delimiters
- ':' and '='. Long forms split at the first delimiter found after the dashes, so
  the name may be empty ("--:val" -> name "", value "val"). Short forms only look
  at the character right after the name; the rest is the verbatim value.

Quick example:
    >>> classify("-o=val")
    ShortDelimited(name='o', value='val')
    >>> match classify("--verbose"):
    ...     case LongSingle(name):
    ...         print(name)
    verbose
"""
import re

from .utils import *

DELIMITERS = frozenset(":=")

_delimiter = re.compile(r"[:=]")


class ShapeType(type):
    """
    Metaclass that turns a list of field names into a small immutable variant.

    Responsibilities
    - Declare __slots__ for the private backing fields ("_" + name).
    - Expose each field in __introspectable__ as a read-only property (mirror()).
    - Set __match_args__ so shapes work with positional class patterns.
    - Provide stable __repr__/__rich_repr__ implementations for diagnostics.

    Conventions
    - __typename__ is derived from the class name (camel-case split with hyphens).
    """
    __introspectable__ = ()

    def __new__(cls, name, bases, namespace, **options):
        fields = tuple(namespace.get("__introspectable__", ()))

        self = super().__new__(
            cls,
            name,
            bases,
            namespace | {
                "__typename__": re.sub(r"(?<!^)(?=[A-Z])", r"-", name).lower(),
                "__slots__": tuple("_" + field for field in fields),
                "__match_args__": fields,
            } | {
                field: mirror(field) for field in fields
            },
        )

        @rename("__repr__")
        def __repr__(self):
            return "%s(%s)" % (
                type(self).__name__,
                ", ".join("%s=%r" % pair for pair in self.__rich_repr__())
            )
        self.__repr__ = __repr__

        @rename("__rich_repr__")
        def __rich_repr__(self):
            for field in type(self).__match_args__:
                yield field, getattr(self, field)
        self.__rich_repr__ = __rich_repr__

        return self


class Shape(metaclass=ShapeType):
    """
    Base of every lexical shape.

    Instances are immutable; two shapes are equal when they are of the same
    variant and carry the same fields.
    """

    def __init__(self, *fields):
        if len(fields) != len(type(self).__match_args__):
            raise TypeError("%s() takes %d arguments but %d were given" % (
                type(self).__name__,
                len(type(self).__match_args__),
                len(fields)
            ))
        for name, object in zip(type(self).__match_args__, fields):
            if not isinstance(object, str):
                raise TypeError(f"{type(self).__typename__} {name!r} must be a string")
            setattr(self, "_" + name, object)

    def __eq__(self, other):
        if not isinstance(other, Shape):
            return NotImplemented
        return type(self) is type(other) and tuple(self.__rich_repr__()) == tuple(other.__rich_repr__())

    def __hash__(self):
        return hash((type(self), *(object for _, object in self.__rich_repr__())))


class ShortSingle(Shape):
    """"-a": a known flag, or an option whose value may be the next argument."""
    __introspectable__ = ("name",)


class ShortBundleOrInlineValue(Shape):
    """
    "-abcd" or "-afile".

    Ambiguous until the parser checks whether `name` is a known flag: when it is,
    the whole token is a bundle of flags; otherwise `rest` is the option value.
    """
    __introspectable__ = ("name", "rest")


class ShortDelimited(Shape):
    """"-o:val" or "-o=val": always an option, even when `name` is a known flag."""
    __introspectable__ = ("name", "value")


class LongSingle(Shape):
    """"--name": a known flag, or an option whose value may be the next argument."""
    __introspectable__ = ("name",)


class LongDelimited(Shape):
    """"--name:val" or "--name=val": always an option."""
    __introspectable__ = ("name", "value")


class StopDirective(Shape):
    """Exactly "--"."""


class PlainArgument(Shape):
    """A positional argument."""


def classify(arg, /):
    """
    Return the lexical shape of a single raw argument.

    rules
    - no leading '-', or exactly "-" (or the empty string) → PlainArgument
    - "--"                                                → StopDirective
    - "--name" / "--name:value" / "--name=value"          → LongSingle / LongDelimited
    - "-x"                                                → ShortSingle
    - "-x:value" / "-x=value"                             → ShortDelimited
    - "-xrest"                                            → ShortBundleOrInlineValue

    errors
    - TypeError if arg is not a string.
    """
    if not isinstance(arg, str):
        raise TypeError("classify() argument must be a string")

    if not arg.startswith("-") or arg == "-":
        return PlainArgument()

    if arg[1] == "-":
        if len(arg) == 2:
            return StopDirective()
        # the search starts after the dashes, so "--:x" has an empty name
        if (delimiter := _delimiter.search(arg, 2)) is None:
            return LongSingle(arg[2:])
        return LongDelimited(arg[2:delimiter.start()], arg[delimiter.end():])

    if len(arg) == 2:
        return ShortSingle(arg[1])
    if arg[2] in DELIMITERS:
        return ShortDelimited(arg[1], arg[3:])
    return ShortBundleOrInlineValue(arg[1], arg[2:])


__all__ = (
    "DELIMITERS",
    "Shape",
    "ShortSingle",
    "ShortBundleOrInlineValue",
    "ShortDelimited",
    "LongSingle",
    "LongDelimited",
    "StopDirective",
    "PlainArgument",
    "classify",
)
