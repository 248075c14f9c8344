"""
aparseopt faults (errors) and rendering.

Scope
- FaultCode: canonical, stable numeric identifiers for every fault the parser can
  surface. Codes are grouped by domain to keep logs/searches predictable.
- ParserException: base type that carries message + options and knows how to
  render itself (rich) and how to surface itself (raise, or print and exit).
- trigger(): central entry point to surface any fault (respecting shell/fancy/colorful).

Policy
- Tokens are never rejected: every raw argument classifies into some shape, so
  there is no "malformed token" fault. Faults only report API misuse: a cursor
  moved out of bounds, a prompt or flag vocabulary of the wrong type, or a
  command-line string that cannot be split.
- Each concrete fault also derives from the matching builtin (IndexError,
  TypeError, ValueError) so callers may catch either.

Integration
- OptParser builds faults and passes them to trigger(fault, **ctx) together with
  its runtime options. In non-shell mode exceptions are raised; in shell mode they
  are rendered via rich on stderr and the process exits with status 1.
- Hosts may customize rendering from __main__: __styles__ (style overrides),
  __codes__ (code labels), __prog__ (program name in the header).
"""
import copy
import os.path
import sys
from collections import defaultdict
from enum import IntEnum
from types import MappingProxyType

from rich.console import Console, Group
from rich.panel import Panel
from rich.text import Text

from .utils import Unset

console = Console(stderr=True)


class FaultCode(IntEnum):
    """
    canonical fault codes (stable identifiers).

    grouping (by high-level domain)
    - cursor (2110x)
      • CURSOR_OUT_OF_RANGE
    - input (2111x)
      • MALFORMED_PROMPT, UNBALANCED_QUOTES, MALFORMED_VOCABULARY
    """
    # --- cursor errors (21xxx) ---
    CURSOR_OUT_OF_RANGE         = 21101

    # --- input errors (21xxx) ---
    MALFORMED_PROMPT            = 21111
    UNBALANCED_QUOTES           = 21112
    MALFORMED_VOCABULARY        = 21113

    def normalize(self):
        """
        return a host-normalized string for this code.

        the host application can provide a __codes__ mapping in __main__
        to override numeric ids with friendlier labels. when no mapping
        is present, the numeric value is returned as a string.
        """
        return str(getattr(__import__("__main__"), "__codes__", {}).get(self, self.value))


class ParserException(Exception):
    """
    base of all parser faults.

    options (read-only mapping) commonly carry: code, title, hint, shell, fancy,
    colorful, plus any context useful to a reporter (pos, length, prompt...).
    """

    def __init__(self, message=Unset, /, **options):
        assert isinstance(message, str | Unset)
        super().__init__(message)
        self.message = message
        self.options = MappingProxyType(options)

    def __str__(self):
        return self.message if isinstance(self.message, str) else ""

    def __rich__(self):
        main = __import__("__main__")

        styles = defaultdict(str, {
            # header parts
            "prog-name": "bold #E6E6F0",  # near-white program name
            "code": "bold #00E5FF",  # neon cyan fault code
            "error-title": "bold #FF4DA6",  # friendly pinky title

            # body
            "error-message": "#C8C8D0",  # soft light gray message
            "hint-arrow": "#9CE19C dim",  # gentle green arrow
            "hint": "italic #9CE19C",  # gentle green hint text
        } | getattr(main, "__styles__", {}))

        colorful = self.options.get("colorful", True)
        fancy = self.options.get("fancy", False)

        def styler(style):
            return styles[style] if colorful else ""

        def text(fragment, style=""):
            if not fragment:
                return Text("")
            if not colorful:
                return Text(str(fragment))
            if isinstance(fragment, Text):
                return fragment
            return Text(str(fragment), style)

        prog = text(getattr(main, "__prog__", os.path.basename(sys.argv[0]) or "aparseopt"), styler("prog-name"))

        header = Text.assemble(
            "[ ",
            prog,
            " — ",
            text(self.options["code"].normalize(), styler("code")),
            " | ",
            text(self.options["title"].title(), styler("error-title")),
            " ]"
        )
        message = text(self.message, styler("error-message"))
        hint = Text.assemble(text(" → ", styler("hint-arrow")), text(self.options.get("hint"), styler("hint")))

        if fancy:
            return Panel(Group(message, hint), title=header, title_align="left")

        return Group(header, message, hint)

    def __trigger__(self) -> None:
        if not self.options.get("shell", False):
            raise self from None
        console.print(self)
        sys.exit(1)

    def __replace__(self, *unused, **overrides):
        assert not unused, "unused arguments are not allowed"
        return type(self)(self.message, **{**self.options, **overrides})


class CursorRangeError(ParserException, IndexError): ...
class PromptTypeError(ParserException, TypeError): ...
class QuotingError(ParserException, ValueError): ...
class VocabularyError(ParserException, TypeError): ...


def trigger(fault, /, **options):
    """
    surface a fault with the given runtime options.

    contract
    - fault must provide __trigger__ and __replace__ methods (see ParserException).
    - options are merged into the fault via __replace__(**options) before triggering.
    - in shell mode, rendering happens via the stderr rich console and the process
      exits; otherwise, the exception is raised.
    """
    if (
        not hasattr(fault, "__trigger__") or
        not callable(fault.__trigger__) or
        not hasattr(fault, "__replace__") or
        not callable(fault.__replace__)
    ):
        raise TypeError("trigger() argument must have a __trigger__ and __replace__ methods")
    copy.replace(fault, **options).__trigger__()


__all__ = (
    "ParserException",
    "CursorRangeError",
    "PromptTypeError",
    "QuotingError",
    "VocabularyError",
    "FaultCode",
    "trigger",
)
