"""
aparseopt parser: a cursor over raw arguments that yields classified arguments.

What this module provides
- OptParser: owns the raw argument tuple, a cursor (pos), a bundle offset used
  while decomposing "-abc" into single flags, and the most recent result
  (current). Each step classifies the raw argument under the cursor (see
  aparseopt.shapes) and resolves flag/option ambiguity with the caller's
  vocabularies of known flags.

Syntax accepted
- "-a out", "-a:out", "-a=out" and "-aout" are equivalent short options.
- "--long out", "--long:out", "--long=out" are equivalent long options.
- "-abcd" is a bundle of four flags when 'a' is a known short flag.
- "--" stops option parsing; "-" is a positional argument.
- Delimited forms are always options, even for names listed as flags.

Vocabularies
- shortflags / longflags are read on every step and never snapshotted, so a
  caller may swap or mutate them mid-parse (for example once a subcommand has
  been recognized). A change applies to the very next step.

Quick start
    from aparseopt import OptParser, CmdArgKind

    parser = OptParser("--verbose -p /tmp list -lh docs", longflags=["verbose"])
    for arg in parser:
        if arg.kind is CmdArgKind.ARGUMENT and arg.val == "list":
            parser.shortflags = "lh"
            parser.longflags = ()
        ...

Design notes
- The bundle state is explicit (pos + offset) rather than a suspended generator,
  so seeking with `parser.pos = n` is a plain synchronous reset.
- Stepping past the end is a no-op; iteration simply stops.
"""
import shlex
import sys
from collections.abc import Iterable, Set

from .arguments import CmdArg, CmdArgKind
from .faults import *
from .shapes import *
from .utils import *


class OptParser:
    """
    Single-pass tokenizer over command-line arguments.

    Attributes
    - shell, fancy, colorful: runtime options forwarded to surfaced faults.
    """

    def __init__(
            self,
            prompt=Unset,
            /,
            shortflags=(),
            longflags=(),
            *,
            shell=False,
            fancy=False,
            colorful=True
    ):
        """
        Create a parser session.

        Parameters
        - prompt:
          • Unset or "": read tokens from sys.argv[1:].
          • str: shell-like string; will be split via shlex.split.
          • Iterable[str]: pre-tokenized sequence, used verbatim.
        - shortflags: str | Iterable[str]
          Single characters that are flags (take no value).
        - longflags: Iterable[str]
          Long names that are flags (take no value).
        - shell: bool
          Render faults on stderr and exit instead of raising.
        - fancy: bool
          Render faults inside a panel.
        - colorful: bool
          Render faults with styles.

        Raises
        - PromptTypeError: when prompt is not Unset/str/Iterable[str].
        - QuotingError: when a string prompt has unbalanced quotes.
        - VocabularyError: when a flag vocabulary is malformed.
        """
        self.shell = bool(shell)
        self.fancy = bool(fancy)
        self.colorful = bool(colorful)

        self._input = self._tokenize(prompt)
        self._pos = 0
        self._bundle = 0  # index of the next flag inside input[pos]; 0 outside a bundle
        self._current = CmdArg()

        self.shortflags = shortflags
        self.longflags = longflags

    def trigger(self, fault, /, **options):
        """
        Surface a fault with this parser's runtime options.
        """
        trigger(fault, **options, shell=self.shell, fancy=self.fancy, colorful=self.colorful)

    def _tokenize(self, prompt):
        if prompt is Unset or prompt == "":
            return tuple(sys.argv[1:])
        if isinstance(prompt, str):
            try:
                return tuple(shlex.split(prompt))
            except ValueError as error:
                self.trigger(QuotingError(
                    "cannot split command line %r: %s" % (prompt, str(error).lower()),
                    title="unbalanced quotes",
                    code=FaultCode.UNBALANCED_QUOTES,
                    hint="close every quote or escape it with a backslash",
                    prompt=prompt,
                ))
        if isinstance(prompt, Iterable):
            tokens = tuple(prompt)
            for index, token in enumerate(tokens):
                if not isinstance(token, str):
                    self.trigger(PromptTypeError(
                        "argument at index %d is %s, not a string" % (index, type(token).__name__),
                        title="malformed prompt",
                        code=FaultCode.MALFORMED_PROMPT,
                        hint="pass a command-line string or an iterable of strings",
                        index=index,
                    ))
            return tokens
        self.trigger(PromptTypeError(
            "prompt must be a string or an iterable of strings, not %s" % type(prompt).__name__,
            title="malformed prompt",
            code=FaultCode.MALFORMED_PROMPT,
            hint="pass a command-line string or an iterable of strings",
        ))

    def _vocabulary(self, flags, *, short):
        # an existing set is shared as-is so later caller mutations stay visible
        if short and isinstance(flags, str):
            flags = set(flags)
        elif isinstance(flags, str) or not isinstance(flags, Iterable):
            self.trigger(VocabularyError(
                "%s flags must be an iterable of strings, not %s" % (
                    "short" if short else "long",
                    type(flags).__name__
                ),
                title="malformed vocabulary",
                code=FaultCode.MALFORMED_VOCABULARY,
                hint="wrap a single long flag in a list (for example: ['verbose'])" if isinstance(flags, str) else
                     "pass a set, list or tuple of flag names",
            ))
        elif not isinstance(flags, Set):
            flags = set(flags)

        for flag in flags:
            if not isinstance(flag, str) or (short and len(flag) != 1):
                self.trigger(VocabularyError(
                    "%s flag %r must be %s" % (
                        "short" if short else "long",
                        flag,
                        "a single character" if short else "a string"
                    ),
                    title="malformed vocabulary",
                    code=FaultCode.MALFORMED_VOCABULARY,
                    hint="write short flags without dashes (for example: 'v' rather than '-v')" if short else
                         "write long flags without dashes (for example: 'verbose' rather than '--verbose')",
                    flag=flag,
                ))
        return flags

    @property
    def shortflags(self):
        """the live set of single-character flag names."""
        return self._shortflags

    @shortflags.setter
    def shortflags(self, flags):
        self._shortflags = self._vocabulary(flags, short=True)

    @property
    def longflags(self):
        """the live set of long flag names."""
        return self._longflags

    @longflags.setter
    def longflags(self, flags):
        self._longflags = self._vocabulary(flags, short=False)

    @property
    def input(self):
        return self._input

    @property
    def current(self):
        """the most recent classified argument."""
        return self._current

    @property
    def pos(self):
        """index of the next unconsumed raw argument."""
        return self._pos

    @pos.setter
    def pos(self, pos):
        """
        seek to another raw argument, abandoning any bundle in progress.

        raises
        - TypeError: when pos is not an integer.
        - CursorRangeError: when pos is outside 0..len(input)-1.
        """
        if not isinstance(pos, int) or isinstance(pos, bool):
            raise TypeError("pos must be an integer")
        if not 0 <= pos < len(self._input):
            self.trigger(CursorRangeError(
                "cannot set position %d outside bounds of input (0..%d)" % (pos, len(self._input) - 1),
                title="cursor out of range",
                code=FaultCode.CURSOR_OUT_OF_RANGE,
                hint="seek to an index of an existing argument" if self._input else
                     "the input is empty, there is nothing to seek to",
                pos=pos,
                length=len(self._input),
            ))
        self._pos = pos
        self._bundle = 0

    def hasnext(self):
        return self._pos < len(self._input)

    def _bundled(self, arg):
        self._current = CmdArg(CmdArgKind.SHORT_FLAG, arg[self._bundle])
        self._bundle += 1
        if self._bundle >= len(arg):
            self._pos += 1
            self._bundle = 0

    def _complete(self):
        # the following argument is taken as the value only when it is plain
        if self.hasnext() and isinstance(classify(value := self._input[self._pos]), PlainArgument):
            self._pos += 1
            return value
        return ""

    def next(self):
        """
        Classify the next argument and store it as current.

        Does nothing once the input is exhausted.
        """
        if not self.hasnext():
            return

        arg = self._input[self._pos]

        if self._bundle:
            self._bundled(arg)
            return

        match classify(arg):
            case ShortSingle(name):
                self._pos += 1
                if name in self._shortflags:
                    self._current = CmdArg(CmdArgKind.SHORT_FLAG, name)
                else:
                    self._current = CmdArg(CmdArgKind.SHORT_OPTION, name, self._complete())
            case ShortBundleOrInlineValue(name, rest):
                if name in self._shortflags:
                    self._bundle = 1  # index 0 is the dash
                    self._bundled(arg)
                else:
                    self._pos += 1
                    self._current = CmdArg(CmdArgKind.SHORT_OPTION, name, rest)
            case ShortDelimited(name, value):
                self._pos += 1
                self._current = CmdArg(CmdArgKind.SHORT_OPTION, name, value)
            case LongSingle(name):
                self._pos += 1
                if name in self._longflags:
                    self._current = CmdArg(CmdArgKind.LONG_FLAG, name)
                else:
                    self._current = CmdArg(CmdArgKind.LONG_OPTION, name, self._complete())
            case LongDelimited(name, value):
                self._pos += 1
                self._current = CmdArg(CmdArgKind.LONG_OPTION, name, value)
            case StopDirective():
                self._pos += 1
                self._current = CmdArg(CmdArgKind.STOP_PARSING)
            case PlainArgument():
                self._pos += 1
                self._current = CmdArg(CmdArgKind.ARGUMENT, val=arg)

    def nextget(self):
        """step once (see next()) and return current."""
        self.next()
        return self._current

    def remaining(self):
        """
        the raw arguments from the cursor to the end, unconsumed.

        typically called after a STOP_PARSING argument to collect the operands.
        """
        return list(self._input[self._pos:])

    def getopt(self):
        """
        yield current after every step until the input is exhausted.

        the generator is not restartable; seek with `parser.pos = 0` and call
        getopt() again to parse the input once more.
        """
        while self.hasnext():
            self.next()
            yield self._current

    def __iter__(self):
        return self

    def __next__(self):
        if not self.hasnext():
            raise StopIteration
        self.next()
        return self._current

    def __repr__(self):
        return f"OptParser({', '.join('%s=%r' % pair for pair in self.__rich_repr__())})"

    def __rich_repr__(self):
        yield "input", self._input
        yield "pos", self._pos
        yield "current", self._current
        yield "shortflags", self._shortflags
        yield "longflags", self._longflags


__all__ = (
    "OptParser",
)
