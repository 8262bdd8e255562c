"""
simplecli argument registry: build once, validate a token stream, resolve values.

What this module provides
- Arguments: a name -> Argument mapping built through a fluent insert() API.
  • iteration yields definitions ordered by name (never insertion order).
  • inserting a name twice keeps the last definition (no build-time error).
  • insert() stores an unstamped copy; the caller's Argument is never stamped.

Passes
- validate(token): prefix check, lookup, duplicate check for one token.
- parse(tokens): fail-fast validation of every token; each valid token stamps
  its definition as seen so a repeated argument is reported as a duplicate.
- resolve(tokens): complete pass; consumes option values (inline
  --name=value or the following token), records flags, enforces required
  definitions and returns the resolved name -> Value mapping.

Both passes stop at the first fault and roll back the stamps they made, so a
failed pass never leaves partial results behind.

Quick start
    from simplecli import Arguments, Argument

    arguments = (
        Arguments()
        .insert(Argument("id").with_required().with_takes_value().with_help("jail ID"))
        .insert(Argument("daemonize").with_help("Daemonize the jailer before execing"))
    )
    arguments.resolve(["--id", "7", "--daemonize"])
"""
import copy
import difflib
import logging
from collections import deque
from types import MappingProxyType

from rich.console import Group
from rich.table import Table
from rich.text import Text

from .arguments import Argument
from .faults import *
from .tokens import LONG_PREFIX, SHORT_PREFIX, is_prefixed, strip_prefix
from .utils import Unset, coalesce
from .values import Flag, Text as TextValue

logger = logging.getLogger(__name__)

PRESENT = Flag("true")
"""Value stamped for a flag given without inline text, and by parse() for every seen argument."""


class Arguments:
    """
    Registry of argument definitions keyed by name.

    A registry is meant to be built once per invocation, used by a single
    pass (which stamps user values), and discarded; reset() makes it
    reusable by clearing every stamp.
    """

    def __init__(self, arguments=(), /):
        self._arguments = {}
        for argument in arguments:
            self.insert(argument)

    def insert(self, argument, /):
        """
        Add a definition, replacing any previous one with the same name.

        The stored definition is a fresh, unstamped copy, so one Argument can
        be shared between registries. Returns the registry itself so
        insertions can be chained.
        """
        if not isinstance(argument, Argument):
            raise TypeError("insert() argument must be an argument")
        if argument.name in self._arguments:
            logger.debug("replacing argument definition %r", argument.name)
        self._arguments[argument.name] = copy.replace(argument)
        return self

    def names(self):
        return sorted(self._arguments)

    def get(self, name, default=None, /):
        return self._arguments.get(name, default)

    def __getitem__(self, name):
        return self._arguments[name]

    def __contains__(self, name):
        return name in self._arguments

    def __len__(self):
        return len(self._arguments)

    def __iter__(self):
        return iter([self._arguments[name] for name in self.names()])

    def __rich_repr__(self):
        for argument in self:
            yield argument.name, argument

    def __repr__(self):
        return f"arguments({", ".join(map(repr, self.names()))})"

    def validate(self, token, /):
        r"""
        check a single token and return the definition it names.

        order of checks
        - the token must start with '--' or '-'; otherwise the fault carries
          the original token.
        - '--' is stripped when present, else '-' (so '--x' names 'x').
        - the stripped name must be registered; otherwise the fault carries
          the stripped name.
        - the definition must not carry a user value yet.

        raises
        - UnexpectedArgumentError(token | name)
        - DuplicateArgumentError(name)

        this method never stamps; parse() and resolve() do.
        """
        if not is_prefixed(token):
            raise UnexpectedArgumentError(
                token,
                token=token,
                hint="arguments must start with %r or %r" % (LONG_PREFIX, SHORT_PREFIX)
            )

        name = strip_prefix(token)

        try:
            argument = self._arguments[name]
        except KeyError:
            suggestions = difflib.get_close_matches(name, self._arguments.keys(), 5)
            try:
                hint = "did you mean %r? run with '--help' to see all arguments" % (LONG_PREFIX + suggestions[0])
            except IndexError:
                hint = "run with '--help' to see all arguments"
            raise UnexpectedArgumentError(name, token=token, suggestions=suggestions, hint=hint) from None

        if argument.user_value is not None:
            raise DuplicateArgumentError(
                name,
                token=token,
                hint="give %r only once" % (LONG_PREFIX + name)
            )

        return argument

    def parse(self, tokens, /):
        """
        validate every token in order, stopping at the first fault.

        each valid token stamps its definition as seen, which is what makes
        a second occurrence a DuplicateArgumentError. values are not consumed
        and required definitions are not enforced here; see resolve().
        """
        stamped = []
        try:
            for token in tokens:
                argument = self.validate(token)
                argument._stamp(PRESENT)
                stamped.append(argument)
        except ArgumentError:
            self._rollback(stamped)
            raise
        logger.debug("parsed %d argument(s)", len(stamped))

    def resolve(self, tokens, /):
        r"""
        run the complete pass and return the resolved values.

        behavior
        - a prefixed token may carry an inline value ('--id=7'); only the part
          before the first '=' is validated.
        - options take their inline value, or else the next token when it
          exists and does not start with '-'.
        - flags record Flag("true"), or Flag(text) for '--flag=text'.
        - once every token is consumed, the first required definition (in
          name order) without a user value is reported.

        returns
        - read-only mapping name -> Value, in name order, holding the user
          value or the default of every definition that has one.

        raises
        - UnexpectedArgumentError, DuplicateArgumentError (see validate)
        - MissingValueError(name): option without value, or empty inline value.
        - MissingRequiredArgumentError(name)
        """
        tokens = deque(tokens)
        stamped = []
        try:
            while tokens:
                token = tokens.popleft()

                head, separator, inline = token, "", ""
                if is_prefixed(token):
                    head, separator, inline = token.partition("=")

                argument = self.validate(head)

                if separator and not inline:
                    raise MissingValueError(
                        argument.name,
                        token=token,
                        hint="add a value after '=' (for example: %s=<value>)" % head
                    )

                if argument.takes_value:
                    if separator:
                        value = TextValue(inline)
                    elif tokens and not tokens[0].startswith(SHORT_PREFIX):
                        value = TextValue(tokens.popleft())
                    else:
                        raise MissingValueError(
                            argument.name,
                            token=token,
                            hint="pass a value after a space or '=' (for example: %s <value>)" % head
                        )
                else:
                    value = Flag(inline) if separator else PRESENT

                argument._stamp(value)
                stamped.append(argument)

            for argument in self:
                if argument.required and argument.user_value is None:
                    raise MissingRequiredArgumentError(
                        argument.name,
                        hint="add %s to the command line" % (
                            LONG_PREFIX + argument.name + (" <value>" if argument.takes_value else "")
                        )
                    )
        except ArgumentError:
            self._rollback(stamped)
            raise

        values = {argument.name: argument.value for argument in self if argument.value is not None}
        logger.debug("resolved arguments: %r", values)
        return MappingProxyType(values)

    def reset(self):
        """
        Clear every user value so the registry can serve another pass.
        """
        for argument in self._arguments.values():
            argument._clear()

    def _rollback(self, stamped):
        if stamped:
            logger.debug("rolling back %d stamp(s)", len(stamped))
        for argument in stamped:
            argument._clear()

    def render_help(self, prog=Unset, /, *, colorful=True):
        """
        Build a rich renderable with a usage line and one row per argument.

        Rows follow name order. Colors come from the defaults below merged
        with an optional __styles__ mapping on __main__.
        """
        main = __import__("__main__")

        styles = {
            "usage-label": "bold #00E5FF",
            "prog-name": "bold #E6E6F0",
            "argument": "bold #FFB400",
            "metavar": "italic #9CE19C",
            "required": "bold #FF4DA6",
            "help": "#C8C8D0",
            "default": "dim #C8C8D0",
        } | getattr(main, "__styles__", {})

        def text(fragment, style):
            return Text(fragment, styles.get(style, "") if colorful else "")

        prog = coalesce(prog, getattr(main, "__prog__", None)) or "simplecli"

        usage = Text.assemble(text("usage:", "usage-label"), " ", text(prog, "prog-name"))
        for argument in self:
            spelling = LONG_PREFIX + argument.name + (" <value>" if argument.takes_value else "")
            usage.append(" ")
            usage.append_text(text(spelling if argument.required else "[%s]" % spelling, "argument"))

        table = Table(box=None, show_header=False, padding=(0, 2, 0, 2))
        for argument in self:
            spelling = text(LONG_PREFIX + argument.name, "argument")
            if argument.takes_value:
                spelling.append_text(text(" <value>", "metavar"))
            details = text(argument.help or "", "help")
            if argument.default_value is not None:
                details.append_text(text(" (default: %s)" % argument.default_value.text, "default"))
            table.add_row(spelling, text("required" if argument.required else "", "required"), details)

        return Group(usage, Text(""), table)


__all__ = (
    "Arguments",
)
