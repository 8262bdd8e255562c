"""
simplecli faults (argument errors) and rendering.

Scope
- FaultCode: stable numeric identifiers for every user-facing argument error.
- ArgumentError: base type carrying the offending string plus presentation
  options, able to render itself with rich and to turn into an exit status.
- trigger(): central entry point to surface a fault (respecting shell/fancy/colorful).
- getdoc(): optional description lookup for a code from the host application.

Taxonomy
- UnexpectedArgumentError: the token has no '-'/'--' prefix (carries the
  original token) or names no registered argument (carries the stripped name).
- DuplicateArgumentError: the argument was already supplied in this pass.
- MissingValueError: an option was given without a value.
- MissingRequiredArgumentError: a required argument never appeared.

Integration
- the registry raises these faults; nothing inside the library catches them.
- the runner calls trigger(fault, shell=..., ...): in non-shell mode the fault
  is raised, in shell mode it is rendered on stderr and the process exits 1.
"""
import copy
import sys
from collections import defaultdict
from enum import IntEnum
from types import MappingProxyType

from rich.console import Console, Group
from rich.panel import Panel
from rich.text import Text

console = Console(stderr=True)


class FaultCode(IntEnum):
    """
    canonical fault codes for argument errors (stable identifiers).

    grouping
    - tokens (1111x): UNEXPECTED_ARGUMENT, DUPLICATE_ARGUMENT, MISSING_VALUE
    - completeness (1112x): MISSING_REQUIRED_ARGUMENT
    """
    # --- token errors (1111x) ---
    UNEXPECTED_ARGUMENT         = 11112
    DUPLICATE_ARGUMENT          = 11115
    MISSING_VALUE               = 11117

    # --- completeness errors (1112x) ---
    MISSING_REQUIRED_ARGUMENT   = 11125

    def normalize(self):
        """
        return a host-normalized string for this code.

        the host application can provide a __codes__ mapping in __main__
        to override numeric ids with friendlier labels.
        """
        return str(getattr(__import__("__main__"), "__codes__", {}).get(self, self.value))


class ArgumentError(Exception):
    """
    base of every argument fault.

    attributes
    - argument: the offending string (token or argument name).
    - options: read-only presentation context (hint, title, code, token,
      prog, shell, fancy, colorful, ...).
    """
    code = None
    title = "argument error"
    template = "bad argument %r"

    def __init__(self, argument, /, **options):
        if not isinstance(argument, str):
            raise TypeError(f"{type(self).__name__} argument must be a string")
        super().__init__(argument)
        self.argument = argument
        self.options = MappingProxyType(options)

    @property
    def message(self):
        return self.template % self.argument

    def __str__(self):
        return self.message

    def __repr__(self):
        return f"{type(self).__name__}({self.argument!r})"

    def __rich__(self):
        main = __import__("__main__")

        styles = defaultdict(str, {
            # header parts
            "prog-name": "bold #E6E6F0",  # near-white program name
            "code": "bold #00E5FF",  # neon cyan fault code
            "error-title": "bold #FF4DA6",  # pinky title

            # body
            "error-message": "#C8C8D0",  # soft light gray message
            "hint-arrow": "#9CE19C dim",  # gentle green arrow
            "hint": "italic #9CE19C",  # gentle green hint text
            "docs": "underline #00E5FF dim",
        } | getattr(main, "__styles__", {}))

        colorful = self.options.get("colorful", True)
        fancy = self.options.get("fancy", False)

        def text(fragment, style=""):
            if not fragment:
                return Text("")
            return Text(str(fragment), styles[style] if colorful else "")

        code = self.options.get("code", self.code)
        prog = self.options.get("prog") or getattr(main, "__prog__", None) or "simplecli"

        header = Text.assemble(
            "[ ",
            text(prog, "prog-name"),
            " — ",
            text(code.normalize() if code is not None else "", "code"),
            " | ",
            text(self.options.get("title", self.title).title(), "error-title"),
            " ]"
        )
        message = text(self.message, "error-message")
        renders = [message]
        if hint := self.options.get("hint"):
            renders.append(Text.assemble(text(" → ", "hint-arrow"), text(hint, "hint")))
        if docs := self.options.get("docs"):
            renders.append(text(docs, "docs"))

        if fancy:
            return Panel(Group(*renders), title=header, title_align="left", width=console.width - 4)

        return Group(header, *renders)

    def __trigger__(self):
        if not self.options.get("shell", False):
            raise self from None
        console.print(self)
        sys.exit(1)

    def __replace__(self, *unused, **overrides):
        assert not unused, "positional arguments are not allowed"
        return type(self)(self.argument, **{**self.options, **overrides})


class UnexpectedArgumentError(ArgumentError):
    code = FaultCode.UNEXPECTED_ARGUMENT
    title = "unexpected argument"
    template = "unexpected argument %r"


class DuplicateArgumentError(ArgumentError):
    code = FaultCode.DUPLICATE_ARGUMENT
    title = "duplicate argument"
    template = "argument %r was already given"


class MissingValueError(ArgumentError):
    code = FaultCode.MISSING_VALUE
    title = "missing value"
    template = "argument %r expects a value"


class MissingRequiredArgumentError(ArgumentError):
    code = FaultCode.MISSING_REQUIRED_ARGUMENT
    title = "missing required argument"
    template = "required argument %r was not given"


def trigger(fault, /, **options):
    """
    surface a fault with the given runtime options.

    contract
    - fault must provide __trigger__ and __replace__ methods (see ArgumentError).
    - options are merged into the fault via __replace__(**options) before triggering.
    - in shell mode the fault is rendered via rich and the process exits;
      otherwise the merged fault is raised.
    """
    if (
        not hasattr(fault, "__trigger__") or
        not callable(fault.__trigger__) or
        not hasattr(fault, "__replace__") or
        not callable(fault.__replace__)
    ):
        raise TypeError("trigger() argument must have a __trigger__ and __replace__ methods")
    copy.replace(fault, **options).__trigger__()


def getdoc(code, /):
    """
    optional documentation fetch for a fault code.

    the host application may expose a __docs__ mapping in __main__ keyed by
    FaultCode; returns None when no entry exists.
    """
    if not isinstance(code, FaultCode):
        raise TypeError("getdoc() argument must be a fault-code")
    return getattr(__import__("__main__"), "__docs__", {}).get(code)


__all__ = (
    "ArgumentError",
    "UnexpectedArgumentError",
    "DuplicateArgumentError",
    "MissingValueError",
    "MissingRequiredArgumentError",
    "FaultCode",
    "trigger",
    "getdoc",
)
