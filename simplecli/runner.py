"""
simplecli front end: turn a raw command line into resolved values or an exit status.

invoke() glues the pieces together:
- capture tokens (sys.argv[1:], a shell-like string, or a sequence),
- split them at the first `--` (forwarded tokens are never validated),
- answer `--help` by printing the registry's help,
- resolve the remaining tokens against the registry,
- surface faults through faults.trigger (raise, or print and exit 1 in shell mode).

    from simplecli import invoke
    invocation = invoke(arguments, "--id 7 -- ls -la")
    invocation.values["id"]    # Text('7')
    invocation.forwarded       # ('ls', '-la')
"""
import collections
import logging
import shlex
import sys
from types import MappingProxyType

from rich.console import Console

from .faults import ArgumentError, getdoc, trigger
from .registry import Arguments
from .tokens import split, wants_help
from .utils import Unset

logger = logging.getLogger(__name__)

console = Console()

Invocation = collections.namedtuple("Invocation", (
    "values",
    "forwarded",
    "help",
))


def _tokenize(prompt):
    if prompt is Unset:
        return sys.argv[1:]
    if isinstance(prompt, str):
        return shlex.split(prompt)
    return list(prompt)


def invoke(arguments, prompt=Unset, /, *, prog=Unset, shell=False, fancy=False, colorful=True):
    """
    run one pass of the registry over a command line.

    parameters
    - arguments: Arguments
      the registry to resolve against; it is reset before the pass.
    - prompt: Unset | str | Iterable[str]
      Unset reads sys.argv[1:]; a string is split like a shell would.
    - prog: Unset | str
      program name shown in help and faults (falls back to __main__.__prog__).
    - shell: bool
      render faults and help for a terminal and terminate the process
      (exit 1 on faults, exit 0 after help) instead of raising/returning.
    - fancy: bool
      draw faults inside a panel.
    - colorful: bool
      style the output.

    returns
    - Invocation(values, forwarded, help)

    raises
    - ArgumentError subclasses when shell is False.
    """
    if not isinstance(arguments, Arguments):
        raise TypeError("invoke() first argument must be an arguments registry")

    own, forwarded = split(_tokenize(prompt))
    forwarded = tuple(forwarded)
    logger.debug("own tokens: %r, forwarded tokens: %r", own, forwarded)

    if wants_help(own):
        console.print(arguments.render_help(prog, colorful=colorful))
        if shell:
            sys.exit(0)
        return Invocation(MappingProxyType({}), forwarded, True)

    arguments.reset()
    try:
        values = arguments.resolve(own)
    except ArgumentError as fault:
        options = {"shell": shell, "fancy": fancy, "colorful": colorful, "docs": getdoc(fault.code)}
        if prog is not Unset:
            options["prog"] = prog
        trigger(fault, **options)

    return Invocation(values, forwarded, False)


__all__ = (
    "Invocation",
    "invoke",
)
