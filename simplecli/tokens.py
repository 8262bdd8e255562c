"""
Token helpers: prefix constants, the `--` splitter and the help scan.

All functions here are pure: they never mutate their input and never fail
for a sequence of strings (including an empty one).
"""

SHORT_PREFIX = "-"
LONG_PREFIX = "--"
SEPARATOR = "--"
HELP = "--help"


def split(tokens, /):
    """
    partition tokens at the first exact `--` into (own, forwarded).

    - the boundary token itself is dropped from both halves.
    - only the first `--` counts; later ones stay inside forwarded.
    - without a boundary, own is the whole input and forwarded is empty.

        >>> split(["foo", "--", "--bar", "--"])
        (['foo'], ['--bar', '--'])
    """
    tokens = list(tokens)
    try:
        index = tokens.index(SEPARATOR)
    except ValueError:
        return tokens, []
    return tokens[:index], tokens[index + 1:]


def wants_help(tokens, /):
    """
    tell whether the help switch appears among tokens (exact match only).
    """
    return any(token == HELP for token in tokens)


def strip_prefix(token, /):
    """
    remove the long prefix when present, otherwise the short one.

    `--x` names `x` (never `-x`); a token with neither prefix is returned as-is.
    """
    if token.startswith(LONG_PREFIX):
        return token[len(LONG_PREFIX):]
    if token.startswith(SHORT_PREFIX):
        return token[len(SHORT_PREFIX):]
    return token


def is_prefixed(token, /):
    return token.startswith((LONG_PREFIX, SHORT_PREFIX))


__all__ = (
    "SHORT_PREFIX",
    "LONG_PREFIX",
    "SEPARATOR",
    "HELP",
    "split",
    "wants_help",
    "strip_prefix",
    "is_prefixed",
)
