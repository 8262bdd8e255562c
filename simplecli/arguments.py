r"""
simplecli argument definitions.

Overview
- Argument: descriptor of one named flag or option.
  • name: identifier without prefix (e.g., "id", "my-arg", "dry_run", "2fa").
  • required: whether resolution must see it at least once.
  • takes_value: False for a pure flag, True for an option.
  • help: optional short description used by help rendering.
  • default_value: optional Value used when the argument never appears.
  • user_value: Value stamped by the registry when the argument is seen.

- Fluent builders
  • with_required / with_takes_value / with_help / with_default return a new
    Argument (built through copy.replace); the receiver is never modified.

Invariants
- Every field but user_value is read-only after construction.
- user_value is write-once: stamping it twice raises DuplicateArgumentError.

Quick example:
    >>> from simplecli import Argument, Text
    >>> Argument("id").with_required().with_takes_value().with_help("jail ID")
    argument(name='id', required=True, takes_value=True, help='jail ID', default_value=None, user_value=None)
"""
import copy
import functools
import operator
import re

from .faults import DuplicateArgumentError
from .utils import *
from .values import Value


def _sanitize_metadata(metadata, /):
    """
    Internal: validate and normalize the constructor metadata in place.

    Raises
    - TypeError: when a field has the wrong type.
    - ValueError: when name/help are empty after trimming or the name is
      not hyphen-joined words without prefix.
    """
    if not isinstance(name := metadata["name"], str):
        raise TypeError("argument 'name' must be a string")
    elif not (name := name.strip()):
        raise ValueError("argument 'name' cannot be empty")
    elif not re.fullmatch(r"\w+(-\w+)*", name):
        # Words joined by single hyphens; no prefix, no leading or trailing hyphen.
        raise ValueError("argument 'name' must be words joined by hyphens, without prefix")
    metadata["name"] = name

    if not isinstance(help := metadata["help"], str | Unset):
        raise TypeError("argument 'help' must be a string")
    elif isinstance(help, str) and not (help := help.strip()):
        raise ValueError("argument 'help' cannot be empty")
    metadata["help"] = coalesce(help)

    if not isinstance(default := metadata["default_value"], Value | Unset):
        raise TypeError("argument 'default_value' must be a value")
    metadata["default_value"] = coalesce(default)

    metadata["required"] = bool(metadata["required"])
    metadata["takes_value"] = bool(metadata["takes_value"])


class Argument:
    """
    Named flag or option definition.

    Construction validates and normalizes every field (see _sanitize_metadata);
    the registry is the only party expected to stamp user_value.
    """

    __introspectable__ = (
        "name",
        "required",
        "takes_value",
        "help",
        "default_value",
        "user_value",
    )

    name = mirror("name")
    required = mirror("required")
    takes_value = mirror("takes_value")
    help = mirror("help")
    default_value = mirror("default_value")
    user_value = mirror("user_value")

    def __init__(
            self,
            name,
            /,
            *,
            required=False,
            takes_value=False,
            help=Unset,
            default_value=Unset,
    ):
        metadata = {
            "name": name,
            "required": required,
            "takes_value": takes_value,
            "help": help,
            "default_value": default_value,
        }
        _sanitize_metadata(metadata)

        for name, object in metadata.items():
            setattr(self, "_" + name, object)
        self._user_value = None

    @property
    def value(self):
        """
        The user value when stamped, otherwise the default (or None).
        """
        return self._user_value if self._user_value is not None else self._default_value

    def with_required(self, flag=True, /):
        return copy.replace(self, required=flag)

    def with_takes_value(self, flag=True, /):
        return copy.replace(self, takes_value=flag)

    def with_help(self, help, /):
        return copy.replace(self, help=help)

    def with_default(self, value, /):
        return copy.replace(self, default_value=value)

    def _stamp(self, value, /):
        # Write-once slot: a second stamp is a duplicate usage.
        if not isinstance(value, Value):
            raise TypeError("argument user value must be a value")
        if self._user_value is not None:
            raise DuplicateArgumentError(self._name)
        self._user_value = value

    def _clear(self):
        self._user_value = None

    def __replace__(self, *unused, **overrides):
        assert not unused, "positional arguments are not allowed"
        fields = {
            "required": self._required,
            "takes_value": self._takes_value,
            "help": Unset if self._help is None else self._help,
            "default_value": Unset if self._default_value is None else self._default_value,
        } | overrides
        return type(self)(fields.pop("name", self._name), **fields)

    def __rich_repr__(self):
        for name in type(self).__introspectable__:
            yield name, getattr(self, name)

    def __repr__(self):
        return f"argument({
            ", ".join(map(functools.partial(operator.mod, "%s=%r"), self.__rich_repr__()))
        })"


__all__ = (
    "Argument",
)
