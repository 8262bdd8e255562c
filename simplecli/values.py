"""
simplecli values: what an argument holds once it has been seen.

Value is a closed union of exactly two variants:
- Flag(text): boolean-like text recorded for a presence-only argument
  ("true" when the flag is given bare, the inline text for --flag=text).
- Text(text): the raw string supplied to an option.

No coercion happens here; both variants carry the token text untouched.

    >>> match Text("7"):
    ...     case Text(text):
    ...         print(text)
    7
"""


class Value:
    """
    Base of the two value variants; not instantiable on its own.

    Instances are immutable and hashable. Two values are equal only when
    they are the same variant carrying the same text.
    """
    __slots__ = ("_text",)
    __match_args__ = ("text",)

    def __new__(cls, text, /):
        if cls is Value:
            raise TypeError("type 'Value' cannot be instantiated, use Flag or Text")
        if not isinstance(text, str):
            raise TypeError(f"{cls.__name__.lower()} value must be a string")
        self = super().__new__(cls)
        object.__setattr__(self, "_text", text)
        return self

    def __init_subclass__(cls, **options):
        # Closed union: only the variants declared below may exist.
        if cls.__module__ != __name__ or cls.__name__ not in ("Flag", "Text"):
            raise TypeError(f"type {Value.__name__!r} is not an acceptable base type")
        super().__init_subclass__(**options)

    @property
    def text(self):
        return self._text

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__.lower()} values are immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__.lower()} values are immutable")

    def __eq__(self, other):
        if not isinstance(other, Value):
            return NotImplemented
        return type(self) is type(other) and self._text == other._text

    def __hash__(self):
        return hash((type(self).__name__, self._text))

    def __str__(self):
        return self._text

    def __repr__(self):
        return f"{type(self).__name__}({self._text!r})"

    def __rich_repr__(self):
        yield self._text

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self

    def __reduce__(self):
        return type(self), (self._text,)


class Flag(Value):
    """Boolean-like text recorded for a presence-only argument."""
    __slots__ = ()


class Text(Value):
    """Raw string supplied for an option."""
    __slots__ = ()


__all__ = (
    "Value",
    "Flag",
    "Text",
)
