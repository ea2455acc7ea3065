from __future__ import annotations
import sys


class _Name:
    __slots__ = ("name",)

    def __init__(self, name: str):
        # Intern to ensure fast equality/hash and reduce memory
        self.name = sys.intern(name)

    def __eq__(self, other: object) -> bool:
        return type(other) is type(self) and self.name == other.name

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.name))

    def __repr__(self):
        return f"{type(self).__name__}({self.name!r})"


class Symbol(_Name):
    """A keyword of the form `:name`. Evaluates to itself."""
    __slots__ = ()

    def __str__(self):
        return f":{self.name}"


class Identifier(_Name):
    """A reference to a binding, resolved through the environment."""
    __slots__ = ()

    def __str__(self):
        return self.name
