"""Runtime environment for ceceio.

The Environment stores the session's bindings of Identifiers to evaluated
expressions, in insertion order, plus an explicit stack of scope frames.
Lambda application pushes a frame of formal -> deferred argument bindings
and pops it on return; lookups consult the frames innermost first, then the
session table. `def` always writes the session table.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from io import StringIO
from typing import Iterator, Mapping

from ceceio.errors import UnknownSymbol, EmptyCollection
from ceceio.types.expression import Expression
from ceceio.types.symbol import Identifier

logger = logging.getLogger(__name__)


class Environment:
    """Session binding table with a dynamic scope stack."""

    __slots__ = ("vars", "scopes")

    def __init__(self):
        self.vars: dict[Identifier, Expression] = {}
        self.scopes: list[dict[Identifier, Expression]] = []

    def define(self, name: Identifier, value: Expression) -> None:
        """Bind `name` to `value` in the session table, shadowing any prior binding."""
        if name in self.vars:
            logger.debug("Rebinding %s", name)
        self.vars[name] = value

    def lookup(self, name: Identifier) -> Expression:
        """Look up `name` in the scope frames (innermost first), then the session.

        Raises UnknownSymbol if the identifier is bound nowhere.
        """
        for frame in reversed(self.scopes):
            if name in frame:
                return frame[name]
        try:
            return self.vars[name]
        except KeyError:
            raise UnknownSymbol(name) from None

    def __contains__(self, name: Identifier) -> bool:
        return any(name in frame for frame in self.scopes) or name in self.vars

    def push_scope(self, bindings: Mapping[Identifier, Expression]) -> None:
        self.scopes.append(dict(bindings))

    def pop_scope(self) -> dict[Identifier, Expression]:
        """Remove and return the innermost frame; EmptyCollection if there is none."""
        if not self.scopes:
            raise EmptyCollection()
        return self.scopes.pop()

    @contextmanager
    def scope(self, bindings: Mapping[Identifier, Expression]) -> Iterator[Environment]:
        """Push a frame for the duration of a `with` block."""
        self.push_scope(bindings)
        try:
            yield self
        finally:
            self.pop_scope()

    @contextmanager
    def frames(self, scopes: list[dict[Identifier, Expression]]) -> Iterator[Environment]:
        """Swap in another frame stack (a caller's) for the duration of a `with` block."""
        saved = self.scopes
        self.scopes = scopes
        try:
            yield self
        finally:
            self.scopes = saved

    def snapshot(self) -> list[dict[Identifier, Expression]]:
        """The current frames, as a new list sharing the frame dicts."""
        return list(self.scopes)

    @property
    def depth(self) -> int:
        return len(self.scopes)

    def update(self, mapping: Mapping[Identifier, Expression]) -> None:
        """Bulk-define a mapping of Identifier -> value in the session table."""
        for k, v in mapping.items():
            self.define(k, v)

    def _write_vars(self, buffer: StringIO, table: Mapping[Identifier, Expression]) -> None:
        """Write one table into the buffer in a compact form."""
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v}" for k, v in table.items()))
        buffer.write("}")

    def __str__(self) -> str:
        """Human-readable view of the session table with the scope depth."""
        with StringIO() as buffer:
            self._write_vars(buffer, self.vars)
            if self.scopes:
                buffer.write(f" + {len(self.scopes)} scope(s)")
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Detailed representation: innermost frame first, session table last."""
        with StringIO() as buffer:
            buffer.write("<Environment: ")
            chain = []
            for table in [*reversed(self.scopes), self.vars]:
                env_buf = StringIO()
                self._write_vars(env_buf, table)
                chain.append(env_buf.getvalue())
            buffer.write(" -> ".join(chain))
            buffer.write(">")
            return buffer.getvalue()
