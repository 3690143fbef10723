# Copyright (c) 2023 - 2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

"""The *host* abstraction: whatever owns entities, their method tables and
their parent links.

The role machinery never creates entities or edits parent links; it only
reads them through a host and writes missing methods back into it.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from functools import partial
from typing import Any, Protocol, runtime_checkable

__all__ = ("Host", "Query", "DoesDescriptor")

Query = Callable[[Any, Any], bool]


@runtime_checkable
class Host(Protocol):
    """Structural contract every host implements."""

    def name_of(self, invocant: Any) -> str:
        """Entity name for a name, an entity, or an instance of one."""
        ...

    def register(self, invocant: Any) -> str:
        """Like :meth:`name_of`, but the entity must exist (or be made
        known) because it is about to be declared on."""
        ...

    def parents(self, entity: str) -> Sequence[str]:
        """Ordered parent names; empty for unknown entities."""
        ...

    def lookup(self, entity: str, method: str) -> Any | None:
        """The entity's *own* implementation of ``method``, or ``None``."""
        ...

    def install(self, entity: str, method: str, implementation: Any) -> None:
        ...

    def bind(self, query: Query) -> None:
        """Make ``query(invocant, role)`` reachable from every entity."""
        ...


class DoesDescriptor:
    """Hybrid method: ``Cls.does(role)`` and ``obj.does(role)`` both work."""

    __slots__ = ("query",)

    def __init__(self, query: Query):
        self.query = query

    def __get__(self, obj, objtype=None):
        return partial(self.query, objtype if obj is None else obj)
