# Copyright (c) 2023 - 2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

"""Explicit entities: a name, an ordered parent list and a method table."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from itertools import chain
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr

from .._errors import (
    EntityNotFoundError,
    ItemExistsError,
    MethodNotFoundError,
    ValidationError,
)
from ..config import settings
from ..graph import walk_ancestors
from .base import Query

__all__ = ("Entity", "Instance", "EntityTable")


class Entity(BaseModel):
    """An entity that owns its method table.

    ``methods`` maps a method name to its implementation. Implementations
    receive the :class:`Instance` they are called on as first argument.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    name: str = Field(min_length=1)
    parents: list[str] = Field(default_factory=list)
    methods: dict[str, Any] = Field(default_factory=dict)

    _table: Any = PrivateAttr(default=None)

    def defines(self, method: str) -> bool:
        return method in self.methods

    def method(self, func: Callable | None = None, *, name: str | None = None):
        """Add ``func`` to the method table; usable as a decorator."""

        def decorator(f: Callable) -> Callable:
            self.methods[name or f.__name__] = f
            return f

        return decorator(func) if func is not None else decorator

    def new(self, **attrs: Any) -> Instance:
        return Instance(self, **attrs)

    def does(self, role: Any) -> bool:
        return self._require_table().query(self, role)

    def _require_table(self) -> EntityTable:
        if self._table is None:
            raise EntityNotFoundError(
                f"Entity '{self.name}' is not defined on any table",
                details={"entity": self.name},
            )
        return self._table

    def __hash__(self) -> int:
        return hash(self.name)

    def __eq__(self, other) -> bool:
        return isinstance(other, Entity) and self.name == other.name


class Instance:
    """An object of an :class:`Entity`.

    Attribute access falls back to the entity's method table and then to its
    ancestors' tables, binding the instance as first argument.
    """

    def __init__(self, entity: Entity, /, **attrs: Any):
        self.__dict__["entity"] = entity
        self.__dict__.update(attrs)

    def __getattr__(self, name: str):
        if name.startswith("__"):
            raise AttributeError(name)
        entity = self.__dict__["entity"]
        try:
            impl = entity._require_table().resolve(entity.name, name)
        except MethodNotFoundError as exc:
            raise AttributeError(
                f"'{entity.name}' object has no attribute '{name}'"
            ) from exc
        if hasattr(impl, "__get__"):
            return impl.__get__(self, type(self))
        return impl

    def does(self, role: Any) -> bool:
        return self.entity.does(role)

    def __repr__(self) -> str:
        attrs = {k: v for k, v in self.__dict__.items() if k != "entity"}
        return f"{self.entity.name}({attrs})"


class EntityTable:
    """Host for explicit entities, keyed by name."""

    def __init__(self, *, max_depth: int | None = None) -> None:
        self._entities: dict[str, Entity] = {}
        self._query: Query | None = None
        # None: taken from the bound roles, else the process-wide settings
        self.max_depth = max_depth

    # --------------------------------------------------------------------- #
    # definition                                                            #
    # --------------------------------------------------------------------- #
    def define(
        self,
        name: str,
        parents: Iterable[str | Entity] = (),
        methods: Mapping[str, Any] | None = None,
    ) -> Entity:
        if name in self._entities:
            raise ItemExistsError(
                f"Entity '{name}' is already defined",
                details={"entity": name},
            )
        entity = Entity(
            name=name,
            parents=[self.name_of(p) for p in parents],
            methods=dict(methods or {}),
        )
        entity._table = self
        self._entities[name] = entity
        return entity

    def get(self, name: str) -> Entity:
        try:
            return self._entities[name]
        except KeyError as exc:
            raise EntityNotFoundError(
                f"Entity '{name}' is not defined",
                details={"entity": name},
            ) from exc

    def resolve(self, entity: str, method: str) -> Any:
        """Dispatch ``method`` through ``entity`` and then its ancestors."""
        ancestors = walk_ancestors(
            entity,
            self.parents,
            max_depth=self.max_depth or settings.MAX_ANCESTRY_DEPTH,
        )
        for name in chain((entity,), ancestors):
            found = self._entities.get(name)
            if found is not None and method in found.methods:
                return found.methods[method]
        raise MethodNotFoundError(
            f"'{entity}' has no method '{method}'",
            details={"entity": entity, "method": method},
        )

    def query(self, invocant: Any, role: Any) -> bool:
        if self._query is None:
            raise EntityNotFoundError("Entity table is not bound to any roles")
        return self._query(invocant, role)

    def __getitem__(self, name: str) -> Entity:
        return self.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._entities

    def __iter__(self):
        return iter(self._entities.values())

    def __len__(self) -> int:
        return len(self._entities)

    # --------------------------------------------------------------------- #
    # Host protocol                                                         #
    # --------------------------------------------------------------------- #
    def name_of(self, invocant: Any) -> str:
        if isinstance(invocant, str):
            return invocant
        if isinstance(invocant, Entity):
            return invocant.name
        if isinstance(invocant, Instance):
            return invocant.entity.name
        raise ValidationError.from_value(
            invocant, expected="entity name, Entity or Instance"
        )

    def register(self, invocant: Any) -> str:
        return self.get(self.name_of(invocant)).name

    def parents(self, entity: str) -> tuple[str, ...]:
        found = self._entities.get(entity)
        return tuple(found.parents) if found is not None else ()

    def lookup(self, entity: str, method: str) -> Any | None:
        return self.get(entity).methods.get(method)

    def install(self, entity: str, method: str, implementation: Any) -> None:
        self.get(entity).methods[method] = implementation

    def bind(self, query: Query) -> None:
        self._query = query
