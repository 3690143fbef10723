# Copyright (c) 2023 - 2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

"""Host for ordinary Python classes.

An entity is a class, named by its ``__name__``. Its parents are its
``__bases__`` (``object`` excluded), its own methods are ``vars(cls)``, and
installing a method is ``setattr``.
"""

from __future__ import annotations

import inspect
import logging
from typing import Any
from weakref import WeakValueDictionary

from .._errors import EntityNotFoundError
from .base import DoesDescriptor, Query

__all__ = ("ClassHost",)

logger = logging.getLogger(__name__)


class ClassHost:
    """Keeps a mapping ``entity name -> class``."""

    def __init__(self) -> None:
        self._classes: dict[str, type] = {}
        # classes met only by queries; never declared on, never installed into
        self._seen: WeakValueDictionary[str, type] = WeakValueDictionary()
        self._query: Query | None = None

    def get(self, name: str) -> type:
        try:
            return self._classes[name]
        except KeyError as exc:
            raise EntityNotFoundError(
                f"No class registered as '{name}'",
                details={"entity": name},
            ) from exc

    def __contains__(self, name: object) -> bool:
        return name in self._classes

    def _remember(self, cls: type) -> str:
        name = cls.__name__
        known = self._classes.get(name)
        if known is not None and known is not cls:
            logger.warning(
                "Class name '%s' rebound: %s -> %s",
                name,
                f"{known.__module__}.{known.__qualname__}",
                f"{cls.__module__}.{cls.__qualname__}",
            )
        self._classes[name] = cls
        return name

    # --------------------------------------------------------------------- #
    # Host protocol                                                         #
    # --------------------------------------------------------------------- #
    def name_of(self, invocant: Any) -> str:
        if isinstance(invocant, str):
            return invocant
        cls = invocant if isinstance(invocant, type) else type(invocant)
        name = cls.__name__
        if name not in self._classes:
            self._seen[name] = cls
        return name

    def register(self, invocant: Any) -> str:
        if isinstance(invocant, str):
            return self.get(invocant).__name__
        cls = invocant if isinstance(invocant, type) else type(invocant)
        name = self._remember(cls)
        if (
            self._query is not None
            and inspect.getattr_static(cls, "does", None) is None
        ):
            cls.does = DoesDescriptor(self._query)
        return name

    def parents(self, entity: str) -> tuple[str, ...]:
        cls = self._classes.get(entity) or self._seen.get(entity)
        if cls is None:
            return ()
        return tuple(
            self.name_of(base) for base in cls.__bases__ if base is not object
        )

    def lookup(self, entity: str, method: str) -> Any | None:
        return vars(self.get(entity)).get(method)

    def install(self, entity: str, method: str, implementation: Any) -> None:
        setattr(self.get(entity), method, implementation)

    def bind(self, query: Query) -> None:
        self._query = query
