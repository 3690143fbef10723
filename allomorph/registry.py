# Copyright (c) 2023 - 2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

"""Process-wide tables: role name -> bindings, entity name -> roles."""

from __future__ import annotations

import logging
from collections import defaultdict

from .types import MethodBinding

__all__ = ("RoleRegistry", "DoesTable")

logger = logging.getLogger(__name__)


class RoleRegistry:
    """Keeps a mapping ``role name -> [MethodBinding, ...]``.

    Grows only: there is no way to remove a role or a binding.
    """

    def __init__(self) -> None:
        self._roles: dict[str, list[MethodBinding]] = {}

    def ensure(self, role: str) -> None:
        """Create ``role`` with no bindings if it is not known yet."""
        self._roles.setdefault(role, [])

    def add(self, role: str, binding: MethodBinding) -> None:
        self._roles.setdefault(role, []).append(binding)
        logger.debug(
            "Role '%s' gained '%s' from '%s'",
            role,
            binding.name,
            binding.source,
        )

    def bindings(self, role: str) -> tuple[MethodBinding, ...]:
        """Bindings of ``role`` in insertion order; empty if unknown."""
        return tuple(self._roles.get(role, ()))

    def names(self) -> list[str]:
        return list(self._roles)

    def __contains__(self, role: object) -> bool:
        return role in self._roles

    def __len__(self) -> int:
        return len(self._roles)


class DoesTable:
    """Explicit performance facts: ``entity name -> {role name, ...}``."""

    def __init__(self) -> None:
        self._does: defaultdict[str, set[str]] = defaultdict(set)

    def record(self, entity: str, role: str) -> None:
        self._does[entity].add(role)

    def has(self, entity: str, role: str) -> bool:
        # no defaultdict insertion on read
        return role in self._does.get(entity, ())

    def roles_of(self, entity: str) -> frozenset[str]:
        return frozenset(self._does.get(entity, ()))

    def __contains__(self, entity: object) -> bool:
        return entity in self._does

    def __len__(self) -> int:
        return len(self._does)
