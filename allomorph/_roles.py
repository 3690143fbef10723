# Copyright (c) 2023 - 2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

"""Role declaration, method installation and the ``does`` capability query.

A *role* is a named bundle of methods. An entity declares a role from its own
methods, other entities declare that they perform it (receiving any method
they do not define themselves), and anyone can ask whether an entity
performs a role, directly or through its ancestors::

    roles = Roles()

    @roles.with_roles(role=["eat", "sleep"])
    class Animal:
        def eat(self): return "chomp chomp"
        def sleep(self): return "snore snore"

    @roles.with_roles(does="Animal")
    class Dog: ...

    class RoboDog(Dog): ...

    Dog().eat()                      # 'chomp chomp'
    roles.does(RoboDog, "Animal")    # True
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any, TypeVar

from ._errors import MethodNotFoundError, ValidationError
from ._utils import to_list, to_method_names
from .config import AllomorphSettings
from .config import settings as default_settings
from .graph import walk_ancestors
from .hosts import ClassHost, Entity, EntityTable, Host
from .registry import DoesTable, RoleRegistry
from .types import DeferredMethod, MethodBinding

__all__ = ("Roles", "roles")

T = TypeVar("T", bound=type)

logger = logging.getLogger(__name__)


class Roles:
    """Role registry, does table and host, with the operations over them.

    Args:
        host: Where entities live. Defaults to a :class:`ClassHost`.
        registry: Role registry to share; a fresh one by default.
        does_table: Does table to share; a fresh one by default.
        settings: Overrides the process-wide settings.
    """

    def __init__(
        self,
        host: Host | None = None,
        *,
        registry: RoleRegistry | None = None,
        does_table: DoesTable | None = None,
        settings: AllomorphSettings | None = None,
    ) -> None:
        self.host = ClassHost() if host is None else host
        if not isinstance(self.host, Host):
            raise TypeError(
                f"host must implement the Host protocol, got {type(host)}"
            )
        self.registry = RoleRegistry() if registry is None else registry
        self.does_table = DoesTable() if does_table is None else does_table
        self.settings = settings or default_settings

        self._actions: dict[str, Callable[[Any, Any], Any]] = {
            "role": self.role,
            "does": self.perform,
            "multi": self.multi,
        }
        self.host.bind(self.does)
        if (
            isinstance(self.host, EntityTable)
            and self.host.max_depth is None
        ):
            self.host.max_depth = self.settings.MAX_ANCESTRY_DEPTH

    # --------------------------------------------------------------------- #
    # declaration                                                           #
    # --------------------------------------------------------------------- #
    def role(self, entity: Any, methods: str | list[str]) -> str:
        """Declare a role named after ``entity`` from its own ``methods``.

        Returns:
            The role name.

        Raises:
            MethodNotFoundError: ``entity`` lacks one of ``methods`` and
                ``STRICT_METHODS`` is on. Nothing is registered then.
        """
        name = self.host.register(entity)
        bindings = [self._capture(name, m) for m in to_method_names(methods)]

        self.registry.ensure(name)
        for binding in bindings:
            self.registry.add(name, binding)
        return name

    def multi(self, entity: Any, roles: Mapping[str, Any]) -> list[str]:
        """Declare several roles, each named by its label, from ``entity``.

        Returns:
            The role labels, in mapping order.
        """
        if not isinstance(roles, Mapping):
            raise ValidationError.from_value(
                roles, expected="mapping of role label to method names"
            )
        name = self.host.register(entity)

        captured: dict[str, list[MethodBinding]] = {}
        for label, methods in roles.items():
            if not isinstance(label, str) or not label:
                raise ValidationError.from_value(label, expected="role label")
            captured[label] = [
                self._capture(name, m) for m in to_method_names(methods)
            ]

        for label, bindings in captured.items():
            self.registry.ensure(label)
            for binding in bindings:
                self.registry.add(label, binding)
        return list(captured)

    def perform(self, entity: Any, role: Any) -> list[str]:
        """Declare that ``entity`` performs ``role`` (a name or a list).

        Every method currently registered for the role that ``entity`` does
        not define itself is installed into it. Roles are processed in the
        given order, so when two roles provide the same method the first one
        wins.

        Returns:
            Names of the methods installed by this call.
        """
        name = self.host.register(entity)
        installed: list[str] = []

        for role_name in (self.host.name_of(r) for r in to_list(role)):
            for binding in self.registry.bindings(role_name):
                if self.host.lookup(name, binding.name) is not None:
                    logger.debug(
                        "'%s' keeps its own '%s' over role '%s'",
                        name,
                        binding.name,
                        role_name,
                    )
                    continue
                self.host.install(name, binding.name, binding.implementation)
                installed.append(binding.name)
                logger.debug(
                    "Installed '%s' from role '%s' into '%s'",
                    binding.name,
                    role_name,
                    name,
                )
            self.does_table.record(name, role_name)
        return installed

    def declare(self, entity: Any, **config: Any) -> str:
        """Apply ``role``, ``multi`` and ``does`` labels in keyword order."""
        name = self.host.register(entity)
        for label, value in config.items():
            action = self._actions.get(label)
            if action is None:
                if self.settings.STRICT_LABELS:
                    raise ValidationError.from_value(
                        label,
                        expected=" | ".join(self._actions),
                        message=f"Unknown declaration label '{label}'",
                    )
                logger.warning(
                    "Ignoring unknown declaration label '%s' for '%s'",
                    label,
                    name,
                )
                continue
            action(entity, value)
        return name

    def with_roles(self, **config: Any) -> Callable[[T], T]:
        """Class decorator form of :meth:`declare`."""

        def decorator(cls: T) -> T:
            if not isinstance(cls, type):
                raise ValidationError.from_value(cls, expected="class")
            self.declare(cls, **config)
            return cls

        return decorator

    def entity(
        self,
        name: str,
        parents: Any = (),
        methods: Mapping[str, Any] | None = None,
        **config: Any,
    ) -> Entity:
        """Define an entity on an :class:`EntityTable` host, then declare."""
        if not isinstance(self.host, EntityTable):
            raise TypeError(
                f"entity() needs an EntityTable host, not {type(self.host)}"
            )
        defined = self.host.define(name, to_list(parents), methods)
        self.declare(defined, **config)
        return defined

    # --------------------------------------------------------------------- #
    # query                                                                 #
    # --------------------------------------------------------------------- #
    def does(self, invocant: Any, role: Any) -> bool:
        """Whether ``invocant`` performs ``role``, directly or by ancestry.

        Never installs anything or touches the registries. Unknown entities
        and unknown roles give ``False``.

        Raises:
            CyclicInheritanceError: The walk meets a cycle before an answer.
        """
        name = self.host.name_of(invocant)
        role = self.host.name_of(role)
        if self._performs(name, role):
            return True
        return any(
            self._performs(ancestor, role)
            for ancestor in self._ancestors(name)
        )

    def ancestors(self, entity: Any) -> list[str]:
        return list(self._ancestors(self.host.name_of(entity)))

    def methods_of(self, role: Any) -> list[str]:
        role = self.host.name_of(role)
        return [b.name for b in self.registry.bindings(role)]

    # --------------------------------------------------------------------- #
    # internals                                                             #
    # --------------------------------------------------------------------- #
    def _performs(self, entity: str, role: str) -> bool:
        return entity == role or self.does_table.has(entity, role)

    def _ancestors(self, entity: str):
        return walk_ancestors(
            entity,
            self.host.parents,
            max_depth=self.settings.MAX_ANCESTRY_DEPTH,
        )

    def _capture(self, entity: str, method: str) -> MethodBinding:
        impl = self.host.lookup(entity, method)
        if impl is None:
            if self.settings.STRICT_METHODS:
                raise MethodNotFoundError(
                    f"'{entity}' has no method '{method}' to put in a role",
                    details={"entity": entity, "method": method},
                )
            impl = DeferredMethod(self.host, entity, method)
        return MethodBinding(name=method, implementation=impl, source=entity)


# process-wide instance
roles = Roles()
