# Copyright (c) 2023 - 2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

import logging

from ._errors import (
    AllomorphError,
    CyclicInheritanceError,
    EntityNotFoundError,
    InheritanceError,
    ItemExistsError,
    ItemNotFoundError,
    MethodNotFoundError,
    ValidationError,
)
from ._roles import Roles, roles
from .config import AllomorphSettings, settings
from .graph import walk_ancestors
from .hosts import ClassHost, Entity, EntityTable, Host, Instance
from .registry import DoesTable, RoleRegistry
from .types import DeferredMethod, MethodBinding
from .version import __version__

logger = logging.getLogger(__name__)
logger.setLevel(settings.LOG_LEVEL)

# free functions over the process-wide instance
role = roles.role
multi = roles.multi
perform = roles.perform
declare = roles.declare
with_roles = roles.with_roles
does = roles.does

__all__ = (
    "__version__",
    "AllomorphError",
    "AllomorphSettings",
    "ClassHost",
    "CyclicInheritanceError",
    "DeferredMethod",
    "DoesTable",
    "Entity",
    "EntityNotFoundError",
    "EntityTable",
    "Host",
    "InheritanceError",
    "Instance",
    "ItemExistsError",
    "ItemNotFoundError",
    "MethodBinding",
    "MethodNotFoundError",
    "RoleRegistry",
    "Roles",
    "ValidationError",
    "declare",
    "does",
    "logger",
    "multi",
    "perform",
    "role",
    "roles",
    "settings",
    "walk_ancestors",
    "with_roles",
)
