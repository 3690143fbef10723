# Copyright (c) 2023 - 2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

from .base import DoesDescriptor, Host
from .classes import ClassHost
from .entity import Entity, EntityTable, Instance

__all__ = (
    "ClassHost",
    "DoesDescriptor",
    "Entity",
    "EntityTable",
    "Host",
    "Instance",
)
