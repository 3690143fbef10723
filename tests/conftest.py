# Copyright (c) 2023 - 2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

import pytest

from allomorph import AllomorphSettings, ClassHost, EntityTable, Roles


def eat(self):
    return "chomp chomp"


def sleep(self):
    return "snore snore"


@pytest.fixture
def table_roles():
    """Fresh roles over explicit entities, strict settings."""
    return Roles(
        EntityTable(), settings=AllomorphSettings(STRICT_METHODS=True)
    )


@pytest.fixture
def lax_roles():
    """Fresh roles over explicit entities, methods resolved lazily."""
    return Roles(
        EntityTable(), settings=AllomorphSettings(STRICT_METHODS=False)
    )


@pytest.fixture
def class_roles():
    """Fresh roles over Python classes."""
    return Roles(ClassHost(), settings=AllomorphSettings())


@pytest.fixture
def zoo(table_roles):
    """Animal declares a role, Dog performs it, RoboDog inherits from Dog."""
    table_roles.entity(
        "Animal",
        methods={"eat": eat, "sleep": sleep},
        role=["eat", "sleep"],
    )
    table_roles.entity("Dog", does="Animal")
    table_roles.entity("RoboDog", parents=["Dog"])
    return table_roles
