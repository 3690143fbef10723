# Copyright (c) 2023 - 2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

"""The process-wide instance and its free functions."""

import allomorph
from allomorph import Roles


class TestProcessWideRoles:
    def test_free_functions_share_one_instance(self):
        assert isinstance(allomorph.roles, Roles)
        for func in (
            allomorph.role,
            allomorph.multi,
            allomorph.perform,
            allomorph.declare,
            allomorph.with_roles,
            allomorph.does,
        ):
            assert func.__self__ is allomorph.roles

    def test_lifeguard(self):
        @allomorph.with_roles(role=["rescue_drowning_swimmer", "scan_ocean"])
        class ModuleApiLifeguard:
            def rescue_drowning_swimmer(self):
                return "rescued"

            def scan_ocean(self):
                return "all clear"

        @allomorph.with_roles(does="ModuleApiLifeguard")
        class ModuleApiDog:
            pass

        assert ModuleApiDog().rescue_drowning_swimmer() == "rescued"
        assert allomorph.does(ModuleApiDog, "ModuleApiLifeguard")
        assert allomorph.does("ModuleApiDog", "ModuleApiLifeguard")
        assert not allomorph.does(ModuleApiLifeguard, "ModuleApiDog")

    def test_version(self):
        assert allomorph.__version__ == "0.20.0"
