# Copyright (c) 2023 - 2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

from collections import deque
from collections.abc import Generator
from typing import Any

from ._errors import ValidationError

__all__ = ("to_list", "to_method_names")


def to_list(value: Any) -> list[Any]:
    """Normalize a scalar-or-sequence declaration value to a list."""
    if value is None:
        return []
    if isinstance(value, (list, tuple, set, frozenset, deque, Generator)):
        return list(value)
    return [value]


def to_method_names(value: Any) -> list[str]:
    names = to_list(value)
    for name in names:
        if not isinstance(name, str) or not name.isidentifier():
            raise ValidationError.from_value(
                name,
                expected="method name",
                message=f"Invalid method name: {name!r}",
            )
    return names
