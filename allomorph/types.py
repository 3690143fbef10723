# Copyright (c) 2023 - 2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, Field

from ._errors import MethodNotFoundError

if TYPE_CHECKING:
    from .hosts.base import Host

__all__ = ("MethodBinding", "DeferredMethod")


class MethodBinding(BaseModel):
    """A method captured into a role: ``(name, implementation)``.

    ``implementation`` is whatever the declaring entity held under ``name``
    when the role was declared (a function, a ``staticmethod`` or
    ``classmethod`` object, or a :class:`DeferredMethod`). Redefining the
    method on the declaring entity afterwards does not change the binding.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    name: str = Field(min_length=1)
    implementation: Any
    source: str = Field(description="Name of the declaring entity")

    @property
    def is_deferred(self) -> bool:
        return isinstance(self.implementation, DeferredMethod)


class DeferredMethod:
    """Late-bound stand-in for a method that did not exist at declaration.

    Resolved against the declaring entity on every access; raises
    :class:`MethodNotFoundError` while the method is still missing.
    """

    __slots__ = ("host", "source", "name")

    def __init__(self, host: Host, source: str, name: str):
        self.host = host
        self.source = source
        self.name = name

    def resolve(self) -> Any:
        impl = self.host.lookup(self.source, self.name)
        if impl is None or impl is self:
            raise MethodNotFoundError(
                f"'{self.source}' has no method '{self.name}'",
                details={"entity": self.source, "method": self.name},
            )
        return impl

    def __get__(self, obj, objtype=None):
        impl = self.resolve()
        if hasattr(impl, "__get__"):
            return impl.__get__(obj, objtype)
        return impl

    def __call__(self, *args, **kwargs):
        return self.resolve()(*args, **kwargs)

    def __repr__(self) -> str:
        return f"DeferredMethod({self.source}.{self.name})"
