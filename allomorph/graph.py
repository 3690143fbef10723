# Copyright (c) 2023 - 2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

from collections.abc import Callable, Iterator, Sequence

from ._errors import CyclicInheritanceError, InheritanceError

__all__ = ("walk_ancestors",)


def walk_ancestors(
    entity: str,
    parents: Callable[[str], Sequence[str]],
    *,
    max_depth: int = 256,
) -> Iterator[str]:
    """Yield the ancestors of ``entity`` depth-first, in declared parent order.

    Each ancestor is yielded once, even when it is reachable along several
    paths (diamond inheritance). The walk is lazy, so a caller that stops
    early never looks past the ancestor it stopped at.

    Args:
        entity: Name of the entity whose ancestry is walked.
        parents: Returns the ordered parent names of an entity; unknown
            entities must map to an empty sequence.
        max_depth: Maximum number of generations to follow.

    Raises:
        CyclicInheritanceError: An entity is its own ancestor.
        InheritanceError: The parent chain is deeper than ``max_depth``.
    """
    seen: set[str] = set()
    path: list[str] = [entity]
    stack: list[Iterator[str]] = [iter(parents(entity))]

    while stack:
        parent = next(stack[-1], None)
        if parent is None:
            stack.pop()
            path.pop()
            continue

        if parent in path:
            cycle = path[path.index(parent) :] + [parent]
            raise CyclicInheritanceError(
                f"Cyclic inheritance: {' -> '.join(cycle)}",
                details={"entity": entity, "cycle": cycle},
            )
        if parent in seen:
            continue
        if len(path) > max_depth:
            raise InheritanceError(
                f"Ancestry of '{entity}' is deeper than {max_depth}",
                details={"entity": entity, "max_depth": max_depth},
            )

        seen.add(parent)
        yield parent

        path.append(parent)
        stack.append(iter(parents(parent)))
