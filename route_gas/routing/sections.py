"""Splitting a mixed route into contiguous same-family sections.

Every section is executed as a separate router call, so each one pays its
own base swap cost.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from route_gas.pools import AnyPool, PoolFamily


@dataclass(frozen=True)
class RouteSection:
    """A maximal run of consecutive pools of one family."""

    family: PoolFamily
    pools: tuple[AnyPool, ...]

    def __len__(self) -> int:
        return len(self.pools)


def split_into_sections(pools: Sequence[AnyPool]) -> list[RouteSection]:
    """Split pools into maximal contiguous runs of the same family.

    Concatenating the sections' pools in order reproduces the input, and no
    two adjacent sections share a family.

    Args:
        pools: Route pools in hop order

    Returns:
        Sections in route order (empty for an empty input)
    """
    sections: list[RouteSection] = []
    current: list[AnyPool] = []
    current_family: PoolFamily | None = None

    for pool in pools:
        if current and pool.family != current_family:
            sections.append(RouteSection(family=current_family, pools=tuple(current)))
            current = []
        current_family = pool.family
        current.append(pool)

    if current:
        sections.append(RouteSection(family=current_family, pools=tuple(current)))

    return sections


__all__ = ["RouteSection", "split_into_sections"]
