"""Price aggregation for placed panels."""

from __future__ import annotations

from typing import Iterable

from .geometry import DefinitionLookup
from .value_objects import PanelInstance


def total_price(panels: Iterable[PanelInstance], lookup: DefinitionLookup) -> float:
    """Sum of catalog prices of all resolvable panels.

    Panels whose definition is unknown contribute nothing.
    """
    total: float = 0
    for panel in panels:
        definition = lookup(panel.definition_id)
        if definition is None:
            continue
        total += definition.price
    return total


def format_price(amount: float) -> str:
    """Whole amounts without decimals, anything else with two."""
    if float(amount).is_integer():
        return str(int(amount))
    return f"{amount:.2f}"
