# pictosigns/schemas/order.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from pydantic import Field

from .base import CamelModel
from .catalog import FixationConditionJson, FixationJson, MaterialBase


@dataclass(frozen=True)
class OrderRequest:
    """Query of GET /order, every field defaults to 0."""

    material_id: int = 0
    fixation_id: int = 0
    shape_id: int = 0
    quantity: int = 0
    width: float = 0.0
    height: float = 0.0


class OrderPrice(CamelModel):
    weight: float = 0.0
    discount: int = 0
    total_tax_excl: float = 0.0
    total_tax_incl: float = 0.0
    unit_price_tax_excl_discounted: float = 0.0
    total_tax_excl_discounted: float = 0.0
    total_tax_incl_discounted: float = 0.0

    # resolved catalog rows, echoed back for display
    product: MaterialBase = Field(default_factory=MaterialBase)
    fixation: Optional[FixationJson] = None
    condition: Optional[FixationConditionJson] = None
