# pictosigns/services/pricing_engine.py
"""
Order quote computation.

All figures are plain floats. The surface is in mm² (width x height), surface
prices are per m² and weight factors per 100 000 mm², hence the fixed scale
factors below.
"""
from __future__ import annotations

from typing import Optional

from sqlalchemy.orm import Session

from pictosigns.core.logging_config import logger
from pictosigns.models import Discount, Fixation, FixationCondition, Material
from pictosigns.repositories import discounts as discount_repo
from pictosigns.repositories import fixations as fixation_repo
from pictosigns.repositories import materials as material_repo
from pictosigns.schemas import (
    FixationConditionJson,
    FixationJson,
    MaterialBase,
    OrderPrice,
    OrderRequest,
)
from pictosigns.services.discounts import discount_percent, select_discount
from pictosigns.services.fixation_conditions import count_positions, resolve_condition

TAX_RATE = 1.2
WEIGHT_SCALE = 0.00001
SURFACE_PRICE_SCALE = 0.000001


def compute_quote(
    material: Optional[Material],
    fixation: Optional[Fixation],
    condition: Optional[FixationCondition],
    discount: Optional[Discount],
    quantity: int,
    width: float,
    height: float,
    *,
    legacy_position_count: bool = True,
) -> OrderPrice:
    """
    Fold the resolved catalog rows into a price quote.

    Without a material the quote is the all-zero ``OrderPrice``: that is the
    preview shown before the customer picks a material, not an error.
    """
    area = width * height
    fixation_price = fixation.price if fixation is not None else 0.0
    fixations_price = count_positions(condition, legacy=legacy_position_count) * fixation_price

    if material is None:
        return OrderPrice()

    percent = discount_percent(discount)
    discount_factor = (100 - percent) / 100.0

    weight = material.weight * width * height * WEIGHT_SCALE
    area_price = area * SURFACE_PRICE_SCALE * material.surface_price
    unit_price_tax_excl = material.fixed_price + area_price + fixations_price
    total_tax_excl = quantity * unit_price_tax_excl
    total_tax_incl = total_tax_excl * TAX_RATE

    return OrderPrice(
        weight=weight,
        discount=percent,
        total_tax_excl=total_tax_excl,
        total_tax_incl=total_tax_incl,
        unit_price_tax_excl_discounted=unit_price_tax_excl * discount_factor,
        total_tax_excl_discounted=total_tax_excl * discount_factor,
        total_tax_incl_discounted=total_tax_incl * discount_factor,
        product=MaterialBase.model_validate(material),
        fixation=FixationJson.model_validate(fixation) if fixation is not None else None,
        condition=(
            FixationConditionJson.model_validate(condition) if condition is not None else None
        ),
    )


def quote_order(
    db: Session, order: OrderRequest, *, legacy_position_count: bool = True
) -> OrderPrice:
    """Resolve the catalog rows an order refers to and price it.

    Lookup failures raise ``LookupFailed``; rows that simply do not exist
    resolve to ``None`` and fall back to the defaults of the formula.
    """
    material = material_repo.find_material_by_id(db, order.material_id)
    if material is None:
        logger.bind(material_id=order.material_id).info("order_quote_without_material")
        return OrderPrice()

    fixation = fixation_repo.find_fixation_by_id(db, order.fixation_id)
    discount = select_discount(discount_repo.get_all_discounts(db), order.quantity)
    condition = resolve_condition(
        lambda fixation_id, shape_id: fixation_repo.find_conditions(db, fixation_id, shape_id),
        order.fixation_id,
        order.shape_id,
        order.width,
        order.height,
    )

    price = compute_quote(
        material,
        fixation,
        condition,
        discount,
        order.quantity,
        order.width,
        order.height,
        legacy_position_count=legacy_position_count,
    )

    logger.bind(
        material_id=order.material_id,
        fixation_id=order.fixation_id,
        shape_id=order.shape_id,
        quantity=order.quantity,
        condition_id=condition.id if condition is not None else None,
        discount=price.discount,
        total_tax_incl_discounted=round(price.total_tax_incl_discounted, 2),
    ).info("order_quoted")

    return price
