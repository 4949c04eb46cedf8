# pictosigns/routers/order.py
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from pictosigns.core.settings import settings
from pictosigns.db import get_db
from pictosigns.schemas import OrderPrice, OrderRequest
from pictosigns.services.pricing_engine import quote_order

router = APIRouter(tags=["order"])


@router.get("/order", response_model=OrderPrice)
def get_order_price(
    material_id: int = Query(0, alias="materialId"),
    fixation_id: int = Query(0, alias="fixationId"),
    shape_id: int = Query(0, alias="shapeId"),
    quantity: int = Query(0),
    width: float = Query(0.0, allow_inf_nan=False),
    height: float = Query(0.0, allow_inf_nan=False),
    db: Session = Depends(get_db),
):
    """
    Public price preview for the shop.

    Every parameter is optional; without a material the quote is all zeros.
    """
    order = OrderRequest(
        material_id=material_id,
        fixation_id=fixation_id,
        shape_id=shape_id,
        quantity=quantity,
        width=width,
        height=height,
    )
    return quote_order(db, order, legacy_position_count=settings.LEGACY_POSITION_COUNT)
