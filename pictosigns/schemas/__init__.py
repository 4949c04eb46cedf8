from .auth import SignInRequest, SignInResponse
from .catalog import (
    AppJson,
    BadgeJson,
    DimensionJson,
    DiscountJson,
    FixationConditionJson,
    FixationConditionsResponse,
    FixationJson,
    FontJson,
    MaterialBase,
    MaterialJson,
    PictoJson,
    PictoSearchResponse,
    SetFixationRequest,
    ShapeJson,
    TemplateJson,
    UserJson,
)
from .order import OrderPrice, OrderRequest

__all__ = [
    "AppJson",
    "BadgeJson",
    "DimensionJson",
    "DiscountJson",
    "FixationConditionJson",
    "FixationConditionsResponse",
    "FixationJson",
    "FontJson",
    "MaterialBase",
    "MaterialJson",
    "OrderPrice",
    "OrderRequest",
    "PictoJson",
    "PictoSearchResponse",
    "SetFixationRequest",
    "ShapeJson",
    "SignInRequest",
    "SignInResponse",
    "TemplateJson",
    "UserJson",
]
