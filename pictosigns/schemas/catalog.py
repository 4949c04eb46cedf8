# pictosigns/schemas/catalog.py
from __future__ import annotations

from typing import List, Optional

from pydantic import Field

from .base import CamelModel


class MaterialBase(CamelModel):
    id: int = 0
    title: str = ""
    description: str = ""
    preview: str = ""
    background: str = ""
    min_width: float = 0.0
    min_height: float = 0.0
    max_width: float = 0.0
    max_height: float = 0.0
    weight: float = 0.0
    fixed_price: float = 0.0
    surface_price: float = 0.0
    manufacturing_time: int = 0
    more: Optional[str] = None
    transparency: int = 0


class MaterialJson(MaterialBase):
    """Material with the ids of everything attached to it."""

    dimension_ids: List[int] = Field(default_factory=list)
    discount_ids: List[int] = Field(default_factory=list)
    fixation_ids: List[int] = Field(default_factory=list)
    shape_ids: List[int] = Field(default_factory=list)
    badge_ids: List[int] = Field(default_factory=list)


class FixationJson(CamelModel):
    id: int = 0
    name: str = ""
    preview_url: str = ""
    icon_url: str = ""
    video_url: Optional[str] = None
    price: float = 0.0
    diameter: float = 0.0
    drill_diameter: float = 0.0


class FixationConditionJson(CamelModel):
    id: int = 0
    fixation_id: int = 0
    shape_id: int = 0
    area_min: Optional[int] = None
    area_max: Optional[int] = None
    padding_h: Optional[float] = None
    padding_v: Optional[float] = None
    pos_tl: Optional[bool] = None
    pos_tc: Optional[bool] = None
    pos_tr: Optional[bool] = None
    pos_cl: Optional[bool] = None
    pos_cr: Optional[bool] = None
    pos_bl: Optional[bool] = None
    pos_bc: Optional[bool] = None
    pos_br: Optional[bool] = None


class SetFixationRequest(FixationJson):
    conditions: List[FixationConditionJson] = Field(default_factory=list)


class ShapeJson(CamelModel):
    id: int = 0
    folder_id: Optional[int] = None
    tags: str = ""
    url: str = ""


class FixationConditionsResponse(CamelModel):
    fixation: FixationJson
    conditions: List[FixationConditionJson]
    shapes: List[ShapeJson]


class DiscountJson(CamelModel):
    id: int = 0
    amount: int
    quantity: int


class DimensionJson(CamelModel):
    id: int = 0
    name: str
    width: float
    height: float
    pos: int = 0


class BadgeJson(CamelModel):
    id: int = 0
    name: str
    icon_url: str


class FontJson(CamelModel):
    id: int = 0
    name: str
    url: str


class UserJson(CamelModel):
    id: int = 0
    username: str
    # write-only; empty on update keeps the stored hash
    password: str = Field(default="", exclude=True)
    is_admin: bool = False


class AppJson(CamelModel):
    """A storefront with the ids of its users, materials and fonts."""

    id: int = 0
    name: str
    user_ids: List[int] = Field(default_factory=list)
    material_ids: List[int] = Field(default_factory=list)
    font_ids: List[int] = Field(default_factory=list)


class PictoJson(CamelModel):
    id: int = 0
    folder_id: Optional[int] = None
    tags: str = ""
    url: str


class PictoSearchResponse(CamelModel):
    pictos: List[PictoJson]
    # closest known tag when nothing matched
    suggestion: Optional[str] = None


class TemplateJson(CamelModel):
    id: int = 0
    folder_id: Optional[int] = None
    name: str = ""
    tags: str = ""
    preview_url: Optional[str] = None
    config: Optional[str] = None
