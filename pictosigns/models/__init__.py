# Models package for the pictosigns catalog (registers SQLAlchemy tables)

from .app import App, app_fonts, app_materials, app_users
from .badge import Badge
from .dimension import Dimension
from .discount import Discount
from .fixation import Fixation, FixationCondition
from .font import Font
from .material import (
    Material,
    material_badges,
    material_dimensions,
    material_discounts,
    material_fixations,
    material_shapes,
)
from .picto import Picto
from .shape import Shape
from .template import Template
from .user import User

__all__ = [
    "App",
    "Badge",
    "Dimension",
    "Discount",
    "Fixation",
    "FixationCondition",
    "Font",
    "Material",
    "Picto",
    "Shape",
    "Template",
    "User",
    "app_fonts",
    "app_materials",
    "app_users",
    "material_badges",
    "material_dimensions",
    "material_discounts",
    "material_fixations",
    "material_shapes",
]
