from . import (
    app,
    auth,
    badge,
    dimension,
    discount,
    fixation,
    font,
    material,
    order,
    picto,
    shape,
    template,
    user,
)

# mounted in this order by main.py
ALL_ROUTERS = (
    order.router,
    material.router,
    fixation.router,
    shape.router,
    discount.router,
    dimension.router,
    badge.router,
    picto.router,
    template.router,
    font.router,
    user.router,
    app.router,
    auth.router,
)
