# scripts/seed_dev.py
from pictosigns import models  # noqa: F401  (registers SQLAlchemy models)
from pictosigns.db import Base, SessionLocal, engine
from pictosigns.models import (
    Discount,
    Fixation,
    FixationCondition,
    Material,
    Shape,
    material_fixations,
    material_shapes,
)


def main():
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        if db.query(Material).first():
            print("Catalog already seeded, nothing to do.")
            return

        material = Material(
            title="Dibond 3mm",
            description="Aluminium composite panel",
            weight=0.4,
            fixed_price=12.0,
            surface_price=45.0,
            manufacturing_time=3,
            min_width=50,
            min_height=50,
            max_width=3000,
            max_height=1500,
        )
        shape = Shape(url="/shapes/rectangle.svg", tags="rectangle")
        fixation = Fixation(name="Spacer 15mm", price=2.5, diameter=15, drill_diameter=5)
        db.add_all([material, shape, fixation])
        db.flush()

        # small plates get two points, larger ones four corners
        db.add_all(
            [
                FixationCondition(
                    fixation_id=fixation.id, shape_id=shape.id,
                    area_min=0, area_max=90000, pos_cl=True, pos_cr=True,
                ),
                FixationCondition(
                    fixation_id=fixation.id, shape_id=shape.id,
                    area_min=90000, area_max=0,
                    pos_tl=True, pos_tr=True, pos_bl=True, pos_br=True,
                ),
            ]
        )
        db.add_all(
            [
                Discount(quantity=10, amount=5),
                Discount(quantity=50, amount=10),
                Discount(quantity=100, amount=15),
            ]
        )
        db.execute(material_shapes.insert().values(material_id=material.id, shape_id=shape.id))
        db.execute(
            material_fixations.insert().values(material_id=material.id, fixation_id=fixation.id)
        )
        db.commit()
        print("Seeded demo catalog, material id:", material.id)
    finally:
        db.close()


if __name__ == "__main__":
    main()
