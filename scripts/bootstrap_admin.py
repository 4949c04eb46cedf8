# scripts/bootstrap_admin.py
"""
Create (or reset) the admin account of the catalog back office.

    ADMIN_USERNAME=admin ADMIN_PASSWORD=... python scripts/bootstrap_admin.py
"""
import os
import sys

from sqlalchemy import select

from pictosigns import models  # noqa: F401  (registers SQLAlchemy models)
from pictosigns.auth.passwords import hash_password
from pictosigns.db import Base, SessionLocal, engine
from pictosigns.models import User

USERNAME = os.getenv("ADMIN_USERNAME", "admin")


def main():
    password = os.getenv("ADMIN_PASSWORD")
    if not password:
        sys.exit("ADMIN_PASSWORD is required")

    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        user = db.scalars(select(User).where(User.username == USERNAME)).first()
        if not user:
            user = User(username=USERNAME, password=hash_password(password), is_admin=True)
            db.add(user)
            db.commit()
            print("admin created:", USERNAME)
        else:
            # reset password (handy after db resets)
            user.password = hash_password(password)
            user.is_admin = True
            db.commit()
            print("admin updated/reset password:", USERNAME)
    finally:
        db.close()


if __name__ == "__main__":
    main()
