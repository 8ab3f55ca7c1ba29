# server/models/__init__.py

import uuid
from sqlalchemy.orm import declarative_base


Base = declarative_base()


def new_id() -> str:
    return str(uuid.uuid4())


from .user import User  # noqa: E402,F401
from .product import Product, Favorite  # noqa: E402,F401
