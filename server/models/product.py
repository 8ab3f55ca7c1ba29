# server/models/product.py

from sqlalchemy import Column, ForeignKey, String, UniqueConstraint
from . import Base, new_id


class Product(Base):
    __tablename__ = "products"

    id = Column(String(36), primary_key=True, default=new_id)
    name = Column(String(100), unique=True, nullable=False)


class Favorite(Base):
    """
    A product marked as favorite by a user. Each user can favorite
    a given product once.
    """
    __tablename__ = "favorites"
    __table_args__ = (
        UniqueConstraint("product_id", "user_id", name="unique_user_product"),
    )

    id = Column(String(36), primary_key=True, default=new_id)
    product_id = Column(String(36), ForeignKey("products.id"), nullable=False, index=True)
    user_id = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
