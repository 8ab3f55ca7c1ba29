# server/core/store.py

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from core.errors import AlreadyExists, FavoriteNotFound, ProductNotFound
from database import storage_errors
from models.product import Favorite, Product


# -------------------------------
# Products
# -------------------------------

def create_product(db: Session, name: str) -> Product:
    product = Product(name=name)
    with storage_errors():
        try:
            db.add(product)
            db.commit()
        except IntegrityError:
            db.rollback()
            raise AlreadyExists("Product already exists")
        db.refresh(product)
    return product


def list_products(db: Session) -> list[Product]:
    with storage_errors():
        return db.query(Product).order_by(Product.name).all()


# -------------------------------
# Favorites
# -------------------------------

def create_favorite(db: Session, user_id: str, product_id: str) -> Favorite:
    """
    Marks a product as favorite for the user.
    Unknown products and repeated favorites are both rejected.
    """
    with storage_errors():
        if db.get(Product, product_id) is None:
            raise ProductNotFound()

        favorite = Favorite(user_id=user_id, product_id=product_id)
        try:
            db.add(favorite)
            db.commit()
        except IntegrityError:
            db.rollback()
            raise AlreadyExists("Favorite already exists")
        db.refresh(favorite)
    return favorite


def list_favorites(db: Session, user_id: str) -> list[Favorite]:
    with storage_errors():
        return db.query(Favorite).filter(Favorite.user_id == user_id).all()


def delete_favorite(db: Session, favorite_id: str, user_id: str) -> Favorite:
    """
    Deletes a favorite owned by the user. A favorite owned by someone
    else is reported exactly like a missing one.
    """
    with storage_errors():
        favorite = (
            db.query(Favorite)
            .filter(Favorite.id == favorite_id, Favorite.user_id == user_id)
            .first()
        )
        if favorite is None:
            raise FavoriteNotFound()
        db.delete(favorite)
        db.commit()
    return favorite
