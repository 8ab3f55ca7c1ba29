# server/models/user.py

from sqlalchemy import Column, String
from . import Base, new_id


# -------------------------------
# User Model
# -------------------------------

class User(Base):
    """
    Credential record for an application user.
    Only the bcrypt hash of the password is stored.
    """
    __tablename__ = "users"

    id = Column(String(36), primary_key=True, default=new_id)
    username = Column(String(100), unique=True, index=True, nullable=False)
    hashed_password = Column(String(255), nullable=False)
