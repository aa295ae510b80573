"""User model."""

from sqlalchemy import Column, String
from sqlalchemy.orm import relationship

from todogenie.database import Base
from todogenie.models.mixins import CreatedAtMixin, new_id


class User(Base, CreatedAtMixin):
    """User model for authentication and ownership."""

    __tablename__ = "users"

    user_id = Column(String(36), primary_key=True, default=new_id)
    email = Column(String(255), unique=True, nullable=False, index=True)
    # Stored verbatim; credentials are not hashed in this system.
    password_hash = Column(String(255), nullable=False)
    name = Column(String(255), nullable=False)

    # Relationships
    tasks = relationship("Task", back_populates="owner", cascade="all, delete-orphan")
    auth_tokens = relationship("AuthToken", back_populates="user", cascade="all, delete-orphan")
