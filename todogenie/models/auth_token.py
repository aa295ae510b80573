"""Issued auth token model."""

from sqlalchemy import Column, ForeignKey, String, Text
from sqlalchemy.orm import relationship

from todogenie.database import Base
from todogenie.models.mixins import CreatedAtMixin, new_id


class AuthToken(Base, CreatedAtMixin):
    """Record of a token issued on login or registration.

    Several tokens may be valid for one user at a time. Rows are never
    revoked; logout only discards the token client-side.
    """

    __tablename__ = "auth_tokens"

    token_id = Column(String(36), primary_key=True, default=new_id)
    user_id = Column(String(36), ForeignKey("users.user_id"), nullable=False, index=True)
    auth_token = Column(Text, unique=True, nullable=False)

    # Relationships
    user = relationship("User", back_populates="auth_tokens")
