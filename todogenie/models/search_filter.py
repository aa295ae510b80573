"""Saved search filter model (reserved, no routes yet)."""

from sqlalchemy import Column, ForeignKey, String

from todogenie.database import Base
from todogenie.models.mixins import CreatedAtMixin, new_id


class SearchFilter(Base, CreatedAtMixin):
    """Saved task search for a user."""

    __tablename__ = "search_filters"

    filter_id = Column(String(36), primary_key=True, default=new_id)
    user_id = Column(String(36), ForeignKey("users.user_id"), nullable=False, index=True)
    search_query = Column(String(255), nullable=True)
    filter_status = Column(String(20), nullable=True, default="incomplete")
