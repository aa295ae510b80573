"""Task model."""

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, String, false
from sqlalchemy.orm import relationship

from todogenie.database import Base
from todogenie.models.mixins import CreatedAtMixin, new_id


class Task(Base, CreatedAtMixin):
    """A to-do entry owned by a single user."""

    __tablename__ = "tasks"

    task_id = Column(String(36), primary_key=True, default=new_id)
    user_id = Column(String(36), ForeignKey("users.user_id"), nullable=False, index=True)
    task_name = Column(String(500), nullable=False)
    due_date = Column(DateTime(timezone=True), nullable=True)
    is_complete = Column(Boolean, nullable=False, default=False, server_default=false(), index=True)

    # Relationships
    owner = relationship("User", back_populates="tasks")
