"""
Board Model
"""
from sqlalchemy import Column, String, Text, DateTime
from sqlalchemy.orm import relationship

from scrumboard.database import Base
from scrumboard.models.base import utcnow


class Board(Base):
    __tablename__ = "boards"

    id = Column(String(36), primary_key=True)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow, nullable=False)

    # Relationships
    columns = relationship(
        "BoardColumn",
        back_populates="board",
        cascade="all, delete",
        passive_deletes=True,
        order_by="BoardColumn.position",
    )
    tasks = relationship("Task", back_populates="board", cascade="all, delete", passive_deletes=True)
