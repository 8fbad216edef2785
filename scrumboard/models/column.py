"""
Board Column Model
"""
from sqlalchemy import Column, Integer, String, DateTime, ForeignKey
from sqlalchemy.orm import relationship

from scrumboard.database import Base
from scrumboard.models.base import utcnow

DEFAULT_COLUMN_COLOR = "#e3f2fd"


class BoardColumn(Base):
    __tablename__ = "columns"

    id = Column(String(36), primary_key=True)
    board_id = Column(String(36), ForeignKey("boards.id", ondelete="CASCADE"), nullable=False, index=True)
    name = Column(String(255), nullable=False)
    position = Column(Integer, default=0, nullable=False)
    color = Column(String(32), default=DEFAULT_COLUMN_COLOR, nullable=False)
    created_at = Column(DateTime, default=utcnow, nullable=False)

    # Relationships
    board = relationship("Board", back_populates="columns")
    tasks = relationship("Task", back_populates="column", cascade="all, delete", passive_deletes=True)
