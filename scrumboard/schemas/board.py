"""Schemas for boards and their nested read model"""
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from scrumboard.schemas.task import TaskResponse


class BoardCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None

    class Config:
        str_strip_whitespace = True


class BoardCreated(BaseModel):
    id: str
    name: str
    description: Optional[str]

    class Config:
        from_attributes = True


class BoardSummary(BoardCreated):
    created_at: datetime
    updated_at: datetime


class ColumnResponse(BaseModel):
    id: str
    board_id: str
    name: str
    position: int
    color: str
    tasks: List[TaskResponse] = Field(default_factory=list)

    class Config:
        from_attributes = True


class BoardDetail(BoardSummary):
    columns: List[ColumnResponse] = Field(default_factory=list)


class MessageResponse(BaseModel):
    message: str
