"""Schemas for tasks"""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from scrumboard.models.task import TaskPriority

# Largest value a SQLite INTEGER column can hold
MAX_POSITION = 2**63 - 1


class TaskCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=255)
    board_id: str = Field(..., min_length=1)
    column_id: str = Field(..., min_length=1)
    description: Optional[str] = None
    assignee: Optional[str] = None
    priority: TaskPriority = TaskPriority.MEDIUM
    story_points: Optional[int] = Field(default=None, ge=1, le=5)


class TaskUpdate(BaseModel):
    title: Optional[str] = Field(default=None, min_length=1, max_length=255)
    description: Optional[str] = None
    assignee: Optional[str] = None
    priority: Optional[TaskPriority] = None
    story_points: Optional[int] = Field(default=None, ge=1, le=5)


class TaskMove(BaseModel):
    column_id: str = Field(..., min_length=1)
    position: int = Field(..., ge=0, le=MAX_POSITION)


class TaskResponse(BaseModel):
    id: str
    board_id: str
    column_id: str
    title: str
    description: Optional[str]
    assignee: Optional[str]
    priority: TaskPriority
    story_points: Optional[int]
    position: int
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
