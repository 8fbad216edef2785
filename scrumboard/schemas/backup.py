"""Schemas for the portable board backup document.

The document carries no identities: it is a template that can be imported
any number of times, each import producing an independent board.
"""
from typing import List, Optional

from pydantic import BaseModel, Field

from scrumboard.models.task import TaskPriority
from scrumboard.schemas.task import MAX_POSITION

BACKUP_VERSION = "1.0"


class BackupTask(BaseModel):
    title: str = Field(..., min_length=1)
    description: Optional[str] = None
    assignee: Optional[str] = None
    priority: TaskPriority = TaskPriority.MEDIUM
    story_points: Optional[int] = None
    position: Optional[int] = Field(default=None, ge=0, le=MAX_POSITION)


class BackupColumn(BaseModel):
    name: str = Field(..., min_length=1)
    position: Optional[int] = Field(default=None, ge=0, le=MAX_POSITION)
    color: Optional[str] = None
    tasks: List[BackupTask] = Field(default_factory=list)


class BackupBoard(BaseModel):
    name: str = Field(..., min_length=1)
    description: Optional[str] = None
    columns: List[BackupColumn]


class BackupDocument(BaseModel):
    version: str = BACKUP_VERSION
    exportDate: str
    board: BackupBoard
