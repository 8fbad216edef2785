"""
Pydantic schemas for request/response validation
"""
from scrumboard.schemas.board import (
    BoardCreate,
    BoardCreated,
    BoardDetail,
    BoardSummary,
    ColumnResponse,
    MessageResponse,
)
from scrumboard.schemas.task import TaskCreate, TaskMove, TaskResponse, TaskUpdate
from scrumboard.schemas.backup import (
    BACKUP_VERSION,
    BackupBoard,
    BackupColumn,
    BackupDocument,
    BackupTask,
)

__all__ = [
    "BoardCreate",
    "BoardCreated",
    "BoardDetail",
    "BoardSummary",
    "ColumnResponse",
    "MessageResponse",
    "TaskCreate",
    "TaskMove",
    "TaskResponse",
    "TaskUpdate",
    "BACKUP_VERSION",
    "BackupBoard",
    "BackupColumn",
    "BackupDocument",
    "BackupTask",
]
