"""Position allocation and moves for tasks within board columns.

Positions are append-only counters: a new task always lands after the
highest existing position in its column. Gaps left by deletes or moves are
never compacted, and moving a task rewrites only that task's row. Two moves
racing for the same slot are last-write-wins.
"""
import logging

from sqlalchemy import func
from sqlalchemy.orm import Session

from scrumboard.database import commit_or_rollback
from scrumboard.exceptions import NotFoundError
from scrumboard.models import BoardColumn, Task

logger = logging.getLogger(__name__)


def next_task_position(db: Session, column_id: str) -> int:
    max_pos = db.query(func.max(Task.position)).filter(Task.column_id == column_id).scalar()
    return (max_pos + 1) if max_pos is not None else 0


def get_board_column(db: Session, board_id: str, column_id: str) -> BoardColumn:
    """Return the column only if it belongs to ``board_id``."""
    column = (
        db.query(BoardColumn)
        .filter(BoardColumn.id == column_id, BoardColumn.board_id == board_id)
        .first()
    )
    if column is None:
        raise NotFoundError("Column", column_id)
    return column


def move_task(db: Session, task_id: str, column_id: str, position: int) -> Task:
    """Place a task at ``position`` in ``column_id`` without shifting siblings.

    The caller picks ``position`` to reflect the intended index among the
    destination column's tasks. The target column must be on the task's board.
    """
    task = db.query(Task).filter(Task.id == task_id).first()
    if task is None:
        raise NotFoundError("Task", task_id)

    get_board_column(db, task.board_id, column_id)

    task.column_id = column_id
    task.position = position
    commit_or_rollback(db, f"moving task {task_id}")
    db.refresh(task)
    logger.debug("Moved task %s to column %s at position %d", task_id, column_id, position)
    return task
