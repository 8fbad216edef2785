"""Task endpoints"""
import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from scrumboard.database import commit_or_rollback, get_db
from scrumboard.exceptions import NotFoundError
from scrumboard.models import Task
from scrumboard.schemas import MessageResponse, TaskCreate, TaskMove, TaskResponse, TaskUpdate
from scrumboard.services import ordering
from scrumboard.services.boards import get_board

router = APIRouter()
logger = logging.getLogger(__name__)


def _load_task(db: Session, task_id: str) -> Task:
    task = db.query(Task).filter(Task.id == task_id).first()
    if not task:
        raise NotFoundError("Task", task_id)
    return task


@router.post("", response_model=TaskResponse, status_code=status.HTTP_201_CREATED)
def create_task(task_in: TaskCreate, db: Session = Depends(get_db)):
    """Append a task to the bottom of its column."""
    board = get_board(db, task_in.board_id)
    column = ordering.get_board_column(db, board.id, task_in.column_id)

    task = Task(
        board_id=board.id,
        column_id=column.id,
        title=task_in.title,
        description=task_in.description,
        assignee=task_in.assignee,
        priority=task_in.priority.value,
        story_points=task_in.story_points,
        position=ordering.next_task_position(db, column.id),
    )
    db.add(task)
    commit_or_rollback(db, f"creating task {task_in.title!r}")
    db.refresh(task)
    logger.debug("Created task %s in column %s at position %d", task.id, column.id, task.position)
    return task


@router.put("/{task_id}", response_model=MessageResponse)
def update_task(task_id: str, task_update: TaskUpdate, db: Session = Depends(get_db)):
    """Edit a task's fields in place. Position and column are left alone."""
    task = _load_task(db, task_id)

    update_data = task_update.model_dump(exclude_unset=True)
    # title and priority are NOT NULL; an explicit null leaves them unchanged
    if update_data.get("title") is None:
        update_data.pop("title", None)
    priority = update_data.pop("priority", None)
    if priority is not None:
        task.priority = priority.value

    for field, value in update_data.items():
        setattr(task, field, value)

    commit_or_rollback(db, f"updating task {task_id}")
    return MessageResponse(message="Task updated successfully")


@router.put("/{task_id}/move", response_model=MessageResponse)
def move_task(task_id: str, move: TaskMove, db: Session = Depends(get_db)):
    ordering.move_task(db, task_id, move.column_id, move.position)
    return MessageResponse(message="Task moved successfully")


@router.delete("/{task_id}", response_model=MessageResponse)
def delete_task(task_id: str, db: Session = Depends(get_db)):
    task = _load_task(db, task_id)
    db.delete(task)
    commit_or_rollback(db, f"deleting task {task_id}")
    return MessageResponse(message="Task deleted successfully")
