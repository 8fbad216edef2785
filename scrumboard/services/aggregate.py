"""Assemble the nested board -> columns -> tasks read model."""
import logging
from typing import Dict, List

from sqlalchemy.orm import Session

from scrumboard.models import BoardColumn, Task
from scrumboard.schemas import BoardDetail, ColumnResponse, TaskResponse
from scrumboard.services.boards import get_board

logger = logging.getLogger(__name__)


def build_board_aggregate(db: Session, board_id: str) -> BoardDetail:
    board = get_board(db, board_id)

    columns = (
        db.query(BoardColumn)
        .filter(BoardColumn.board_id == board_id)
        .order_by(BoardColumn.position.asc(), BoardColumn.created_at.asc())
        .all()
    )
    tasks = (
        db.query(Task)
        .filter(Task.board_id == board_id)
        .order_by(Task.position.asc(), Task.created_at.asc())
        .all()
    )

    tasks_by_column: Dict[str, List[TaskResponse]] = {column.id: [] for column in columns}
    orphaned: List[str] = []
    for task in tasks:
        bucket = tasks_by_column.get(task.column_id)
        if bucket is None:
            orphaned.append(task.id)
            continue
        bucket.append(TaskResponse.model_validate(task))

    if orphaned:
        logger.warning(
            "Board %s has %d task(s) referencing unknown columns, omitted: %s",
            board_id,
            len(orphaned),
            ", ".join(orphaned),
        )

    return BoardDetail(
        id=board.id,
        name=board.name,
        description=board.description,
        created_at=board.created_at,
        updated_at=board.updated_at,
        columns=[
            ColumnResponse(
                id=column.id,
                board_id=column.board_id,
                name=column.name,
                position=column.position,
                color=column.color,
                tasks=tasks_by_column[column.id],
            )
            for column in columns
        ],
    )
