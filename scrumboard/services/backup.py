"""Board export to and import from the portable backup document.

Exports drop every identity; imports allocate fresh ones. Importing the same
document twice yields two boards that share nothing.
"""
import logging
import re
from datetime import date, datetime, timezone
from typing import Any, Dict, List, Optional

from pydantic import ValidationError
from sqlalchemy.orm import Session

from scrumboard.database import commit_or_rollback
from scrumboard.exceptions import ImportValidationError
from scrumboard.models import Board, BoardColumn, Task
from scrumboard.schemas import (
    BACKUP_VERSION,
    BackupBoard,
    BackupColumn,
    BackupDocument,
    BackupTask,
)
from scrumboard.services.aggregate import build_board_aggregate

logger = logging.getLogger(__name__)

IMPORTED_COLUMN_COLOR = "#f0f0f0"
UNSAFE_FILENAME_CHARS = re.compile(r"[^a-z0-9\-_]", re.IGNORECASE)


def export_board(db: Session, board_id: str) -> BackupDocument:
    aggregate = build_board_aggregate(db, board_id)
    document = BackupDocument(
        version=BACKUP_VERSION,
        exportDate=datetime.now(timezone.utc).isoformat(),
        board=BackupBoard(
            name=aggregate.name,
            description=aggregate.description,
            columns=[
                BackupColumn(
                    name=column.name,
                    position=column.position,
                    color=column.color,
                    tasks=[
                        BackupTask(
                            title=task.title,
                            description=task.description,
                            assignee=task.assignee,
                            priority=task.priority,
                            story_points=task.story_points,
                            position=task.position,
                        )
                        for task in column.tasks
                    ],
                )
                for column in aggregate.columns
            ],
        ),
    )
    logger.info("Board backup created successfully: %s", board_id)
    return document


def backup_filename(board_name: Optional[str], when: Optional[date] = None) -> str:
    """``<slug>_backup_<YYYY-MM-DD>.json`` for a board name."""
    when = when or datetime.now(timezone.utc).date()
    slug = UNSAFE_FILENAME_CHARS.sub("_", board_name or "").lower() or "untitled-board"
    return f"{slug}_backup_{when.isoformat()}.json"


def unwrap_import_payload(payload: Any) -> Dict[str, Any]:
    """Accept either the exported envelope or a bare board object."""
    if not isinstance(payload, dict):
        raise ImportValidationError("Invalid import data structure. Expected a JSON object.")
    inner = payload.get("board")
    if isinstance(inner, dict) and "name" not in payload:
        return inner
    return payload


def _check_structure(data: Dict[str, Any]) -> None:
    problems: List[str] = []
    name = data.get("name")
    if not isinstance(name, str) or not name.strip():
        problems.append("name")
    if not isinstance(data.get("columns"), list):
        problems.append("columns")
    if problems:
        raise ImportValidationError(
            "Invalid import data structure. Expected board with name and columns array. "
            f"Missing or invalid: {', '.join(problems)}.",
            fields=problems,
        )


def _validation_fields(exc: ValidationError) -> List[str]:
    return [".".join(str(part) for part in error["loc"]) for error in exc.errors()]


def parse_import_payload(payload: Any) -> BackupBoard:
    data = unwrap_import_payload(payload)
    _check_structure(data)
    try:
        return BackupBoard.model_validate(data)
    except ValidationError as exc:
        fields = _validation_fields(exc)
        raise ImportValidationError(
            f"Invalid board data: {', '.join(fields)}", fields=fields
        ) from exc


def _story_points(value: Optional[int]) -> Optional[int]:
    # Older backups wrote 0 for "no estimate"
    if not value:
        return None
    if not 1 <= value <= 5:
        raise ImportValidationError(
            f"Invalid story points value: {value}. Expected 1-5.", fields=["story_points"]
        )
    return value


def import_board(db: Session, payload: Any) -> Board:
    """Create a brand new board from a backup document.

    All rows are written in one transaction; a failure leaves no trace of
    the partially imported board.
    """
    source = parse_import_payload(payload)
    logger.info("Importing board: %s", source.name)

    board = Board(name=source.name, description=source.description)
    for column_index, column_in in enumerate(source.columns):
        column = BoardColumn(
            name=column_in.name,
            position=column_in.position if column_in.position is not None else column_index,
            color=column_in.color or IMPORTED_COLUMN_COLOR,
        )
        board.columns.append(column)
        for task_index, task_in in enumerate(column_in.tasks):
            column.tasks.append(
                Task(
                    board=board,
                    title=task_in.title,
                    description=task_in.description,
                    assignee=task_in.assignee,
                    priority=task_in.priority.value,
                    story_points=_story_points(task_in.story_points),
                    position=task_in.position if task_in.position is not None else task_index,
                )
            )

    db.add(board)
    commit_or_rollback(db, f"importing board {source.name!r}")
    db.refresh(board)
    logger.info("Board imported successfully: %s (%s)", board.id, board.name)
    return board
