"""Board lifecycle: creation with the canonical columns, first-run seeding and deletion."""
import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from scrumboard.database import commit_or_rollback
from scrumboard.exceptions import NotFoundError
from scrumboard.models import Board, BoardColumn

logger = logging.getLogger(__name__)

DEFAULT_COLUMNS = [
    {"name": "To Do", "position": 0, "color": "#ffebee"},
    {"name": "In Progress", "position": 1, "color": "#fff3e0"},
    {"name": "Review", "position": 2, "color": "#f3e5f5"},
    {"name": "Done", "position": 3, "color": "#e8f5e8"},
]

DEFAULT_BOARD_NAME = "My SCRUM Board"
DEFAULT_BOARD_DESCRIPTION = "Default project board"


def list_boards(db: Session) -> List[Board]:
    return db.query(Board).order_by(Board.created_at.desc(), Board.id).all()


def get_board(db: Session, board_id: str) -> Board:
    board = db.query(Board).filter(Board.id == board_id).first()
    if board is None:
        raise NotFoundError("Board", board_id)
    return board


def create_board(db: Session, name: str, description: Optional[str] = None) -> Board:
    """Create a board and its four default columns in a single transaction."""
    board = Board(name=name, description=description)
    for column_fields in DEFAULT_COLUMNS:
        board.columns.append(BoardColumn(**column_fields))
    db.add(board)
    commit_or_rollback(db, f"creating board {name!r}")
    db.refresh(board)
    logger.info("Created board %s (%s)", board.id, board.name)
    return board


def ensure_default_board(db: Session) -> Optional[Board]:
    """Seed the default board when the store holds no boards at all."""
    if db.query(Board).count():
        logger.debug("Boards already exist, skipping default creation")
        return None
    board = create_board(db, DEFAULT_BOARD_NAME, DEFAULT_BOARD_DESCRIPTION)
    logger.info("Default board and columns created")
    return board


def delete_board(db: Session, board_id: str) -> None:
    """Delete a board; its columns and tasks go with it."""
    board = get_board(db, board_id)
    db.delete(board)
    commit_or_rollback(db, f"deleting board {board_id}")
    logger.info("Board deleted successfully: %s", board_id)
