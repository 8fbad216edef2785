"""Board endpoints: listing, aggregate reads, creation, deletion, backup and import"""
from typing import Any, List

from fastapi import APIRouter, Body, Depends, status
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from scrumboard.database import get_db
from scrumboard.schemas import BoardCreate, BoardCreated, BoardDetail, BoardSummary, MessageResponse
from scrumboard.services import backup, boards
from scrumboard.services.aggregate import build_board_aggregate

router = APIRouter()


@router.get("", response_model=List[BoardSummary])
def list_boards(db: Session = Depends(get_db)):
    """List boards, newest first."""
    return boards.list_boards(db)


@router.post("", response_model=BoardCreated, status_code=status.HTTP_201_CREATED)
def create_board(board_in: BoardCreate, db: Session = Depends(get_db)):
    """Create a board with the To Do / In Progress / Review / Done columns."""
    return boards.create_board(db, board_in.name, board_in.description)


@router.post("/import", response_model=BoardCreated, status_code=status.HTTP_201_CREATED)
def import_board(payload: Any = Body(...), db: Session = Depends(get_db)):
    """Create a new board from a backup document or a bare board object."""
    return backup.import_board(db, payload)


@router.get("/{board_id}", response_model=BoardDetail)
def get_board(board_id: str, db: Session = Depends(get_db)):
    return build_board_aggregate(db, board_id)


@router.delete("/{board_id}", response_model=MessageResponse)
def delete_board(board_id: str, db: Session = Depends(get_db)):
    boards.delete_board(db, board_id)
    return MessageResponse(message="Board deleted successfully")


@router.get("/{board_id}/backup")
def backup_board(board_id: str, db: Session = Depends(get_db)):
    """Download the board as an identity-free JSON document."""
    document = backup.export_board(db, board_id)
    filename = backup.backup_filename(document.board.name)
    return JSONResponse(
        content=document.model_dump(mode="json"),
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
