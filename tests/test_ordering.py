import pytest
from sqlalchemy.orm import Session

import scrumboard.api.v1.tasks as task_routes
from scrumboard import models, schemas
from scrumboard.exceptions import NotFoundError, StorageError
from scrumboard.services import ordering
from scrumboard.services.boards import create_board


def _column(board: models.Board, name: str) -> models.BoardColumn:
    return next(column for column in board.columns if column.name == name)


def _create_task(session: Session, board: models.Board, column: models.BoardColumn, title: str) -> models.Task:
    task_in = schemas.TaskCreate(title=title, board_id=board.id, column_id=column.id)
    return task_routes.create_task(task_in, session)


def test_positions_append_after_current_maximum(db_session: Session):
    board = create_board(db_session, "Ordering")
    todo = _column(board, "To Do")

    assert ordering.next_task_position(db_session, todo.id) == 0

    first = _create_task(db_session, board, todo, "First")
    second = _create_task(db_session, board, todo, "Second")
    assert (first.position, second.position) == (0, 1)

    # A move that leaves a high position behind still pushes new tasks past it
    ordering.move_task(db_session, second.id, todo.id, 7)
    third = _create_task(db_session, board, todo, "Third")
    assert third.position == 8


def test_positions_are_not_reused_after_delete(db_session: Session):
    board = create_board(db_session, "Gaps")
    todo = _column(board, "To Do")

    tasks = [_create_task(db_session, board, todo, f"Task {i}") for i in range(3)]
    task_routes.delete_task(tasks[1].id, db_session)
    task_routes.delete_task(tasks[0].id, db_session)

    remaining = db_session.query(models.Task).filter(models.Task.column_id == todo.id).one()
    assert remaining.position == 2

    newcomer = _create_task(db_session, board, todo, "Newcomer")
    assert newcomer.position == 3


def test_positions_are_scoped_per_column(db_session: Session):
    board = create_board(db_session, "Scopes")
    todo = _column(board, "To Do")
    review = _column(board, "Review")

    _create_task(db_session, board, todo, "A")
    _create_task(db_session, board, todo, "B")
    only = _create_task(db_session, board, review, "C")

    assert only.position == 0


def test_move_rewrites_only_the_moved_task(db_session: Session):
    board = create_board(db_session, "Moves")
    todo = _column(board, "To Do")
    doing = _column(board, "In Progress")

    tasks = [_create_task(db_session, board, todo, f"Task {i}") for i in range(3)]
    _create_task(db_session, board, doing, "Already here")

    def snapshot():
        db_session.expire_all()
        return {
            task.id: (task.column_id, task.position, task.title, task.updated_at)
            for task in db_session.query(models.Task).all()
        }

    before = snapshot()
    moved = ordering.move_task(db_session, tasks[0].id, doing.id, 0)
    after = snapshot()

    assert moved.column_id == doing.id
    assert moved.position == 0
    for task_id, fields in before.items():
        if task_id != tasks[0].id:
            assert after[task_id] == fields
    # The task already at position 0 keeps it: no implicit resequencing
    positions_in_doing = sorted(pos for col, pos, _, _ in after.values() if col == doing.id)
    assert positions_in_doing == [0, 0]


def test_move_unknown_task_reports_not_found(db_session: Session):
    board = create_board(db_session, "Missing")
    todo = _column(board, "To Do")

    with pytest.raises(NotFoundError) as exc:
        ordering.move_task(db_session, "no-such-task", todo.id, 0)
    assert exc.value.resource == "Task"
    assert exc.value.message == "Task not found"


def test_move_rejects_column_from_another_board(db_session: Session):
    board = create_board(db_session, "Home")
    other = create_board(db_session, "Elsewhere")
    task = _create_task(db_session, board, _column(board, "To Do"), "Stay home")

    with pytest.raises(NotFoundError) as exc:
        ordering.move_task(db_session, task.id, _column(other, "Done").id, 0)
    assert exc.value.resource == "Column"

    db_session.refresh(task)
    assert task.column_id == _column(board, "To Do").id


def test_create_task_requires_column_on_same_board(db_session: Session):
    board = create_board(db_session, "Home")
    other = create_board(db_session, "Elsewhere")

    with pytest.raises(NotFoundError):
        _create_task(db_session, board, _column(other, "To Do"), "Wrong board")
    assert db_session.query(models.Task).count() == 0


def test_move_rolls_back_when_store_fails(db_session: Session, monkeypatch, failing_commit):
    board = create_board(db_session, "Flaky")
    todo = _column(board, "To Do")
    task = _create_task(db_session, board, todo, "Stuck")
    monkeypatch.setattr(db_session, "commit", failing_commit)

    with pytest.raises(StorageError):
        ordering.move_task(db_session, task.id, _column(board, "Done").id, 7)
    monkeypatch.undo()

    db_session.expire_all()
    reloaded = db_session.query(models.Task).filter(models.Task.id == task.id).one()
    assert (reloaded.column_id, reloaded.position) == (todo.id, 0)
