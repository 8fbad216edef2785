"""SCRUM Board Database Models"""
from scrumboard.models.board import Board
from scrumboard.models.column import BoardColumn, DEFAULT_COLUMN_COLOR
from scrumboard.models.task import Task, TaskPriority
from scrumboard.utils.identifiers import register_uuid_pk_listener

__all__ = [
    "Board",
    "BoardColumn",
    "Task",
    "TaskPriority",
    "DEFAULT_COLUMN_COLOR",
]


for _model in (
    Board,
    BoardColumn,
    Task,
):
    register_uuid_pk_listener(_model)
