"""SCRUM board backend: boards, ordered columns and ordered tasks over a REST API."""

__version__ = "1.0.0"
