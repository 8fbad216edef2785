from pathlib import Path

from scrumboard.config import PROJECT_ROOT, Settings


def test_development_database_lives_in_project_root():
    settings = Settings(ENVIRONMENT="development", DATABASE_URL=None, LOG_LEVEL=None)

    assert settings.is_development
    assert settings.database_path == PROJECT_ROOT / "scrum_board.db"
    assert settings.database_url == f"sqlite:///{PROJECT_ROOT / 'scrum_board.db'}"
    assert settings.log_level == "DEBUG"


def test_production_database_uses_data_dir(tmp_path):
    settings = Settings(ENVIRONMENT="production", DATA_DIR=str(tmp_path), DATABASE_URL=None, LOG_LEVEL=None)

    assert not settings.is_development
    assert settings.database_path == tmp_path / "scrum_board.db"
    assert settings.log_level == "INFO"


def test_production_defaults_to_home_directory():
    settings = Settings(ENVIRONMENT="production", DATA_DIR=None, DATABASE_URL=None)

    assert settings.data_dir == Path.home() / ".scrum-board"


def test_explicit_database_url_wins():
    settings = Settings(DATABASE_URL="sqlite:///elsewhere.db", LOG_LEVEL="warning")

    assert settings.database_url == "sqlite:///elsewhere.db"
    assert settings.log_level == "WARNING"


def test_defaults():
    settings = Settings(CORS_ORIGINS="http://localhost:3000, ,http://127.0.0.1:3000")

    assert Settings.model_fields["PORT"].default == 5000
    assert Settings.model_fields["API_PREFIX"].default == "/api"
    assert settings.cors_origins_list == ["http://localhost:3000", "http://127.0.0.1:3000"]
