"""Sample fixture files used by the loader tests."""

from pathlib import Path

FIXTURES_DIR = Path(__file__).resolve().parent


def fixture_path(name: str) -> Path:
    """Path of a sample fixture file by name."""
    path = FIXTURES_DIR / name
    if not path.exists():
        raise FileNotFoundError(f"Fixture not found: {path}")
    return path


# Base URL the fake search service pretends to live at.
SERVICE_URL = "http://search.test:9200"
