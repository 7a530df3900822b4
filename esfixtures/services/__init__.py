"""Service-layer orchestration modules."""

from esfixtures.services.fixture_loader import FixtureLoader

__all__ = ["FixtureLoader"]
