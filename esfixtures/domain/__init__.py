"""Domain records."""

from esfixtures.domain.fixture_file import FixtureFile, read_fixture_file, read_fixture_files

__all__ = ["FixtureFile", "read_fixture_file", "read_fixture_files"]
