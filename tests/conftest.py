"""Pytest configuration and shared fixtures for the notemark test suite."""

import os
from pathlib import Path

import pytest
from hypothesis import Phase, Verbosity, settings

# Register custom Hypothesis profiles
settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=20)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)

# Load profile from environment or use default
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")
    config.addinivalue_line("markers", "fuzzing: Property-based tests using Hypothesis")
    config.addinivalue_line("markers", "security: Tests for escaping and URL sanitization")


@pytest.fixture
def fixtures_dir() -> Path:
    """Directory holding sample Markdown notes and templates."""
    return FIXTURES_DIR


@pytest.fixture
def sample_note(fixtures_dir: Path) -> str:
    """Text of a note exercising every block and inline construct."""
    return (fixtures_dir / "sample_note.md").read_text(encoding="utf-8")
