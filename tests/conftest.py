"""
Shared test fixtures and configuration.

Provides reusable fixtures for all test files including sample brackets,
delegate instances, and FastAPI test clients.
"""

import json
import os
import shutil
import tempfile
from typing import List, Optional
from unittest.mock import Mock

import pytest
from fastapi.testclient import TestClient

from tournament_matches.api.dependencies import get_match_delegate
from tournament_matches.delegate import InMemoryMatchDelegate, MatchDelegate, reset_delegate
from tournament_matches.main import app
from tournament_matches.models import Match, Score, Tournament

TOURNAMENT_ID = "550e8400-e29b-41d4-a716-446655440000"


# =============================================================================
# FILESYSTEM FIXTURES
# =============================================================================

@pytest.fixture
def test_data_dir():
    """Provide a temporary directory for test data."""
    temp_dir = tempfile.mkdtemp(prefix="tournament_matches_test_")
    yield temp_dir

    # Cleanup
    if os.path.exists(temp_dir):
        try:
            shutil.rmtree(temp_dir)
        except PermissionError:
            pass  # Windows file locking, ignore


# =============================================================================
# SAMPLE DATA FIXTURES
# =============================================================================

@pytest.fixture
def sample_matches() -> List[Optional[Match]]:
    """Provide a small bracket: one pending, two played, one empty slot."""
    return [
        Match(
            id="match-1",
            name="W0",
            tournament_id=TOURNAMENT_ID,
            home_team_id="team-1",
            home_team_name="Lions",
            visitor_team_id="team-2",
            visitor_team_name="Tigers",
        ),
        Match(
            id="match-2",
            name="W1",
            round="quarterfinals",
            tournament_id=TOURNAMENT_ID,
            home_team_id="team-3",
            visitor_team_id="team-4",
            score=Score(home=3, visitor=2),
        ),
        Match(
            id="match-3",
            name="L0",
            tournament_id=TOURNAMENT_ID,
            score=Score(home=1, visitor=0),
        ),
        None,
    ]


@pytest.fixture
def sample_seed_data() -> dict:
    """Provide a seed document for the in-memory delegate."""
    return {
        "tournaments": [
            {
                "id": "t1",
                "name": "Spring Cup",
                "format": {"maxTeamsPerGroup": 4, "numberOfGroups": 2, "type": "DOUBLE_ELIMINATION"},
                "matches": [
                    {"id": "m1", "name": "W0", "home": {"id": "a", "name": "Lions"}, "visitorTeamId": "b"},
                    {"id": "m2", "name": "W1", "matchScore": {"homeTeamScore": 2, "visitorTeamScore": 1}},
                    None,
                ],
            },
            {"id": "t2", "name": "Autumn Cup"},
        ]
    }


@pytest.fixture
def seed_file(test_data_dir, sample_seed_data) -> str:
    """Write the seed document to disk and return its path."""
    path = os.path.join(test_data_dir, "seed.json")
    with open(path, "w", encoding="utf-8") as f:
        json.dump(sample_seed_data, f)
    return path


# =============================================================================
# DELEGATE FIXTURES
# =============================================================================

@pytest.fixture
def memory_delegate(sample_matches) -> InMemoryMatchDelegate:
    """Provide an in-memory delegate holding the sample bracket."""
    delegate = InMemoryMatchDelegate()
    delegate.add_tournament(Tournament(id=TOURNAMENT_ID, name="Test Cup"))
    for match in sample_matches:
        delegate.add_match(TOURNAMENT_ID, match)
    return delegate


@pytest.fixture
def mock_delegate():
    """Provide a mock MatchDelegate for testing."""
    return Mock(spec=MatchDelegate)


# =============================================================================
# FASTAPI TEST CLIENT FIXTURES
# =============================================================================

@pytest.fixture
def client(mock_delegate):
    """Provide a test client whose routes use the mock delegate."""
    app.dependency_overrides[get_match_delegate] = lambda: mock_delegate
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def memory_client(memory_delegate):
    """Provide a test client backed by the sample in-memory bracket."""
    app.dependency_overrides[get_match_delegate] = lambda: memory_delegate
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture(autouse=True)
def clean_delegate_singleton():
    """Reset the delegate factory around every test."""
    reset_delegate()
    yield
    reset_delegate()
