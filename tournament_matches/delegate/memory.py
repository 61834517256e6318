"""
In-memory match delegate.

Keeps tournaments and their bracket slots in process memory. Suitable for
local development, tests, and replaying score events without a backing store.

Seed file format (SEED_FILE):
    {
        "tournaments": [
            {
                "id": "t1",
                "name": "Spring Cup",
                "format": {"maxTeamsPerGroup": 4, "numberOfGroups": 2},
                "matches": [{"name": "W0", "homeTeamId": "a"}, null]
            }
        ]
    }
"""

import logging
import threading
import uuid
from pathlib import Path
from typing import Dict, List, Optional, Union

from ..codec import decode_matches, decode_tournament, load_json
from ..exceptions import (
    DuplicateError,
    NotFoundError,
    ParseError,
)
from ..models import Match, Tournament
from .base import MatchDelegate

logger = logging.getLogger(__name__)


class InMemoryMatchDelegate(MatchDelegate):
    """
    Thread-safe in-memory store of tournament brackets.

    Matches are handed out as copies so callers never share state with the store.
    """

    def __init__(self):
        self._tournaments: Dict[str, Tournament] = {}
        self._slots: Dict[str, List[Optional[Match]]] = {}
        self._lock = threading.RLock()

    # =========================================================================
    # SETUP
    # =========================================================================

    def add_tournament(self, tournament: Tournament) -> str:
        """
        Register a tournament with an empty bracket.

        Returns:
            Tournament id (generated when the tournament has none)

        Raises:
            DuplicateError: If the id is already registered
        """
        tournament_id = tournament.id or str(uuid.uuid4())
        with self._lock:
            if tournament_id in self._tournaments:
                raise DuplicateError(f"Tournament {tournament_id} already exists")
            self._tournaments[tournament_id] = tournament.model_copy(
                update={"id": tournament_id}
            )
            self._slots[tournament_id] = []
        return tournament_id

    def add_match(self, tournament_id: str, match: Optional[Match]) -> Optional[str]:
        """
        Append a bracket slot to a tournament.

        Args:
            tournament_id: Owning tournament
            match: The match, or None for a slot not populated yet

        Returns:
            Match id (generated when the match has none), None for empty slots

        Raises:
            NotFoundError: If the tournament does not exist
            DuplicateError: If the match id is already used in the tournament
        """
        with self._lock:
            slots = self._get_slots(tournament_id)
            if match is None:
                slots.append(None)
                return None

            match_id = match.id or str(uuid.uuid4())
            if self._find_index(slots, match_id) is not None:
                raise DuplicateError(f"Match {match_id} already exists")

            slots.append(match.model_copy(
                update={"id": match_id, "tournament_id": tournament_id}
            ))
            return match_id

    def load_seed(self, path: Union[str, Path]) -> int:
        """
        Load tournaments and their bracket slots from a JSON file.

        Nothing is registered unless the whole document loads.

        Returns:
            Number of tournaments loaded

        Raises:
            ParseError: If the file is not a valid seed document
            DuplicateError: If a tournament or match id is already registered
        """
        with open(path, "r", encoding="utf-8") as f:
            document = load_json(f.read())

        if not isinstance(document, dict) or not isinstance(document.get("tournaments"), list):
            raise ParseError("Seed file must contain a 'tournaments' array")

        # decode everything before registering so a bad entry loads nothing
        brackets = [
            (decode_tournament(item), decode_matches(item.get("matches", [])))
            for item in document["tournaments"]
        ]

        with self._lock:
            added: List[str] = []
            try:
                for tournament, matches in brackets:
                    tournament_id = self.add_tournament(tournament)
                    added.append(tournament_id)
                    for match in matches:
                        self.add_match(tournament_id, match)
            except DuplicateError:
                for tournament_id in added:
                    del self._tournaments[tournament_id]
                    del self._slots[tournament_id]
                raise

        count = len(brackets)
        logger.info(f"Loaded {count} tournaments from {path}")
        return count

    # =========================================================================
    # DELEGATE INTERFACE
    # =========================================================================

    def get_matches(self, tournament_id: str) -> List[Optional[Match]]:
        with self._lock:
            slots = self._get_slots(tournament_id)
            return [None if match is None else match.model_copy() for match in slots]

    def get_match(self, tournament_id: str, match_id: str) -> Match:
        with self._lock:
            slots = self._get_slots(tournament_id)
            index = self._find_index(slots, match_id)
            if index is None:
                raise NotFoundError(f"Match {match_id} not found")
            return slots[index].model_copy()

    def update_match_score(self, match: Match) -> str:
        with self._lock:
            slots = self._get_slots(match.tournament_id)
            index = self._find_index(slots, match.id)
            if index is None:
                raise NotFoundError(f"Match {match.id} not found")

            updated = slots[index].model_copy(update={"score": match.score})
            slots[index] = updated

        logger.info(
            f"Score updated: {updated.get_title()} "
            f"(winner: {updated.get_winner().value} {updated.get_winner_team_id()})"
        )
        return updated.id

    # =========================================================================
    # HELPERS
    # =========================================================================

    def _get_slots(self, tournament_id: str) -> List[Optional[Match]]:
        slots = self._slots.get(tournament_id)
        if slots is None:
            raise NotFoundError(f"Tournament {tournament_id} not found")
        return slots

    @staticmethod
    def _find_index(slots: List[Optional[Match]], match_id: str) -> Optional[int]:
        for index, match in enumerate(slots):
            if match is not None and match.id == match_id:
                return index
        return None
