"""
Abstract base class defining the match delegate interface.

The delegate owns persistence and domain rules for matches. Entry points hand
it validated requests only; it reports failures by raising the DelegateError
family from tournament_matches.exceptions.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from ..models import Match


class MatchDelegate(ABC):
    """
    Abstract interface for querying and mutating tournament matches.

    Implementations must serialize concurrent updates to the same match.
    """

    @abstractmethod
    def get_matches(self, tournament_id: str) -> List[Optional[Match]]:
        """
        Get every bracket slot of a tournament.

        Args:
            tournament_id: The tournament to list

        Returns:
            Matches in bracket order, None for slots without a match yet

        Raises:
            NotFoundError: If the tournament does not exist
            DelegateError: On any other failure
        """
        pass

    @abstractmethod
    def get_match(self, tournament_id: str, match_id: str) -> Match:
        """
        Get a single match.

        Args:
            tournament_id: The tournament the match belongs to
            match_id: The match

        Returns:
            The match

        Raises:
            NotFoundError: If the tournament or match does not exist
            DelegateError: On any other failure
        """
        pass

    @abstractmethod
    def update_match_score(self, match: Match) -> str:
        """
        Record a new score for a match.

        Args:
            match: Canonical mutation carrying tournament_id, id and score.
                   Other fields are ignored.

        Returns:
            Id of the updated match

        Raises:
            NotFoundError: If the tournament or match does not exist
            InvalidFormatError: If the delegate refuses the score
            DelegateError: On any other failure
        """
        pass
