"""Tests for domain models."""

import logging

import pytest

from tournament_matches.models import (
    Match,
    Score,
    Team,
    TournamentFormat,
    TournamentType,
    Winner,
)


class TestScoreWinner:
    """Tests for winner derivation."""

    def test_home_wins_when_visitor_scores_less(self):
        """Home wins only when visitor < home."""
        assert Score(home=3, visitor=2).get_winner() == Winner.HOME

    def test_visitor_wins_when_scoring_more(self):
        assert Score(home=1, visitor=4).get_winner() == Winner.VISITOR

    def test_tie_goes_to_visitor(self):
        """A tie is classified as a visitor win."""
        assert Score(home=5, visitor=5).get_winner() == Winner.VISITOR

    def test_unplayed_match_goes_to_visitor(self):
        assert Score().get_winner() == Winner.VISITOR

    @pytest.mark.parametrize("home,visitor", [(0, 0), (1, 0), (0, 1), (7, 7), (10, 9), (2, 11)])
    def test_home_iff_visitor_lower(self, home, visitor):
        """HOME exactly when visitor < home."""
        expected = Winner.HOME if visitor < home else Winner.VISITOR
        assert Score(home=home, visitor=visitor).get_winner() == expected


class TestScorePlayed:
    """Tests for the played flag."""

    def test_zero_zero_is_not_played(self):
        assert Score().is_played() is False

    def test_one_side_scored_is_played(self):
        assert Score(home=1, visitor=0).is_played() is True
        assert Score(home=0, visitor=1).is_played() is True


class TestMatch:
    """Tests for Match model."""

    def test_default_match_is_empty(self):
        """Default Match has empty strings and a 0-0 score."""
        match = Match()

        assert match.id == ""
        assert match.name == ""
        assert match.round == ""
        assert match.tournament_id == ""
        assert match.home_team_id == ""
        assert match.visitor_team_name == ""
        assert match.score == Score(home=0, visitor=0)

    def test_construct_by_field_name(self):
        match = Match(tournament_id="t1", home_team_id="a")

        assert match.tournament_id == "t1"
        assert match.home_team_id == "a"

    def test_winner_team_id(self):
        match = Match(
            home_team_id="a",
            visitor_team_id="b",
            score=Score(home=2, visitor=1),
        )
        assert match.get_winner() == Winner.HOME
        assert match.get_winner_team_id() == "a"

    def test_winner_team_id_on_tie(self):
        match = Match(home_team_id="a", visitor_team_id="b", score=Score(home=1, visitor=1))
        assert match.get_winner_team_id() == "b"

    def test_title_uses_names_and_slot(self):
        match = Match(
            name="W0",
            home_team_name="Lions",
            visitor_team_id="team-2",
            score=Score(home=3, visitor=2),
        )
        assert match.get_title() == "[W0] Lions 3 - 2 team-2"

    def test_title_without_teams(self):
        assert Match().get_title() == "TBD 0 - 0 TBD"


class TestTeam:
    """Tests for Team model."""

    def test_placeholder_team_has_no_id(self):
        team = Team(name="Winner of W0")
        assert team.id == ""
        assert team.name == "Winner of W0"


class TestTournamentFormat:
    """Tests for TournamentFormat model."""

    def test_defaults(self):
        fmt = TournamentFormat()
        assert fmt.max_teams_per_group == 0
        assert fmt.number_of_groups == 0
        assert fmt.type == TournamentType.DOUBLE_ELIMINATION

    def test_unknown_type_falls_back_with_warning(self, caplog):
        """Unrecognized type names become DOUBLE_ELIMINATION and are logged."""
        with caplog.at_level(logging.WARNING):
            fmt = TournamentFormat.model_validate({"type": "ROUND_ROBIN"})

        assert fmt.type == TournamentType.DOUBLE_ELIMINATION
        assert "ROUND_ROBIN" in caplog.text
