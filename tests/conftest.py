import pytest

from kickoff.models.enums import TournamentFormat
from kickoff.models.participant import Participant
from kickoff.models.tournament.tournament import Tournament


class FakeResponse:
    def __init__(self, text):
        self.text = text


class FakeModel:
    """Stands in for a Gemini model: replies with canned text and records prompts."""

    def __init__(self, reply="Great game. Loved it.", error=None):
        self.reply = reply
        self.error = error
        self.prompts = []

    def generate_content(self, prompt):
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return FakeResponse(self.reply)


@pytest.fixture(autouse=True)
def no_gemini_key(monkeypatch):
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)
    monkeypatch.delenv("KICKOFF_MODEL", raising=False)


@pytest.fixture
def make_participants():
    def _make(count):
        return [
            Participant.create(f"Player {chr(ord('A') + i)}", f"Team {i + 1}")
            for i in range(count)
        ]

    return _make


@pytest.fixture
def make_tournament():
    def _make(count, tournament_format=TournamentFormat.LEAGUE, **kwargs):
        tournament = Tournament("Test Cup", tournament_format, **kwargs)
        for i in range(count):
            tournament.add_participant(f"Player {chr(ord('A') + i)}", f"Team {i + 1}")
        return tournament

    return _make


def play_league_by_registration(tournament):
    """Record every unplayed league fixture so the earlier-registered side wins 1-0."""
    order = {p.id: index for index, p in enumerate(tournament.participants)}
    for fixture in tournament.get_fixtures("LEAGUE"):
        if fixture.is_played:
            continue
        if order[fixture.home_id] < order[fixture.away_id]:
            tournament.record_result(fixture.id, 1, 0)
        else:
            tournament.record_result(fixture.id, 0, 1)


def play_knockout_round_home_wins(tournament):
    """Record every unplayed knockout fixture as a 2-0 home win."""
    for fixture in tournament.get_fixtures("KNOCKOUT"):
        if not fixture.is_played:
            tournament.record_result(fixture.id, 2, 0)
