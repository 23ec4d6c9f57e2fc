import pytest

from kickoff.constants import MANUAL_ROUND
from kickoff.models.enums import Stage, TournamentFormat
from kickoff.utils.formatting import format_fixtures, format_standings, round_label


@pytest.mark.parametrize(
    "round_number, stage, label",
    [
        (1, Stage.LEAGUE, "Matchday 1"),
        (12, "LEAGUE", "Matchday 12"),
        (2, Stage.KNOCKOUT, "Final"),
        (4, Stage.KNOCKOUT, "Semifinals"),
        (8, Stage.KNOCKOUT, "Quarterfinals"),
        (16, Stage.KNOCKOUT, "Round of 16"),
        (32, Stage.KNOCKOUT, "Round of 32"),
        (MANUAL_ROUND, Stage.LEAGUE, "Extra fixtures"),
    ],
)
def test_round_label(round_number, stage, label):
    assert round_label(round_number, stage) == label


def test_manual_flag_wins():
    assert round_label(4, Stage.KNOCKOUT, is_manual=True) == "Extra fixtures"


def test_format_standings(make_tournament):
    tournament = make_tournament(2)
    (fixture,) = tournament.start()
    tournament.record_result(fixture.id, 3, 1)

    text = format_standings(tournament.get_standings())
    lines = text.splitlines()

    assert "Pts" in lines[0] and "GD" in lines[0]
    assert lines[2].startswith("1") and "Player A" in lines[2] and "+2" in lines[2]
    assert lines[3].startswith("2") and "Player B" in lines[3] and "-2" in lines[3]


def test_format_standings_fits_long_names(make_tournament):
    tournament = make_tournament(0)
    exact = tournament.add_participant("N" * 24, "T" * 18)
    tournament.add_participant("L" * 30, "Team")

    lines = format_standings(tournament.get_standings()).splitlines()
    rows = {line.split()[1][0]: line for line in lines[2:]}

    assert exact.name + " " + exact.team in rows["N"]
    assert "L" * 22 + ".." in rows["L"]
    assert "L" * 23 not in rows["L"]


def test_format_empty_standings():
    assert "(no participants)" in format_standings([])


def test_format_fixtures(make_tournament):
    tournament = make_tournament(3, TournamentFormat.KNOCKOUT)
    bye, real = tournament.start()

    text = format_fixtures(tournament)

    assert "=== Semifinals ===" in text
    assert bye.id in text and real.id in text
    assert "(bye)" in text
    assert "3 - 0" in text


def test_format_fixtures_shows_annotations(make_tournament):
    tournament = make_tournament(2)
    (fixture,) = tournament.start()
    tournament.record_result(fixture.id, 1, 0)
    tournament.result_recorder.attach_annotation(fixture.id, "Narrow.")

    text = format_fixtures(tournament, Stage.LEAGUE)

    assert "=== Matchday 1 ===" in text
    assert '"Narrow."' in text


def test_format_fixtures_empty_stage(make_tournament):
    tournament = make_tournament(2)
    tournament.start()
    assert format_fixtures(tournament, "KNOCKOUT") == "No knockout fixtures."
