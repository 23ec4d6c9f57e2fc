import pytest

from conftest import play_knockout_round_home_wins, play_league_by_registration

from kickoff.constants import BYE_ID, MANUAL_ROUND
from kickoff.exceptions import (
    DuplicateParticipantException,
    FixtureNotFoundException,
    InvalidFixtureException,
    InvalidParticipantCountException,
    InvalidResultException,
    ParticipantNotFoundException,
    TournamentStateException,
)
from kickoff.models.enums import Stage, TournamentFormat, TournamentStatus
from kickoff.models.tournament.tournament import Tournament

# ========== Setup ==========


def test_new_tournament_is_in_setup():
    tournament = Tournament("Friday Cup")
    assert tournament.status == TournamentStatus.SETUP
    assert tournament.current_stage == Stage.LEAGUE
    assert tournament.participants == []
    assert tournament.get_fixtures() == []
    assert tournament.winner is None


def test_start_requires_two_participants(make_tournament):
    tournament = make_tournament(1)
    with pytest.raises(InvalidParticipantCountException):
        tournament.start()
    assert tournament.status == TournamentStatus.SETUP
    assert tournament.get_fixtures() == []


def test_qualifiers_must_allow_a_final():
    with pytest.raises(InvalidParticipantCountException):
        Tournament("Cup", TournamentFormat.HYBRID, knockout_qualifiers=1)


def test_participant_management_in_setup(make_tournament):
    tournament = make_tournament(3)
    a, b, c = tournament.participants

    tournament.remove_participant(b.id)
    assert [p.id for p in tournament.participants] == [a.id, c.id]

    with pytest.raises(ParticipantNotFoundException):
        tournament.remove_participant(b.id)


def test_participant_list_is_a_copy(make_tournament):
    tournament = make_tournament(2)
    tournament.participants.clear()
    assert len(tournament.participants) == 2


def test_configuration_is_locked_after_start(make_tournament):
    tournament = make_tournament(4)
    tournament.set_format("KNOCKOUT")
    tournament.set_double_leg(True)
    assert tournament.format == TournamentFormat.KNOCKOUT
    assert tournament.double_leg

    tournament.start()

    with pytest.raises(TournamentStateException):
        tournament.set_format(TournamentFormat.LEAGUE)
    with pytest.raises(TournamentStateException):
        tournament.set_double_leg(False)
    with pytest.raises(TournamentStateException):
        tournament.add_participant("Late", "Comer")
    with pytest.raises(TournamentStateException):
        tournament.remove_participant(tournament.participants[0].id)
    with pytest.raises(TournamentStateException):
        tournament.start()


def test_update_participant_any_time(make_tournament):
    tournament = make_tournament(2)
    tournament.start()
    a = tournament.participants[0]
    fixtures_before = [f.to_dict() for f in tournament.get_fixtures()]

    updated = tournament.update_participant(a.id, name="  New   Name ", team="New Team")

    assert updated.id == a.id
    assert updated.name == "New Name"
    assert tournament.get_participant(a.id).team == "New Team"
    assert [f.to_dict() for f in tournament.get_fixtures()] == fixtures_before
    row = next(r for r in tournament.get_standings() if r.participant_id == a.id)
    assert (row.name, row.team) == ("New Name", "New Team")


def test_update_participant_without_changes(make_tournament):
    tournament = make_tournament(2)
    a = tournament.participants[0]
    assert tournament.update_participant(a.id) == a

    with pytest.raises(ParticipantNotFoundException):
        tournament.update_participant("participant-missing", name="X")


# ========== League ==========


def test_league_start(make_tournament):
    tournament = make_tournament(4)
    fixtures = tournament.start()

    assert tournament.status == TournamentStatus.ACTIVE
    assert tournament.current_stage == Stage.LEAGUE
    assert len(fixtures) == 6
    assert tournament.get_fixtures() == fixtures
    assert all(f.stage == Stage.LEAGUE for f in fixtures)


def test_double_leg_league_start(make_tournament):
    tournament = make_tournament(4, double_leg=True)
    assert len(tournament.start()) == 12


def test_record_and_clear_result(make_tournament):
    tournament = make_tournament(2)
    (fixture,) = tournament.start()

    recorded = tournament.record_result(fixture.id, "3", 1)
    assert recorded.is_played
    assert (recorded.home_score, recorded.away_score) == (3, 1)
    assert tournament.get_fixture(fixture.id).is_played
    assert tournament.get_standings()[0].participant_id == fixture.home_id

    cleared = tournament.clear_result(fixture.id)
    assert not cleared.is_played
    assert all(row.played == 0 for row in tournament.get_standings())


@pytest.mark.parametrize("score", [-1, 1.5, True, "x"])
def test_record_rejects_bad_scores(make_tournament, score):
    tournament = make_tournament(2)
    (fixture,) = tournament.start()
    with pytest.raises(InvalidResultException):
        tournament.record_result(fixture.id, score, 0)
    assert not tournament.get_fixture(fixture.id).is_played


def test_record_unknown_fixture(make_tournament):
    tournament = make_tournament(2)
    tournament.start()
    with pytest.raises(FixtureNotFoundException):
        tournament.record_result("fixture-missing", 1, 0)


def test_record_requires_active_tournament(make_tournament):
    tournament = make_tournament(2)
    with pytest.raises(TournamentStateException):
        tournament.record_result("fixture-missing", 1, 0)


def test_league_finish_crowns_the_leader(make_tournament):
    tournament = make_tournament(3)
    tournament.start()
    play_league_by_registration(tournament)

    assert tournament.is_stage_complete()
    winner = tournament.finish()

    assert tournament.status == TournamentStatus.FINISHED
    assert winner.id == tournament.participants[0].id
    assert tournament.winner_id == winner.id
    with pytest.raises(TournamentStateException):
        tournament.finish()


def test_finish_requires_active(make_tournament):
    with pytest.raises(TournamentStateException):
        make_tournament(2).finish()


def test_fixtures_by_round_order(make_tournament):
    tournament = make_tournament(4)
    tournament.start()
    a, b = tournament.participants[:2]
    tournament.add_manual_fixture(a.id, b.id)

    grouped = tournament.fixtures_by_round()

    assert list(grouped) == [1, 2, 3, MANUAL_ROUND]
    assert all(len(grouped[r]) == 2 for r in (1, 2, 3))


def test_is_stage_complete(make_tournament):
    tournament = make_tournament(3)
    assert not tournament.is_stage_complete()

    tournament.start()
    assert not tournament.is_stage_complete()

    play_league_by_registration(tournament)
    assert tournament.is_stage_complete()


# ========== Manual fixtures ==========


def test_manual_fixture(make_tournament):
    tournament = make_tournament(3)
    tournament.start()
    a, b, _ = tournament.participants

    fixture = tournament.add_manual_fixture(b.id, a.id)

    assert fixture.is_manual
    assert fixture.round == MANUAL_ROUND
    assert fixture.stage == Stage.LEAGUE
    assert tournament.get_fixtures()[-1] == fixture

    tournament.record_result(fixture.id, 5, 0)
    row_b = next(r for r in tournament.get_standings() if r.participant_id == b.id)
    assert row_b.points == 3


def test_manual_fixture_validation(make_tournament):
    tournament = make_tournament(2)
    a, b = tournament.participants

    with pytest.raises(TournamentStateException):
        tournament.add_manual_fixture(a.id, b.id)

    tournament.start()
    with pytest.raises(InvalidFixtureException):
        tournament.add_manual_fixture(a.id, a.id)
    with pytest.raises(InvalidFixtureException):
        tournament.add_manual_fixture(a.id, "")
    with pytest.raises(InvalidFixtureException):
        tournament.add_manual_fixture(None, b.id)
    with pytest.raises(ParticipantNotFoundException):
        tournament.add_manual_fixture(a.id, "participant-missing")
    with pytest.raises(ParticipantNotFoundException):
        tournament.add_manual_fixture(a.id, BYE_ID)


# ========== Knockout ==========


def test_knockout_start_uses_registration_order(make_tournament):
    tournament = make_tournament(4, TournamentFormat.KNOCKOUT)
    p1, p2, p3, p4 = tournament.participants

    fixtures = tournament.start()

    assert tournament.current_stage == Stage.KNOCKOUT
    assert [(f.home_id, f.away_id) for f in fixtures] == [(p1.id, p4.id), (p2.id, p3.id)]
    assert all(f.round == 4 for f in fixtures)
    assert all(not f.is_played for f in fixtures)


def test_knockout_with_bye_to_champion(make_tournament):
    tournament = make_tournament(3, TournamentFormat.KNOCKOUT)
    a, b, c = tournament.participants
    bye, real = tournament.start()

    assert bye.is_bye and bye.winner_id == a.id
    assert (real.home_id, real.away_id) == (b.id, c.id)

    with pytest.raises(InvalidResultException):
        tournament.record_result(bye.id, 0, 3)

    tournament.record_result(real.id, 2, 1)
    (final,) = tournament.advance_knockout_round()
    assert final.round == 2
    assert (final.home_id, final.away_id) == (a.id, b.id)

    tournament.record_result(final.id, 0, 1)
    assert tournament.advance_knockout_round() == []
    assert tournament.status == TournamentStatus.FINISHED
    assert tournament.winner_id == b.id
    assert tournament.winner == b


def test_five_player_knockout_rounds(make_tournament):
    tournament = make_tournament(5, TournamentFormat.KNOCKOUT)
    p1, p2, p3, p4, p5 = tournament.participants
    first_round = tournament.start()
    assert len(first_round) == 4

    play_knockout_round_home_wins(tournament)
    semis = tournament.advance_knockout_round()

    assert [f.round for f in semis] == [4, 4]
    assert [(f.home_id, f.away_id) for f in semis] == [(p1.id, p4.id), (p2.id, p3.id)]

    play_knockout_round_home_wins(tournament)
    (final,) = tournament.advance_knockout_round()
    assert (final.home_id, final.away_id) == (p1.id, p2.id)

    play_knockout_round_home_wins(tournament)
    tournament.advance_knockout_round()
    assert tournament.winner_id == p1.id
    assert len(tournament.get_fixtures()) == 4 + 2 + 1


def test_advance_requires_finished_round(make_tournament):
    tournament = make_tournament(4, TournamentFormat.KNOCKOUT)
    first, second = tournament.start()
    tournament.record_result(first.id, 1, 0)

    with pytest.raises(TournamentStateException):
        tournament.advance_knockout_round()


def test_drawn_knockout_fixture_blocks_advance(make_tournament):
    tournament = make_tournament(2, TournamentFormat.KNOCKOUT)
    (final,) = tournament.start()
    tournament.record_result(final.id, 1, 1)

    with pytest.raises(TournamentStateException):
        tournament.advance_knockout_round()

    tournament.record_result(final.id, 2, 1)
    tournament.advance_knockout_round()
    assert tournament.status == TournamentStatus.FINISHED


def test_closed_knockout_round_cannot_be_edited(make_tournament):
    tournament = make_tournament(4, TournamentFormat.KNOCKOUT)
    first, _ = tournament.start()
    play_knockout_round_home_wins(tournament)
    tournament.advance_knockout_round()

    with pytest.raises(TournamentStateException):
        tournament.record_result(first.id, 0, 3)
    with pytest.raises(TournamentStateException):
        tournament.clear_result(first.id)


def test_manual_knockout_fixture_does_not_join_the_bracket(make_tournament):
    tournament = make_tournament(4, TournamentFormat.KNOCKOUT)
    tournament.start()
    a, b = tournament.participants[:2]
    friendly = tournament.add_manual_fixture(a.id, b.id)
    assert friendly.stage == Stage.KNOCKOUT

    play_knockout_round_home_wins(tournament)
    final = tournament.advance_knockout_round()

    assert len(final) == 1
    assert final[0].round == 2


def test_advance_knockout_round_outside_knockout(make_tournament):
    tournament = make_tournament(4)
    tournament.start()
    with pytest.raises(TournamentStateException):
        tournament.advance_knockout_round()


# ========== Hybrid ==========


def test_hybrid_league_then_knockout(make_tournament):
    tournament = make_tournament(5, TournamentFormat.HYBRID)
    tournament.start()
    assert tournament.current_stage == Stage.LEAGUE

    play_league_by_registration(tournament)
    league_fixtures = [f.to_dict() for f in tournament.get_fixtures(Stage.LEAGUE)]
    standings = tournament.get_standings()
    seeds = [row.participant_id for row in standings[:4]]
    assert seeds == [p.id for p in tournament.participants[:4]]

    bracket = tournament.advance_to_knockout()

    assert tournament.current_stage == Stage.KNOCKOUT
    assert [(f.home_id, f.away_id) for f in bracket] == [
        (seeds[0], seeds[3]),
        (seeds[1], seeds[2]),
    ]
    assert all(f.round == 4 for f in bracket)
    assert [f.to_dict() for f in tournament.get_fixtures(Stage.LEAGUE)] == league_fixtures
    assert tournament.active_fixtures() == bracket

    with pytest.raises(TournamentStateException):
        tournament.advance_to_knockout()

    play_knockout_round_home_wins(tournament)
    (final,) = tournament.advance_knockout_round()
    play_knockout_round_home_wins(tournament)
    tournament.advance_knockout_round()

    assert tournament.status == TournamentStatus.FINISHED
    assert tournament.winner_id == seeds[0]


def test_hybrid_knockout_results_leave_table_alone(make_tournament):
    tournament = make_tournament(4, TournamentFormat.HYBRID)
    tournament.start()
    play_league_by_registration(tournament)
    table_before = [row.to_dict() for row in tournament.get_standings()]

    tournament.advance_to_knockout()
    for fixture in tournament.active_fixtures():
        tournament.record_result(fixture.id, 0, 9)

    assert [row.to_dict() for row in tournament.get_standings()] == table_before


def test_league_results_are_locked_after_knockout_starts(make_tournament):
    tournament = make_tournament(4, TournamentFormat.HYBRID)
    tournament.start()
    play_league_by_registration(tournament)
    league_fixture = tournament.get_fixtures(Stage.LEAGUE)[0]
    table_before = [row.to_dict() for row in tournament.get_standings()]

    tournament.advance_to_knockout()

    with pytest.raises(TournamentStateException):
        tournament.record_result(league_fixture.id, 0, 9)
    with pytest.raises(TournamentStateException):
        tournament.clear_result(league_fixture.id)

    assert tournament.get_fixture(league_fixture.id) == league_fixture
    assert [row.to_dict() for row in tournament.get_standings()] == table_before


def test_hybrid_with_fewer_participants_than_qualifiers(make_tournament):
    tournament = make_tournament(3, TournamentFormat.HYBRID)
    tournament.start()
    play_league_by_registration(tournament)

    bracket = tournament.advance_to_knockout()

    assert len(bracket) == 2
    assert sum(1 for f in bracket if f.is_bye) == 1


def test_hybrid_custom_qualifier_count(make_tournament):
    tournament = make_tournament(6, TournamentFormat.HYBRID, knockout_qualifiers=2)
    tournament.start()
    play_league_by_registration(tournament)

    (final,) = tournament.advance_to_knockout()

    assert final.round == 2


def test_advance_to_knockout_only_for_hybrid(make_tournament):
    tournament = make_tournament(4)
    with pytest.raises(TournamentStateException):
        tournament.advance_to_knockout()

    tournament.start()
    with pytest.raises(TournamentStateException):
        tournament.advance_to_knockout()


# ========== Lifecycle helpers ==========


def test_reset_returns_to_fresh_setup(make_tournament):
    tournament = make_tournament(4, TournamentFormat.KNOCKOUT)
    tournament.start()

    tournament.reset()

    assert tournament.status == TournamentStatus.SETUP
    assert tournament.participants == []
    assert tournament.get_fixtures() == []
    assert tournament.format == TournamentFormat.LEAGUE
    tournament.add_participant("Again", "Team")


def test_serialization_round_trip(make_tournament):
    tournament = make_tournament(5, TournamentFormat.HYBRID, double_leg=True)
    tournament.start()
    play_league_by_registration(tournament)
    tournament.advance_to_knockout()

    restored = Tournament.from_dict(tournament.to_dict())

    assert restored.to_dict() == tournament.to_dict()
    assert restored.current_stage == Stage.KNOCKOUT
    assert [r.to_dict() for r in restored.get_standings()] == [
        r.to_dict() for r in tournament.get_standings()
    ]
    play_knockout_round_home_wins(restored)
    assert len(restored.advance_knockout_round()) == 1


def test_from_dict_rejects_duplicate_participant_ids(make_tournament):
    data = make_tournament(2).to_dict()
    data["participants"].append(dict(data["participants"][0]))

    with pytest.raises(DuplicateParticipantException):
        Tournament.from_dict(data)
