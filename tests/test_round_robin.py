from collections import Counter
from itertools import combinations

import pytest

from kickoff.constants import BYE_ID
from kickoff.exceptions import InvalidParticipantCountException
from kickoff.models.enums import FixtureStatus, Stage
from kickoff.pairing import RoundRobin, create_round_robin, generate_league_fixtures


@pytest.mark.parametrize("count", [2, 3, 4, 5, 6, 7, 10])
def test_single_leg_every_pair_meets_once(make_participants, count):
    participants = make_participants(count)
    fixtures = generate_league_fixtures(participants)

    assert len(fixtures) == count * (count - 1) // 2

    pairs = Counter(frozenset((f.home_id, f.away_id)) for f in fixtures)
    expected = {frozenset(pair) for pair in combinations([p.id for p in participants], 2)}
    assert set(pairs) == expected
    assert all(n == 1 for n in pairs.values())

    appearances = Counter()
    for fixture in fixtures:
        appearances[fixture.home_id] += 1
        appearances[fixture.away_id] += 1
    assert all(appearances[p.id] == count - 1 for p in participants)


@pytest.mark.parametrize("count", [2, 3, 4, 5, 8, 9])
def test_rounds_are_contiguous_from_one(make_participants, count):
    fixtures = generate_league_fixtures(make_participants(count))
    rounds = sorted({f.round for f in fixtures})
    expected_rounds = count - 1 if count % 2 == 0 else count
    assert rounds == list(range(1, expected_rounds + 1))


@pytest.mark.parametrize("count", [3, 5, 7])
def test_odd_count_has_one_bye_per_round(make_participants, count):
    participants = make_participants(count)
    schedule = create_round_robin(participants)

    assert schedule.has_bye
    sitting_out = []
    for round_number in range(1, schedule.number_of_rounds + 1):
        pairings, bye_id = schedule.get_round_pairings(round_number)
        assert bye_id is not None
        assert len(pairings) == (count - 1) // 2
        playing = {pid for pair in pairings for pid in pair}
        assert bye_id not in playing
        sitting_out.append(bye_id)

    assert sorted(sitting_out) == sorted(p.id for p in participants)


def test_no_fixture_uses_the_bye_slot(make_participants):
    fixtures = generate_league_fixtures(make_participants(5))
    assert not any(f.is_bye for f in fixtures)
    assert all(BYE_ID not in (f.home_id, f.away_id) for f in fixtures)


def test_three_player_schedule(make_participants):
    a, b, c = make_participants(3)
    fixtures = generate_league_fixtures([a, b, c])

    assert [(f.round, f.home_id, f.away_id) for f in fixtures] == [
        (1, b.id, c.id),
        (2, a.id, c.id),
        (3, a.id, b.id),
    ]


def test_four_player_schedule_rotation(make_participants):
    a, b, c, d = make_participants(4)
    schedule = RoundRobin([a.id, b.id, c.id, d.id])

    assert schedule.get_round_pairings(1) == ([(a.id, d.id), (b.id, c.id)], None)
    assert schedule.get_round_pairings(2) == ([(a.id, c.id), (d.id, b.id)], None)
    assert schedule.get_round_pairings(3) == ([(a.id, b.id), (c.id, d.id)], None)


def test_round_out_of_range(make_participants):
    schedule = create_round_robin(make_participants(4))
    with pytest.raises(ValueError):
        schedule.get_round_pairings(0)
    with pytest.raises(ValueError):
        schedule.get_round_pairings(4)


def test_generated_fixtures_are_scheduled_league_fixtures(make_participants):
    for fixture in generate_league_fixtures(make_participants(4), double_leg=True):
        assert fixture.stage == Stage.LEAGUE
        assert fixture.status == FixtureStatus.SCHEDULED
        assert fixture.home_score is None and fixture.away_score is None
        assert not fixture.is_manual


@pytest.mark.parametrize("count", [2, 3, 4, 6])
def test_double_leg_mirrors_first_leg(make_participants, count):
    participants = make_participants(count)
    fixtures = generate_league_fixtures(participants, double_leg=True)
    single = count * (count - 1) // 2

    assert len(fixtures) == 2 * single
    first_leg, second_leg = fixtures[:single], fixtures[single:]

    assert Counter((f.home_id, f.away_id) for f in second_leg) == Counter(
        (f.away_id, f.home_id) for f in first_leg
    )
    assert min(f.round for f in second_leg) > max(f.round for f in first_leg)
    assert len({f.id for f in fixtures}) == len(fixtures)


def test_double_leg_round_offset(make_participants):
    participants = make_participants(3)
    fixtures = generate_league_fixtures(participants, double_leg=True)
    # three participants play in a table of four, so three rounds per leg
    assert [f.round for f in fixtures] == [1, 2, 3, 4, 5, 6]


@pytest.mark.parametrize("count", [0, 1])
def test_too_few_participants(make_participants, count):
    with pytest.raises(InvalidParticipantCountException):
        generate_league_fixtures(make_participants(count))


def test_input_is_not_mutated(make_participants):
    participants = make_participants(5)
    snapshot = list(participants)
    generate_league_fixtures(participants, double_leg=True)
    assert participants == snapshot
