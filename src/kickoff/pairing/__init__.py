"""Fixture generators: round robin leagues and knockout brackets."""

from kickoff.pairing.knockout import (
    bracket_size,
    count_byes,
    generate_knockout_bracket,
    seed_pairings,
)
from kickoff.pairing.round_robin import (
    RoundRobin,
    create_round_robin,
    generate_league_fixtures,
)

__all__ = [
    "RoundRobin",
    "create_round_robin",
    "generate_league_fixtures",
    "generate_knockout_bracket",
    "bracket_size",
    "count_byes",
    "seed_pairings",
]
