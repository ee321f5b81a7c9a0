"""
Tests for converting schedules and stats to and from their record form.

The record form is what hosts persist or send to clients, so key names and
the omission of "winner" for unplayed matches are part of the contract.
"""

import json

import pytest

from app_types import MatchOutcome, PlayerStat
from exceptions import ValidationError
from result_ledger import ResultLedger
from schedule_codec import (
    parse_clear_command,
    parse_winner_command,
    schedule_from_json,
    schedule_from_records,
    schedule_to_json,
    schedule_to_records,
    stats_from_records,
    stats_to_records,
)


class TestScheduleRecords:
    """Tests for the schedule record shape."""

    def test_unplayed_match_has_no_winner_key(self, single_match_schedule):
        """Unplayed matches serialise without a winner key."""
        records = schedule_to_records(single_match_schedule)

        assert records == [
            {
                "round": 1,
                "matches": [{"team1": ["A", "B"], "team2": ["C", "D"], "court": 1}],
                "sitOut": ["E"],
                "gameCount": {"A": 1, "B": 1, "C": 1, "D": 1, "E": 0},
            }
        ]

    def test_decided_match_carries_winner(self, single_match_schedule):
        """A decided match records its winning team."""
        ledger = ResultLedger(single_match_schedule)
        ledger.record_winner(0, 0, 2)

        records = schedule_to_records(ledger.schedule)

        assert records[0]["matches"][0]["winner"] == 2

    def test_records_rebuild_the_schedule(self, two_round_schedule):
        """Records convert back into an equal schedule, outcomes included."""
        ledger = ResultLedger(two_round_schedule)
        ledger.record_winner(0, 1, 1)

        rebuilt = schedule_from_records(schedule_to_records(ledger.schedule))

        assert rebuilt == ledger.schedule
        assert rebuilt[0].matches[1].outcome is MatchOutcome.TEAM_1_WON

    def test_json_text_uses_record_keys(self, single_match_schedule):
        """JSON text uses the camelCase record keys."""
        text = schedule_to_json(single_match_schedule)

        assert json.loads(text)[0]["sitOut"] == ["E"]
        assert schedule_from_json(text) == single_match_schedule

    @pytest.mark.parametrize(
        "records",
        [
            {"round": 1},
            [{"round": "1", "matches": [], "sitOut": [], "gameCount": {}}],
            [{"round": 1, "matches": "nope", "sitOut": [], "gameCount": {}}],
            [{"round": 1, "matches": [{"team1": ["A"], "team2": ["C", "D"], "court": 1}]}],
            [{"round": 1, "matches": [{"team1": ["A", "B"], "team2": ["B", "D"], "court": 1}]}],
            [{"round": 1, "matches": [{"team1": ["A", "B"], "team2": ["C", "D"], "court": 1, "winner": 3}]}],
            [{"round": 1, "matches": [], "sitOut": "E", "gameCount": {}}],
            [{"round": 1, "matches": [], "sitOut": [], "gameCount": {"A": "1"}}],
        ],
    )
    def test_malformed_records_are_rejected(self, records):
        """Records with missing fields or wrong types should be rejected."""
        with pytest.raises(ValidationError):
            schedule_from_records(records)

    @pytest.mark.parametrize(
        "matches, sit_out",
        [
            # Same player on two courts
            (
                [
                    {"team1": ["A", "B"], "team2": ["C", "D"], "court": 1},
                    {"team1": ["A", "E"], "team2": ["F", "G"], "court": 2},
                ],
                [],
            ),
            # Playing and sitting out in the same round
            ([{"team1": ["A", "B"], "team2": ["C", "D"], "court": 1}], ["E", "A"]),
            # Repeated court number
            (
                [
                    {"team1": ["A", "B"], "team2": ["C", "D"], "court": 1},
                    {"team1": ["E", "F"], "team2": ["G", "H"], "court": 1},
                ],
                [],
            ),
        ],
    )
    def test_inconsistent_rounds_are_rejected(self, matches, sit_out):
        """Each player appears once per round and each court hosts one match."""
        records = [{"round": 1, "matches": matches, "sitOut": sit_out, "gameCount": {}}]
        with pytest.raises(ValidationError):
            schedule_from_records(records)

    def test_invalid_json_is_rejected(self):
        """Unparseable text raises ValidationError."""
        with pytest.raises(ValidationError):
            schedule_from_json("{not json")


class TestStatsRecords:
    """Tests for the stats record shape."""

    def test_stats_round_trip(self):
        """Stats convert to plain dicts and back."""
        stats = {"A": PlayerStat(wins=2, losses=1, games=3), "B": PlayerStat()}

        records = stats_to_records(stats)

        assert records == {
            "A": {"wins": 2, "losses": 1, "games": 3},
            "B": {"wins": 0, "losses": 0, "games": 0},
        }
        assert stats_from_records(records) == stats

    @pytest.mark.parametrize(
        "records",
        [
            [],
            {"A": {"wins": 1, "losses": 1, "games": 3}},
            {"A": {"wins": -1, "losses": 1, "games": 0}},
            {"A": {"wins": 1, "losses": 0}},
            {"A": 5},
        ],
    )
    def test_inconsistent_stats_are_rejected(self, records):
        """Bad counters should be refused."""
        with pytest.raises(ValidationError):
            stats_from_records(records)


class TestCommands:
    """Tests for result command payloads."""

    def test_parse_winner_command(self):
        """A winner payload parses into indices and winning team."""
        payload = {"roundIndex": 2, "matchIndex": 1, "winningTeam": 2}
        assert parse_winner_command(payload) == (2, 1, 2)

    def test_parse_clear_command(self):
        """A clear payload parses into indices."""
        assert parse_clear_command({"roundIndex": 0, "matchIndex": 3}) == (0, 3)

    @pytest.mark.parametrize(
        "payload",
        [
            {"roundIndex": 0, "matchIndex": 0, "winningTeam": 0},
            {"roundIndex": 0, "matchIndex": 0},
            {"roundIndex": "0", "matchIndex": 0, "winningTeam": 1},
            None,
        ],
    )
    def test_bad_winner_command_is_rejected(self, payload):
        """Invalid winner payloads raise ValidationError."""
        with pytest.raises(ValidationError):
            parse_winner_command(payload)

    def test_bad_clear_command_is_rejected(self):
        """A clear payload missing an index raises ValidationError."""
        with pytest.raises(ValidationError):
            parse_clear_command({"roundIndex": 0})
