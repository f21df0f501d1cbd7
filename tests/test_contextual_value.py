"""Tests for team strategy and positional need adjustments."""

import pytest

from src.league_settings.settings import LeagueSettings, TeamContext
from src.value_engine.models import Player
from src.value_engine.multipliers import get_needs_multiplier, get_strategy_multiplier


def _make_player(position="WR", age=22, value=5000, pid=9001):
    return Player(
        id=pid,
        name=f"Context {pid}",
        team="TST",
        position=position,
        age=age,
        dynasty_value=value,
        contract_years=2,
        rankings={"DLF": 10, "UTH": 10, "DynastyNerds": 10, "FantasyPros": 10},
    )


def _make_pick():
    return Player(id=7001, name="2027 Pick 1.04", position="PICK", dynasty_value=6000)


def _settings(team_a="neutral", team_b="neutral", a_needs=None, b_needs=None):
    settings = LeagueSettings(
        team_context=TeamContext(team_a_strategy=team_a, team_b_strategy=team_b)
    )
    if a_needs:
        settings.team_a_needs.update(a_needs)
    if b_needs:
        settings.team_b_needs.update(b_needs)
    return settings


class TestStrategyMultiplier:
    @pytest.mark.parametrize("position,age,expected", [
        ("RB", 28, 1.0),
        ("WR", 22, 0.92),
        ("WR", 31, 0.95),
        ("QB", 31, 1.05),
        ("WR", 26, 1.05),
    ])
    def test_contender(self, position, age, expected):
        player = _make_player(position=position, age=age)
        assert get_strategy_multiplier(player, "contender") == expected

    @pytest.mark.parametrize("position,age,expected", [
        ("WR", 24, 1.12),
        ("RB", 26, 1.05),
        ("RB", 29, 0.75),
        ("WR", 30, 0.85),
        ("WR", 28, 0.95),
    ])
    def test_rebuilder(self, position, age, expected):
        player = _make_player(position=position, age=age)
        assert get_strategy_multiplier(player, "rebuilder") == expected

    def test_picks(self):
        assert get_strategy_multiplier(_make_pick(), "rebuilder") == 1.15
        assert get_strategy_multiplier(_make_pick(), "contender") == 0.9

    def test_neutral_and_unknown_strategies(self):
        player = _make_player()
        assert get_strategy_multiplier(player, "neutral") == 1.0
        assert get_strategy_multiplier(player, "tanking") == 1.0
        assert get_strategy_multiplier(player, None) == 1.0

    def test_unknown_position(self):
        assert get_strategy_multiplier(_make_player(position="LB"), "rebuilder") == 1.0

    def test_missing_age(self):
        assert get_strategy_multiplier(_make_player(age=None), "contender") == 1.0

    def test_risk_tolerance_has_no_effect(self):
        player = _make_player(age=24)
        assert (
            get_strategy_multiplier(player, "rebuilder", 0.0)
            == get_strategy_multiplier(player, "rebuilder", 1.0)
        )


class TestNeedsMultiplier:
    def test_desperate_need(self):
        assert get_needs_multiplier(_make_player(), {"wr": 1.0}) == pytest.approx(1.2)

    def test_partial_need(self):
        assert get_needs_multiplier(_make_player(), {"wr": 0.5}) == pytest.approx(1.1)

    def test_no_need(self):
        assert get_needs_multiplier(_make_player(), {"wr": 0}) == 1.0

    def test_position_not_listed(self):
        assert get_needs_multiplier(_make_player(position="K"), {"wr": 1.0}) == 1.0

    def test_empty_needs(self):
        assert get_needs_multiplier(_make_player(), {}) == 1.0
        assert get_needs_multiplier(_make_player(), None) == 1.0

    def test_picks_ignore_needs(self):
        assert get_needs_multiplier(_make_pick(), {"wr": 1.0}) == 1.0

    def test_out_of_range_need_is_clamped(self):
        assert get_needs_multiplier(_make_player(), {"wr": 3.0}) == pytest.approx(1.2)
        assert get_needs_multiplier(_make_player(), {"wr": -1.0}) == 1.0


class TestContextualValue:
    def test_neutral_context_matches_breakdown(self, engine):
        player = _make_player()
        settings = _settings()
        base = engine.get_player_value_breakdown(player, settings)
        contextual = engine.get_contextual_value(player, settings, "A")
        assert contextual.strategy_adj == 0
        assert contextual.needs_adj == 0
        assert contextual.total == base.total

    def test_rebuilder_pays_for_youth(self, engine):
        player = _make_player(age=22)
        settings = _settings(team_a="rebuilder")
        base = engine.get_player_value_breakdown(player, settings)
        contextual = engine.get_contextual_value(player, settings, "A")
        assert contextual.strategy_adj == 600
        assert contextual.total == base.total + 600

    def test_contender_discounts_youth(self, engine):
        contextual = engine.get_contextual_value(
            _make_player(age=22), _settings(team_a="contender"), "A"
        )
        assert contextual.strategy_adj == -400

    def test_needs_adjustment(self, engine):
        settings = _settings(a_needs={"wr": 1.0})
        contextual = engine.get_contextual_value(_make_player(), settings, "A")
        assert contextual.needs_adj == 1000

    def test_sides_use_their_own_context(self, engine):
        player = _make_player(age=22)
        settings = _settings(team_a="rebuilder", team_b="contender", b_needs={"wr": 0.5})

        side_a = engine.get_contextual_value(player, settings, "A")
        side_b = engine.get_contextual_value(player, settings, "B")

        assert side_a.strategy_adj == 600
        assert side_a.needs_adj == 0
        assert side_b.strategy_adj == -400
        assert side_b.needs_adj == 500

    def test_unknown_side_treated_as_b(self, engine):
        player = _make_player(age=22)
        settings = _settings(team_a="rebuilder", team_b="contender")
        assert (
            engine.get_contextual_value(player, settings, "X")
            == engine.get_contextual_value(player, settings, "B")
        )

    def test_total_includes_all_adjustments(self, engine, pool):
        settings = _settings(team_a="rebuilder", a_needs={"rb": 0.7, "wr": 0.3})
        for player in pool:
            b = engine.get_contextual_value(player, settings, "A")
            assert b.total == (
                b.base + b.scarcity_adj + b.age_adj + b.scoring_adj + b.format_adj
                + b.contract_adj + b.strategy_adj + b.needs_adj
            )

    def test_rebuilder_pick(self, engine):
        settings = _settings(team_a="rebuilder")
        pick = _make_pick()
        base = engine.get_player_value_breakdown(pick, settings)
        contextual = engine.get_contextual_value(pick, settings, "A")
        # strategy applies to the unadjusted pick value
        assert contextual.strategy_adj == 900
        assert contextual.total == base.total + 900


class TestSideValues:
    def test_side_value_is_sum_of_totals(self, engine, pool, settings):
        players = [pool.get(1000), pool.get(2000), pool.get(3000)]
        expected = sum(engine.get_player_value_breakdown(p, settings).total for p in players)
        assert engine.calculate_side_value(players, settings) == expected

    def test_empty_side(self, engine, settings):
        assert engine.calculate_side_value([], settings) == 0
        assert engine.calculate_side_value_with_context([], settings, "A") == 0

    def test_side_value_with_context(self, engine):
        players = [_make_player(age=22), _make_player(age=30, pid=9002)]
        settings = _settings(team_a="rebuilder")
        expected = sum(engine.get_contextual_value(p, settings, "A").total for p in players)
        assert engine.calculate_side_value_with_context(players, settings, "A") == expected
