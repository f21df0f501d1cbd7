"""Tests for rookie validation, measurable normalization and scoring."""

import pytest

from src.rookie_engine.models import MeasurableRange, Rookie
from src.rookie_engine.normalizer import compute_measurable_ranges, normalize_value
from src.rookie_engine.scoring import (
    RookieValidationError,
    compute_rookie_score,
    process_rookie_dataset,
    validate_dataset,
    validate_rookie,
)


# ── Helpers ──────────────────────────────────────────────────────────


def _make_record(rid=1, name=None, year=2025, position="WR", grade=8, **overrides):
    record = {
        "id": rid,
        "name": name or f"Rookie {rid}",
        "year": year,
        "position": position,
        "school": "State",
        "heightIn": None,
        "weightLb": None,
        "forty": None,
        "breakoutAge": None,
        "iq": grade,
        "routeRunning": grade,
        "vision": grade,
        "ballSkills": grade,
    }
    record.update(overrides)
    return record


def _fast_wr(rid=1, **overrides):
    return _make_record(
        rid=rid, heightIn=76, weightLb=220, forty=4.3, breakoutAge=19, **overrides
    )


def _slow_wr(rid=2, **overrides):
    return _make_record(
        rid=rid, grade=9, heightIn=70, weightLb=180, forty=4.6, breakoutAge=21, **overrides
    )


# ── Normalization ────────────────────────────────────────────────────


class TestNormalizeValue:
    def test_midpoint(self):
        assert normalize_value(73, 70, 76) == pytest.approx(50.0)

    def test_bounds(self):
        assert normalize_value(70, 70, 76) == 0.0
        assert normalize_value(76, 70, 76) == 100.0

    def test_lower_is_better_is_inverted(self):
        assert normalize_value(4.3, 4.3, 4.6, lower_is_better=True) == 100.0
        assert normalize_value(4.6, 4.3, 4.6, lower_is_better=True) == 0.0

    def test_degenerate_range_is_neutral(self):
        assert normalize_value(72, 72, 72) == 50.0

    def test_missing_range_is_neutral(self):
        assert normalize_value(72, None, None) == 50.0

    def test_clamped_outside_range(self):
        assert normalize_value(80, 70, 76) == 100.0
        assert normalize_value(60, 70, 76) == 0.0


class TestMeasurableRanges:
    def test_ranges_per_position(self):
        rookies = [
            Rookie.from_dict(_fast_wr()),
            Rookie.from_dict(_slow_wr()),
            Rookie.from_dict(_make_record(rid=3, position="RB", heightIn=68)),
        ]
        ranges = compute_measurable_ranges(rookies)

        assert ranges["WR"]["height_in"] == MeasurableRange(70, 76)
        assert ranges["WR"]["forty"] == MeasurableRange(4.3, 4.6)
        assert ranges["RB"]["height_in"] == MeasurableRange(68, 68)
        assert ranges["RB"]["height_in"].is_degenerate

    def test_missing_values_ignored(self):
        rookies = [
            Rookie.from_dict(_fast_wr()),
            Rookie.from_dict(_make_record(rid=2)),
        ]
        ranges = compute_measurable_ranges(rookies)
        assert ranges["WR"]["height_in"] == MeasurableRange(76, 76)

    def test_empty_position(self):
        ranges = compute_measurable_ranges([Rookie.from_dict(_fast_wr())])
        assert ranges["TE"]["forty"] == MeasurableRange()
        assert ranges["TE"]["forty"].is_degenerate

    def test_ranges_span_draft_classes(self):
        rookies = [
            Rookie.from_dict(_fast_wr(year=2024)),
            Rookie.from_dict(_slow_wr(year=2025)),
        ]
        ranges = compute_measurable_ranges(rookies)
        assert ranges["WR"]["weight_lb"] == MeasurableRange(180, 220)


# ── Validation ───────────────────────────────────────────────────────


class TestValidation:
    def test_valid_record(self):
        validate_rookie(_make_record())

    def test_measurables_optional(self):
        validate_rookie(_make_record(heightIn=None, forty=None))

    def test_missing_trait(self):
        record = _make_record(name="Test Player")
        del record["iq"]
        with pytest.raises(RookieValidationError, match='Missing required field "iq"'):
            validate_rookie(record)

    def test_missing_trait_names_rookie(self):
        record = _make_record(name="Test Player", iq=None)
        with pytest.raises(RookieValidationError, match="Test Player"):
            validate_rookie(record)

    def test_invalid_position(self):
        with pytest.raises(RookieValidationError, match='Invalid position "K"'):
            validate_rookie(_make_record(position="K"))

    @pytest.mark.parametrize("grade", [-1, 10.5, 11, "great"])
    def test_trait_out_of_range(self, grade):
        with pytest.raises(RookieValidationError, match='Trait "vision" must be 0-10'):
            validate_rookie(_make_record(vision=grade))

    def test_trait_bounds_inclusive(self):
        validate_rookie(_make_record(grade=0))
        validate_rookie(_make_record(grade=10))

    def test_dataset_fails_on_any_invalid_record(self):
        records = [_make_record(rid=1), _make_record(rid=2, position="LB")]
        with pytest.raises(RookieValidationError):
            validate_dataset(records)


# ── Scoring ──────────────────────────────────────────────────────────


class TestRookieScore:
    def test_traits_only_rookie(self):
        scored = process_rookie_dataset([_make_record(grade=8)])
        rookie = scored[0]

        assert rookie.trait_score == 80.0
        assert rookie.measurables_score == 50.0
        # 0.65 * 80 + 0.35 * 50
        assert rookie.overall == 69.5

    def test_qb_weights(self):
        scored = process_rookie_dataset([_make_record(position="QB", grade=10)])
        # 0.80 * 100 + 0.20 * 50
        assert scored[0].overall == 90.0

    def test_rb_weights(self):
        scored = process_rookie_dataset([_make_record(position="RB", grade=6)])
        # 0.55 * 60 + 0.45 * 50
        assert scored[0].overall == pytest.approx(55.5)

    def test_measurables_relative_to_position(self):
        scored = process_rookie_dataset([_fast_wr(), _slow_wr()])
        by_id = {s.rookie.id: s for s in scored}

        assert by_id[1].measurables_score == 100.0
        assert by_id[1].overall == pytest.approx(87.0)
        assert by_id[2].measurables_score == 0.0
        assert by_id[2].overall == pytest.approx(58.5)

    def test_breakdown(self):
        scored = process_rookie_dataset([_fast_wr(), _slow_wr()])
        fast = next(s for s in scored if s.rookie.id == 1)

        assert fast.breakdown["iq"] == 80
        assert fast.breakdown["ballSkills"] == 80
        assert fast.breakdown["height"] == 100
        assert fast.breakdown["forty"] == 100
        assert fast.breakdown["breakoutAge"] == 100

    def test_missing_measurable_in_breakdown(self):
        scored = process_rookie_dataset([_fast_wr(), _make_record(rid=2)])
        plain = next(s for s in scored if s.rookie.id == 2)
        assert plain.breakdown["height"] is None
        assert plain.measurables_score == 50.0

    def test_partial_measurables_averaged(self):
        records = [
            _fast_wr(),
            _slow_wr(),
            _make_record(rid=3, heightIn=73, forty=4.6),
        ]
        scored = {s.rookie.id: s for s in process_rookie_dataset(records)}
        # height 50, forty 0
        assert scored[3].measurables_score == 25.0

    def test_single_rookie_measurables_are_neutral(self):
        scored = process_rookie_dataset([_fast_wr()])
        assert scored[0].measurables_score == 50.0

    def test_scores_bounded(self):
        records = [_fast_wr(), _slow_wr(), _make_record(rid=3, grade=0, forty=5.0)]
        for scored in process_rookie_dataset(records):
            assert 0 <= scored.overall <= 100
            assert 0 <= scored.trait_score <= 100
            assert 0 <= scored.measurables_score <= 100

    def test_compute_rookie_score_with_explicit_ranges(self):
        rookie = Rookie.from_dict(_make_record(heightIn=73))
        ranges = {"WR": {"height_in": MeasurableRange(70, 76)}}
        scored = compute_rookie_score(rookie, ranges)
        assert scored.measurables_score == 50.0


class TestProcessDataset:
    def test_sorted_by_overall(self):
        records = [_make_record(rid=1, grade=5), _make_record(rid=2, grade=9)]
        scored = process_rookie_dataset(records)
        assert [s.rookie.id for s in scored] == [2, 1]

    def test_ties_keep_input_order(self):
        records = [_make_record(rid=i, grade=7) for i in (3, 1, 2)]
        scored = process_rookie_dataset(records)
        assert [s.rookie.id for s in scored] == [3, 1, 2]

    def test_invalid_record_aborts_dataset(self):
        records = [_make_record(rid=1), _make_record(rid=2, ballSkills=12)]
        with pytest.raises(RookieValidationError):
            process_rookie_dataset(records)

    def test_nan_measurables_treated_as_missing(self):
        scored = process_rookie_dataset([_make_record(heightIn=float("nan"))])
        assert scored[0].breakdown["height"] is None

    def test_empty_dataset(self):
        assert process_rookie_dataset([]) == []

    def test_deterministic(self):
        records = [_fast_wr(), _slow_wr(), _make_record(rid=3, grade=6)]
        assert process_rookie_dataset(records) == process_rookie_dataset(records)
