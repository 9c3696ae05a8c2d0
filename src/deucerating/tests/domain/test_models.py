import math
import pytest

from deucerating.domain.models import (
    BASE_RATING,
    MAX_RATING_DEVIATION,
    Sport,
    EstimateSource,
    ConfidenceTier,
    RatingEstimate,
    BenchmarkInput,
    ConversionOutcome,
    OutcomeStatus,
    clamp_rd,
    round_half_up,
)
from deucerating.domain.exceptions import UnsupportedSportError, BenchmarkValidationError


class TestSport:
    """Test Sport parsing."""

    @pytest.mark.parametrize("raw,expected", [
        ("tennis", Sport.TENNIS),
        ("PICKLEBALL", Sport.PICKLEBALL),
        ("  Padel ", Sport.PADEL),
        (Sport.TENNIS, Sport.TENNIS),
    ])
    def test_parse_accepts_names_and_members(self, raw, expected):
        assert Sport.parse(raw) is expected

    @pytest.mark.parametrize("raw", ["squash", "", None, 3])
    def test_parse_rejects_unknown(self, raw):
        with pytest.raises(UnsupportedSportError) as exc_info:
            Sport.parse(raw)
        assert exc_info.value.error_code == "UNSUPPORTED_SPORT"
        assert exc_info.value.recoverable is True


class TestConfidenceTier:
    """Test the display ordering of confidence tiers."""

    def test_total_order(self):
        assert ConfidenceTier.LOW < ConfidenceTier.MEDIUM < ConfidenceTier.MEDIUM_HIGH < ConfidenceTier.HIGH
        assert ConfidenceTier.HIGH >= ConfidenceTier.HIGH
        assert sorted(ConfidenceTier, reverse=True)[0] is ConfidenceTier.HIGH

    def test_wire_values(self):
        assert ConfidenceTier.MEDIUM_HIGH.value == "medium-high"

    def test_comparison_with_other_types(self):
        with pytest.raises(TypeError):
            ConfidenceTier.LOW < 1


class TestRounding:

    @pytest.mark.parametrize("value,expected", [
        (2.5, 3), (2.4999, 2), (1499.5, 1500), (0.0, 0), (3100.0000000002, 3100),
    ])
    def test_round_half_up(self, value, expected):
        assert round_half_up(value) == expected

    @pytest.mark.parametrize("rd,expected", [
        (-5, 0), (0, 0), (65.34, 65), (35.99, 36), (350.4, 350), (900, 350),
    ])
    def test_clamp_rd(self, rd, expected):
        assert clamp_rd(rd) == expected

    def test_clamp_rd_custom_cap(self):
        assert clamp_rd(300, upper=200) == 200


class TestRatingEstimate:
    """Test RatingEstimate construction and helpers."""

    def test_default(self):
        est = RatingEstimate.default()
        assert est.source is EstimateSource.DEFAULT
        assert est.singles == est.doubles == BASE_RATING == 1500
        assert est.rating_deviation == MAX_RATING_DEVIATION
        assert est.confidence is ConfidenceTier.LOW

    def test_error_fallback_records_reason(self):
        est = RatingEstimate.error_fallback("boom")
        assert est.source is EstimateSource.ERROR_FALLBACK
        assert est.singles == est.doubles == 1500
        assert est.detail["reason"] == "boom"

    def test_post_init_coerces_and_clamps(self):
        est = RatingEstimate(
            source=EstimateSource.QUESTIONNAIRE,
            singles=1800.0,
            doubles=1750.0,
            rating_deviation=512.7,
            confidence=ConfidenceTier.MEDIUM,
        )
        assert isinstance(est.singles, int) and est.singles == 1800
        assert isinstance(est.doubles, int)
        assert est.rating_deviation == 350

    def test_is_immutable(self):
        est = RatingEstimate.default()
        with pytest.raises(AttributeError):
            est.singles = 2000
        with pytest.raises(TypeError):
            est.detail["baseRating"] = 0

    def test_detail_is_copied(self):
        detail = {"a": 1}
        est = RatingEstimate(EstimateSource.DEFAULT, 1500, 1500, 350, ConfidenceTier.LOW, detail)
        detail["a"] = 2
        assert est.detail["a"] == 1

    def test_with_detail_returns_new_instance(self):
        est = RatingEstimate.default()
        extended = est.with_detail(benchmarkFallback="bad value")
        assert extended is not est
        assert extended.detail["benchmarkFallback"] == "bad value"
        assert "benchmarkFallback" not in est.detail
        assert extended.singles == est.singles

    def test_to_dict_uses_wire_names(self):
        data = RatingEstimate.default().to_dict()
        assert data == {
            "source": "default",
            "singles": 1500,
            "doubles": 1500,
            "ratingDeviation": 350,
            "confidence": "low",
            "detail": {"baseRating": 1500},
        }

    def test_equal_inputs_give_equal_dicts(self):
        assert RatingEstimate.default().to_dict() == RatingEstimate.default().to_dict()


class TestBenchmarkInput:
    """Test extraction of DUPR fields from answers."""

    def test_from_answers_parses_strings(self):
        bench = BenchmarkInput.from_answers({
            "dupr_singles": "4.2",
            "dupr_doubles": 3.9,
            "dupr_singles_reliability": "35",
            "dupr_doubles_reliability": 78.9,
        })
        assert bench.singles == pytest.approx(4.2)
        assert bench.doubles == pytest.approx(3.9)
        assert bench.singles_reliability == 35
        assert bench.doubles_reliability == 78
        assert bench.has_both

    @pytest.mark.parametrize("raw", [None, "", "   ", "n/a", True, [], "nan", "inf"])
    def test_unusable_values_count_as_absent(self, raw):
        bench = BenchmarkInput.from_answers({"dupr_singles": raw})
        assert bench.singles is None
        assert bench.is_empty

    def test_out_of_range_values_are_kept(self):
        bench = BenchmarkInput.from_answers({"dupr_doubles": "9.5"})
        assert bench.doubles == 9.5
        assert bench.has_doubles and not bench.has_singles

    @pytest.mark.parametrize("raw, expected", [
        ("100.9", 101),
        ("-0.5", -1),
        (100.0, 100),
        ("0.4", 0),
        ("99.99", 99),
    ])
    def test_fractional_reliability_never_truncates_into_range(self, raw, expected):
        bench = BenchmarkInput.from_answers({"dupr_doubles": 4, "dupr_doubles_reliability": raw})
        assert bench.doubles_reliability == expected

    def test_non_finite_reliability_is_dropped(self):
        bench = BenchmarkInput.from_answers({"dupr_doubles": 4, "dupr_doubles_reliability": math.inf})
        assert bench.doubles_reliability is None


class TestConversionOutcome:

    def test_ok(self):
        est = RatingEstimate.default()
        outcome = ConversionOutcome.ok(est)
        assert outcome.is_ok
        assert outcome.estimate is est
        assert outcome.error is None

    def test_failed(self):
        err = BenchmarkValidationError("dupr_singles", 9.0, 2.0, 8.0)
        outcome = ConversionOutcome.failed(err)
        assert outcome.status is OutcomeStatus.FAILED
        assert not outcome.is_ok
        assert outcome.error is err

    def test_not_applicable(self):
        outcome = ConversionOutcome.not_applicable()
        assert outcome.status is OutcomeStatus.NOT_APPLICABLE
        assert outcome.estimate is None
