import pytest

from deucerating.benchmark import BenchmarkConverter, adjust_rd, band_offset
from deucerating.benchmark.converter import (
    DOUBLES_TO_SINGLES_OFFSETS,
    SINGLES_TO_DOUBLES_OFFSETS,
)
from deucerating.config.settings import BenchmarkSettings
from deucerating.domain.exceptions import BenchmarkValidationError
from deucerating.domain.models import (
    BenchmarkInput,
    ConfidenceTier,
    EstimateSource,
    GameMode,
    OutcomeStatus,
)


@pytest.fixture
def converter():
    return BenchmarkConverter(BenchmarkSettings())


class TestBandOffset:

    @pytest.mark.parametrize("value,expected", [
        (2.0, 0.05), (2.5, 0.05), (2.51, 0.10), (3.5, 0.10), (4.2, 0.20),
        (5.0, 0.15), (6.0, 0.15), (7.5, 0.05), (8.0, 0.05),
    ])
    def test_singles_to_doubles(self, value, expected):
        assert band_offset(value, SINGLES_TO_DOUBLES_OFFSETS) == expected

    @pytest.mark.parametrize("value,expected", [(3.0, 0.15), (4.1, 0.25), (4.5, 0.25), (4.6, 0.15)])
    def test_doubles_to_singles(self, value, expected):
        assert band_offset(value, DOUBLES_TO_SINGLES_OFFSETS) == expected


class TestAdjustRd:
    """Test reliability-driven RD scaling."""

    @pytest.mark.parametrize("base,reliability,fmt,both,expected", [
        (100, 90, "doubles", True, 54),
        (100, 85, "singles", True, 78),
        (100, 70, "combined", True, 80),
        (100, 50, "combined", False, 110),
        (100, 30, "combined", True, 140),
        (100, 10, "singles", False, 257),
        (110, 85, "doubles", False, 65),
    ])
    def test_bands(self, base, reliability, fmt, both, expected):
        assert adjust_rd(base, reliability, fmt, both) == expected

    def test_missing_reliability_defaults(self):
        # singles assumes 25%, anything else 45%
        assert adjust_rd(100, None, "singles", True) == 234
        assert adjust_rd(100, None, "doubles", True) == 126
        assert adjust_rd(100, None, "combined", True) == 140

    def test_capped(self):
        assert adjust_rd(300, 10, "singles", False) == 350
        assert adjust_rd(300, 10, "singles", False, cap=200) == 200


class TestEstimateMissingFormat:

    def test_doubles_known_estimates_singles_upward(self, converter):
        assert converter.estimate_missing_format(4.1, GameMode.DOUBLES, None) == pytest.approx(4.35)

    def test_singles_known_estimates_doubles_downward(self, converter):
        assert converter.estimate_missing_format(4.2, GameMode.SINGLES, None) == pytest.approx(4.0)

    @pytest.mark.parametrize("reliability,expected", [(20, 4.1 + 0.325), (50, 4.35), (85, 4.275)])
    def test_doubles_reliability_scaling(self, converter, reliability, expected):
        assert converter.estimate_missing_format(4.1, GameMode.DOUBLES, reliability) == pytest.approx(expected)

    @pytest.mark.parametrize("reliability,expected", [(30, 3.0 - 0.13), (60, 2.9), (90, 3.0 - 0.08)])
    def test_singles_reliability_scaling(self, converter, reliability, expected):
        assert converter.estimate_missing_format(3.0, GameMode.SINGLES, reliability) == pytest.approx(expected)

    def test_result_clamped(self, converter):
        assert converter.estimate_missing_format(2.0, GameMode.SINGLES, None) == 2.0
        assert converter.estimate_missing_format(8.0, GameMode.DOUBLES, None) == 8.0


class TestSingleFormat:
    """Only one DUPR format supplied."""

    def test_doubles_only(self, converter):
        result = converter.convert(BenchmarkInput(doubles=4.1, doubles_reliability=85))
        assert result.source is EstimateSource.DUPR_CONVERSION
        assert result.doubles == 3000
        # 4.1 + 0.25 * 0.7
        assert result.singles == 3175
        assert result.singles > result.doubles
        assert result.confidence is ConfidenceTier.MEDIUM_HIGH
        assert result.rating_deviation == 65
        assert result.detail["estimationUsed"] is True
        assert result.detail["estimatedFormat"] == "singles"
        assert result.detail["originalDuprDoubles"] == 4.1
        assert result.detail["originalDuprSingles"] is None

    def test_singles_only_without_reliability(self, converter):
        result = converter.convert(BenchmarkInput(singles=4.2))
        assert result.singles == 3100
        assert result.doubles == 2900
        assert result.confidence is ConfidenceTier.MEDIUM
        # 130 * 1.8 * 1.3 * 1.1
        assert result.rating_deviation == 335
        assert result.detail["estimatedFormat"] == "doubles"

    def test_singles_only_low_reliability(self, converter):
        result = converter.convert(BenchmarkInput(singles=3.0, singles_reliability=30))
        assert result.singles == 1900
        assert result.doubles == 1783
        assert result.rating_deviation == 260

    def test_low_end(self, converter):
        result = converter.convert(BenchmarkInput(doubles=2.0))
        assert result.doubles == 1000
        assert result.singles == 1045

    def test_high_end(self, converter):
        result = converter.convert(BenchmarkInput(doubles=8.0))
        assert result.singles == result.doubles == 6000


class TestDualFormat:
    """Both formats supplied: pattern analysis."""

    def test_singles_above_doubles_with_both_boosts(self, converter):
        result = converter.convert(BenchmarkInput(
            singles=4.2, doubles=3.9, singles_reliability=35, doubles_reliability=78,
        ))
        assert result.singles == 3100
        assert result.doubles == 2800
        assert result.confidence is ConfidenceTier.HIGH
        assert result.detail["pattern"] == "singles_above_doubles"
        assert result.detail["dominantFormat"] == "doubles"
        assert result.detail["confidenceMultiplier"] == 1.3
        assert result.detail["estimationUsed"] is False
        # 65 / 1.3 * 0.8 * 0.9
        assert result.rating_deviation == 36

    def test_singles_above_doubles_with_one_boost(self, converter):
        result = converter.convert(BenchmarkInput(singles=4.5, doubles=4.0, doubles_reliability=75))
        assert result.detail["confidenceMultiplier"] == 1.2
        assert result.rating_deviation == 39

    def test_singles_above_doubles_without_boost(self, converter):
        result = converter.convert(BenchmarkInput(singles=4.5, doubles=4.0))
        assert result.detail["confidenceMultiplier"] == 1.0
        # 65 * 1.4 * 0.9 (doubles default reliability 45%)
        assert result.rating_deviation == 82

    def test_doubles_above_singles(self, converter):
        result = converter.convert(BenchmarkInput(singles=3.5, doubles=4.0))
        assert result.detail["pattern"] == "doubles_above_singles"
        assert result.detail["dominantFormat"] == "singles"
        assert result.detail["confidenceMultiplier"] == 0.9
        assert result.confidence is ConfidenceTier.MEDIUM_HIGH
        # 75 / 0.9 * 1.8 * 1.3
        assert result.rating_deviation == 195

    def test_balanced_uses_mean_reliability(self, converter):
        result = converter.convert(BenchmarkInput(
            singles=4.0, doubles=4.1, singles_reliability=60, doubles_reliability=80,
        ))
        assert result.detail["pattern"] == "balanced"
        assert result.detail["dominantFormat"] is None
        assert result.confidence is ConfidenceTier.HIGH
        assert (result.singles, result.doubles) == (2900, 3000)
        assert result.rating_deviation == 56

    def test_balanced_without_reliability(self, converter):
        result = converter.convert(BenchmarkInput(singles=4.0, doubles=4.0))
        assert result.rating_deviation == 98

    def test_gap_at_threshold_is_balanced(self, converter):
        result = converter.convert(BenchmarkInput(singles=4.15, doubles=4.0))
        assert result.detail["pattern"] == "balanced"
        result = converter.convert(BenchmarkInput(singles=4.0, doubles=4.2))
        assert result.detail["pattern"] == "balanced"

    def test_custom_gap(self):
        converter = BenchmarkConverter(BenchmarkSettings(doubles_dominance_gap=0.5))
        result = converter.convert(BenchmarkInput(singles=4.2, doubles=3.9))
        assert result.detail["pattern"] == "balanced"


class TestValidation:

    def test_empty_returns_none(self, converter):
        assert converter.convert(BenchmarkInput()) is None

    @pytest.mark.parametrize("bench,field", [
        (BenchmarkInput(singles=9.0), "dupr_singles"),
        (BenchmarkInput(doubles=1.5), "dupr_doubles"),
        (BenchmarkInput(singles=4.0, singles_reliability=120), "dupr_singles_reliability"),
        (BenchmarkInput(doubles=4.0, doubles_reliability=-1), "dupr_doubles_reliability"),
    ])
    def test_out_of_domain_raises(self, converter, bench, field):
        with pytest.raises(BenchmarkValidationError) as exc_info:
            converter.convert(bench)
        assert exc_info.value.field_name == field

    def test_try_convert_ok(self, converter):
        outcome = converter.try_convert(BenchmarkInput(doubles=4.0))
        assert outcome.is_ok
        assert outcome.estimate.doubles == 2900

    def test_try_convert_failed(self, converter):
        outcome = converter.try_convert(BenchmarkInput(singles=8.5))
        assert outcome.status is OutcomeStatus.FAILED
        assert outcome.error.error_code == "BENCHMARK_OUT_OF_RANGE"

    def test_try_convert_not_applicable(self, converter):
        assert converter.try_convert(BenchmarkInput()).status is OutcomeStatus.NOT_APPLICABLE

    def test_deterministic(self, converter):
        bench = BenchmarkInput(singles=5.3, doubles=4.8, singles_reliability=55)
        assert converter.convert(bench).to_dict() == converter.convert(bench).to_dict()
