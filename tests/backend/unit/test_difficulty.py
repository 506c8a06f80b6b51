import math

import pytest

from pf2tracker.backend.difficulty import (
    DifficultyBand,
    adjust_for_party_size,
    classify,
    classify_final,
    thresholds,
)
from pf2tracker.backend.experience import creature_xp
from pf2tracker.backend.models import InvalidEncounterInput, ThresholdConfigurationError


def test_bands_are_totally_ordered() -> None:
    assert (
        DifficultyBand.TRIVIAL
        < DifficultyBand.LOW
        < DifficultyBand.MODERATE
        < DifficultyBand.SEVERE
        < DifficultyBand.EXTREME
    )
    assert DifficultyBand.MODERATE.label == "Moderate"


def test_thresholds_for_four_players_match_base_table() -> None:
    table = thresholds(4)

    assert table == {
        DifficultyBand.TRIVIAL: 40,
        DifficultyBand.LOW: 60,
        DifficultyBand.MODERATE: 80,
        DifficultyBand.SEVERE: 120,
        DifficultyBand.EXTREME: 160,
    }
    assert list(table) == list(DifficultyBand)


def test_thresholds_scale_with_party_size() -> None:
    assert list(thresholds(6).values()) == [60, 100, 120, 180, 240]
    assert list(thresholds(3).values()) == [30, 40, 60, 90, 120]
    assert list(thresholds(1).values()) == [10, 0, 20, 30, 40]


def test_thresholds_reject_party_sizes_without_increasing_bands() -> None:
    with pytest.raises(ThresholdConfigurationError):
        thresholds(0)
    with pytest.raises(ThresholdConfigurationError):
        classify(100, -2)


def test_single_level_matched_creature_is_trivial_for_four_players() -> None:
    raw_xp = creature_xp(1, 1)

    assert raw_xp == 40
    assert classify(raw_xp, 4) is DifficultyBand.TRIVIAL


def test_classify_lowers_band_for_larger_party() -> None:
    assert classify(200, 6) is DifficultyBand.SEVERE
    assert classify(200, 4) is DifficultyBand.EXTREME


def test_classify_crosses_base_thresholds_for_four_players() -> None:
    assert classify(59, 4) is DifficultyBand.TRIVIAL
    assert classify(60, 4) is DifficultyBand.LOW
    assert classify(79.5, 4) is DifficultyBand.LOW
    assert classify(80, 4) is DifficultyBand.MODERATE
    assert classify(120, 4) is DifficultyBand.SEVERE
    assert classify(160, 4) is DifficultyBand.EXTREME
    assert classify(10_000, 4) is DifficultyBand.EXTREME


def test_classify_is_monotonic_in_raw_xp() -> None:
    for party_size in range(1, 9):
        previous = DifficultyBand.TRIVIAL
        for raw_xp in range(0, 1001):
            band = classify(raw_xp, party_size)
            assert band >= previous
            previous = band


def test_classify_rejects_non_finite_xp() -> None:
    with pytest.raises(InvalidEncounterInput):
        classify(math.inf, 4)
    with pytest.raises(InvalidEncounterInput):
        classify(math.nan, 4)


def test_adjust_for_party_size_keeps_empty_encounters_at_zero() -> None:
    for party_size in range(1, 9):
        assert adjust_for_party_size(0, party_size) == 0


def test_adjust_for_party_size_removes_band_correction() -> None:
    assert adjust_for_party_size(200, 6) == 140
    assert adjust_for_party_size(60, 3) == 80
    assert adjust_for_party_size(120, 4) == 120


def test_adjust_for_party_size_leaves_trivial_encounters_unchanged() -> None:
    assert adjust_for_party_size(50, 6) == 50


def test_classify_final_ignores_extra_experience() -> None:
    assert classify_final(100, 0) is DifficultyBand.MODERATE
    assert classify_final(130, 20) is DifficultyBand.MODERATE
    assert classify_final(130, 0) is DifficultyBand.SEVERE
    assert classify_final(59.5, 0) is DifficultyBand.TRIVIAL
    assert classify_final(200, 200) is DifficultyBand.TRIVIAL


def test_classify_final_rejects_non_finite_values() -> None:
    with pytest.raises(InvalidEncounterInput):
        classify_final(math.inf, 0)
    with pytest.raises(InvalidEncounterInput):
        classify_final(100, math.nan)
