import pytest

from pf2tracker.backend.difficulty import DifficultyBand
from pf2tracker.backend.models import CurrencyAward, InvalidEncounterInput
from pf2tracker.backend.rewards import CURRENCY_MULTIPLIERS, decompose_currency, reward_for


def test_reward_for_first_level_extreme_encounter() -> None:
    reward = reward_for(1, DifficultyBand.EXTREME)

    assert reward.xp == 160
    assert reward.currency == CurrencyAward(gold=8, silver=0, copper=0)


def test_reward_for_second_level_trivial_encounter() -> None:
    reward = reward_for(2, DifficultyBand.TRIVIAL)

    assert reward.xp == 40
    assert reward.currency == CurrencyAward(gold=1, silver=0, copper=0)


def test_reward_for_splits_fractional_gold_into_silver() -> None:
    assert reward_for(1, DifficultyBand.TRIVIAL).currency == CurrencyAward(gold=0, silver=5, copper=0)


def test_reward_for_scales_exponentially_with_level() -> None:
    assert reward_for(5, DifficultyBand.MODERATE).currency == CurrencyAward(gold=32)
    assert reward_for(10, DifficultyBand.LOW).currency == CurrencyAward(gold=512)
    assert reward_for(3, DifficultyBand.SEVERE).xp == 120


def test_reward_currency_never_exceeds_scalar_total() -> None:
    for level in range(1, 21):
        for band, multiplier in CURRENCY_MULTIPLIERS.items():
            currency = reward_for(level, band).currency
            assert 0 <= currency.silver <= 9
            assert 0 <= currency.copper <= 9
            assert currency.as_copper() <= 2 ** (level - 1) * multiplier * 100


def test_decompose_currency_truncates_instead_of_rounding() -> None:
    currency = decompose_currency(2.375)

    assert currency == CurrencyAward(gold=2, silver=3, copper=7)
    assert currency.as_copper() < 237.5


def test_decompose_currency_rejects_negative_or_non_finite_totals() -> None:
    with pytest.raises(InvalidEncounterInput):
        decompose_currency(-0.5)
    with pytest.raises(InvalidEncounterInput):
        decompose_currency(float("inf"))


def test_reward_for_rejects_levels_below_one() -> None:
    with pytest.raises(InvalidEncounterInput):
        reward_for(0, DifficultyBand.LOW)


def test_reward_for_stays_exact_at_very_high_levels() -> None:
    assert reward_for(2000, DifficultyBand.LOW).currency == CurrencyAward(gold=2**1999)
    assert reward_for(1100, DifficultyBand.TRIVIAL).currency == CurrencyAward(gold=2**1098)


def test_reward_for_matches_truncating_decomposition() -> None:
    for level in range(1, 21):
        for band, multiplier in CURRENCY_MULTIPLIERS.items():
            assert reward_for(level, band).currency == decompose_currency(2 ** (level - 1) * multiplier)
