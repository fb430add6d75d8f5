from datetime import date
from decimal import Decimal

import pytest

from config import ConfigurationManager
from src.postprocessor import (
    DOCUMENTED_EPOCH,
    LEGACY_EPOCH,
    AmountResolver,
    DueDateResolver,
    FactorEpoch,
)
from src.utils.exceptions import ConfigurationError

ROLLOVER_EPOCH = FactorEpoch(date(2025, 2, 22), 1000, in_force_from=date(2025, 2, 22))


def test_documented_epoch(documented_resolver):
    assert documented_resolver.resolve(1000) == date(1997, 10, 7)
    assert documented_resolver.resolve(1001) == date(1997, 10, 8)
    assert documented_resolver.resolve(4869) == date(2008, 5, 11)


def test_factor_zero_means_no_due_date(documented_resolver):
    assert documented_resolver.resolve(0) is None


@pytest.mark.parametrize("factor", [-1, 10000])
def test_factor_out_of_range(documented_resolver, factor):
    with pytest.raises(ValueError):
        documented_resolver.resolve(factor)


def test_legacy_epoch_is_raw_offset():
    resolver = DueDateResolver([LEGACY_EPOCH])
    assert resolver.resolve(1) == date(1997, 10, 8)
    assert resolver.resolve(4869) == date(2011, 2, 5)


def test_rollover_applies_once_in_force():
    resolver = DueDateResolver([ROLLOVER_EPOCH, DOCUMENTED_EPOCH])

    assert resolver.epochs == (DOCUMENTED_EPOCH, ROLLOVER_EPOCH)
    assert resolver.resolve(1000, reference_date=date(2025, 2, 21)) == date(1997, 10, 7)
    assert resolver.resolve(1000, reference_date=date(2025, 2, 22)) == date(2025, 2, 22)
    assert resolver.resolve(1001, reference_date=date(2026, 1, 1)) == date(2025, 2, 23)


def test_reference_date_fixed_on_resolver():
    resolver = DueDateResolver([DOCUMENTED_EPOCH, ROLLOVER_EPOCH], reference_date=date(2030, 1, 1))
    assert resolver.epoch_for() is ROLLOVER_EPOCH
    # Before every entry: earliest pair applies.
    assert resolver.epoch_for(date(1990, 1, 1)) is DOCUMENTED_EPOCH


def test_factor_epoch_round_trip():
    assert DOCUMENTED_EPOCH.to_factor(date(1997, 10, 8)) == 1001
    assert ROLLOVER_EPOCH.to_factor(ROLLOVER_EPOCH.to_date(9999)) == 9999
    with pytest.raises(ValueError):
        DOCUMENTED_EPOCH.to_factor(date(1990, 1, 1))


def test_factor_epoch_rejects_bad_base_factor():
    with pytest.raises(ConfigurationError):
        FactorEpoch(date(1997, 10, 7), 10000)


def test_epochs_from_default_settings():
    epochs = DueDateResolver.epochs_from_config()
    assert epochs == [
        FactorEpoch(date(1997, 10, 7), 1000, in_force_from=date(1997, 10, 7)),
        FactorEpoch(date(2025, 2, 22), 1000, in_force_from=date(2025, 2, 22)),
    ]


def _use_settings(tmp_path, text):
    path = tmp_path / "settings.yaml"
    path.write_text(text, encoding="utf-8")
    ConfigurationManager.reset()
    ConfigurationManager(str(path))


def test_legacy_mode_from_settings(tmp_path):
    _use_settings(tmp_path, "due_date:\n  legacy_mode: true\n")
    assert DueDateResolver.epochs_from_config() == [LEGACY_EPOCH]


def test_missing_schedule_uses_documented_epoch(tmp_path):
    _use_settings(tmp_path, "decoder:\n  strict: false\n")
    assert DueDateResolver.epochs_from_config() == [DOCUMENTED_EPOCH]


@pytest.mark.parametrize("entries", [
    "due_date:\n  epochs:\n    - base_factor: 1000\n",
    "due_date:\n  epochs:\n    - epoch: 'not a date'\n",
    "due_date:\n  epochs:\n    - epoch: '2025-02-22'\n      base_factor: 12000\n",
    "due_date:\n  epochs: '1997-10-07'\n",
    "due_date:\n  epochs:\n    - '1997-10-07'\n",
])
def test_invalid_schedule_raises(tmp_path, entries):
    _use_settings(tmp_path, entries)
    with pytest.raises(ConfigurationError):
        DueDateResolver()


def test_empty_schedule_raises():
    with pytest.raises(ConfigurationError):
        DueDateResolver([])


def test_amount_from_cents():
    resolver = AmountResolver()
    assert resolver.resolve(123456) == Decimal("1234.56")
    assert resolver.resolve(1) == Decimal("0.01")
    assert str(resolver.resolve(10000)) == "100.00"
    assert str(resolver.resolve(9999999999)) == "99999999.99"


def test_zero_amount_is_open():
    assert AmountResolver().resolve(0) is None


def test_negative_amount_rejected():
    with pytest.raises(ValueError):
        AmountResolver().resolve(-5)


@pytest.mark.parametrize("cents, expected", [
    (12345, "123.45"),
    (100, "1.00"),
    (5, "0.05"),
])
def test_amount_keeps_exact_cents(cents, expected):
    amount = AmountResolver().resolve(cents)
    assert str(amount) == expected
    assert amount.as_tuple().exponent == -2


def test_amount_ignores_stray_settings(tmp_path):
    _use_settings(tmp_path, "amount:\n  quantum: '1'\n")
    assert AmountResolver().resolve(12345) == Decimal("123.45")


def test_epoch_follows_reference_date_not_factor():
    rollover = FactorEpoch(date(2025, 2, 22), 1000)
    resolver = DueDateResolver([DOCUMENTED_EPOCH, rollover])

    assert resolver.resolve(9990, date(2025, 2, 1)) == date(2022, 5, 19)
    assert resolver.resolve(9990, date(2025, 3, 1)) == date(2049, 10, 4)
