import pytest

from src.checksum import ChecksumEngine, mod10, mod11

from tests.helpers.samples import REAL_BARCODES


def test_mod10_worked_example():
    # products 0,0,2,9,0,0,0,0,0 -> sum 11 -> 10 - 1
    assert mod10("001900000") == 9
    assert mod10([0, 0, 1, 9, 0, 0, 0, 0, 0]) == 9


def test_mod10_weights_start_at_two_on_the_left():
    # 2,2,6,4,(10->1),6,(14->5),8,(18->9),0 = 43
    assert mod10("1234567890") == 7


def test_mod10_zero_remainder_gives_zero():
    assert mod10("0000000000") == 0
    # 5*2=10->1, 9*1=9 -> 10
    assert mod10("59") == 0


@pytest.mark.parametrize("barcode", REAL_BARCODES)
def test_mod11_matches_real_barcodes(barcode):
    payload = barcode[:4] + barcode[5:]
    assert mod11(payload) == int(barcode[4])


def test_mod11_normalizes_zero_ten_and_eleven_to_one():
    # 001 9 1000 0000010000 + zeros: 2 + 81 + 8 + 7 = 98, 98 % 11 = 10
    assert mod11("0019" + "1000" + "0000010000" + "0" * 25) == 1
    # all zeros: r = 0 -> 11 -> 1
    assert mod11("0" * 43) == 1


def test_mod11_is_stable_after_insertion():
    payload = "0019" + "4869" + "0000828000" + "1234567890123456789012345"
    digit = mod11(payload)
    barcode = payload[:4] + str(digit) + payload[4:]
    assert mod11(barcode[:4] + barcode[5:]) == digit


def test_non_digits_are_rejected():
    with pytest.raises(ValueError):
        mod10("12a4")
    with pytest.raises(ValueError):
        mod11([1, 2, 10])


def test_engine_verify_helpers():
    engine = ChecksumEngine()
    assert engine.verify_block("001900000", "9")
    assert not engine.verify_block("001900000", "8")
    assert engine.verify_general("0" * 43, "1")


def test_mod10_ten_digit_block_weights_from_the_left():
    # (12->3),0,0,0,0,2,2,2,(10->1),5 -> 15
    assert mod10("6000021255") == 5


def test_engine_exposes_only_verify_helpers():
    assert not hasattr(ChecksumEngine, "mod10")
    assert not hasattr(ChecksumEngine, "mod11")
