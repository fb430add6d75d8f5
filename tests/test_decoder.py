import json
from datetime import date
from decimal import Decimal

import pytest

from src.decoder import BoletoDecoder, DecodeResult, decode
from src.extraction import BlockId, barcode_to_codeline
from src.input_handler import SlipFormat
from src.postprocessor import DueDateResolver
from src.utils.exceptions import (
    ChecksumMismatchError,
    EmptyInputError,
    InvalidLengthError,
)

from tests.helpers.samples import (
    BRADESCO_BARCODE,
    OPEN_BARCODE,
    REAL_BARCODES,
    SIMPLE_BARCODE,
    SIMPLE_CODELINE,
)


def test_decode_barcode(decoder):
    result = decoder.decode(SIMPLE_BARCODE)

    assert result.format is SlipFormat.BARCODE_44
    assert result.checksum_valid
    assert result.checksum_failures == ()
    assert result.due_date == date(1997, 10, 7)
    assert result.amount == Decimal("100.00")
    assert result.raw_fields.bank_code == "001"


def test_decode_codeline(decoder):
    result = decoder.decode("00190.00009 00000.000000 00000.000000 1 10000000010000")

    assert result.format is SlipFormat.CODELINE_47
    assert result.checksum_valid
    assert result.due_date == date(1997, 10, 7)
    assert result.amount == Decimal("100.00")
    assert result.raw_fields.block_check_digits == ("9", "0", "0")


@pytest.mark.parametrize("barcode", REAL_BARCODES)
def test_codeline_and_barcode_decode_identically(decoder, barcode):
    from_barcode = decoder.decode(barcode)
    from_codeline = decoder.decode(barcode_to_codeline(barcode))

    assert from_barcode.checksum_valid and from_codeline.checksum_valid
    assert from_codeline.due_date == from_barcode.due_date
    assert from_codeline.amount == from_barcode.amount
    assert from_codeline.raw_fields.payload == from_barcode.raw_fields.payload
    assert from_codeline.barcode == barcode


def test_open_due_date_and_amount(decoder):
    result = decoder.decode(OPEN_BARCODE)

    assert result.checksum_valid
    assert result.due_date is None
    assert result.amount is None
    assert not result.has_due_date
    assert result.is_open_amount


def test_labelled_scanner_text_decodes_like_bare_digits(decoder):
    noisy = f"boleto: {BRADESCO_BARCODE} "
    assert decoder.decode(noisy) == decoder.decode(BRADESCO_BARCODE)


@pytest.mark.parametrize("raw", ["", None, "boleto:   \n", "R$ -- ,."])
def test_no_digits_is_empty_input(decoder, raw):
    with pytest.raises(EmptyInputError) as exc_info:
        decoder.decode(raw)
    # Also catchable as a length failure.
    assert isinstance(exc_info.value, InvalidLengthError)


@pytest.mark.parametrize("raw", [SIMPLE_BARCODE[:-1], SIMPLE_BARCODE + "0", SIMPLE_CODELINE + "1"])
def test_one_digit_off_is_invalid_length(decoder, raw):
    with pytest.raises(InvalidLengthError) as exc_info:
        decoder.decode(raw)
    assert not isinstance(exc_info.value, EmptyInputError)


def test_checksum_failure_is_reported_not_raised(decoder):
    # Amount typo: 8280,00 -> 8281,00
    typo = BRADESCO_BARCODE[:16] + "1" + BRADESCO_BARCODE[17:]
    result = decoder.decode(typo)

    assert not result.checksum_valid
    assert result.checksum_failures == (BlockId.GENERAL,)
    assert result.amount == Decimal("8281.00")
    assert result.due_date == date(2008, 5, 11)


def test_strict_mode_raises_with_best_effort_result(documented_resolver):
    strict_decoder = BoletoDecoder(due_date_resolver=documented_resolver, strict=True)
    codeline = barcode_to_codeline(BRADESCO_BARCODE)
    typo = codeline[:9] + str((int(codeline[9]) + 1) % 10) + codeline[10:]

    with pytest.raises(ChecksumMismatchError) as exc_info:
        strict_decoder.decode(typo)

    assert exc_info.value.which == (BlockId.BLOCK1,)
    assert exc_info.value.details == {"which": ["block1"]}
    assert exc_info.value.result.amount == Decimal("8280.00")


def test_strict_override_per_call(decoder):
    typo = SIMPLE_BARCODE[:4] + "2" + SIMPLE_BARCODE[5:]
    assert not decoder.decode(typo).checksum_valid
    with pytest.raises(ChecksumMismatchError):
        decoder.decode(typo, strict=True)


def test_reference_date_selects_rollover_epoch():
    rollover = DueDateResolver.epochs_from_config()
    resolver = DueDateResolver(rollover)
    decoder = BoletoDecoder(due_date_resolver=resolver)

    assert decoder.decode(SIMPLE_BARCODE, reference_date=date(2024, 1, 1)).due_date == date(1997, 10, 7)
    assert decoder.decode(SIMPLE_BARCODE, reference_date=date(2025, 3, 1)).due_date == date(2025, 2, 22)


def test_module_level_decode_uses_settings():
    result = decode(SIMPLE_BARCODE)
    assert result.checksum_valid
    assert result.amount == Decimal("100.00")


def test_result_is_immutable(decoder):
    result = decoder.decode(SIMPLE_BARCODE)
    with pytest.raises(AttributeError):
        result.amount = Decimal("1.00")


def test_form_values(decoder):
    assert decoder.decode(SIMPLE_BARCODE).to_form_values() == {
        'due_date': '1997-10-07',
        'amount': '100,00',
        'checksum_warning': False,
    }
    assert decoder.decode(OPEN_BARCODE).to_form_values() == {
        'due_date': None,
        'amount': None,
        'checksum_warning': False,
    }


def test_to_json(decoder):
    data = json.loads(decoder.decode(SIMPLE_CODELINE).to_json())

    assert data['format'] == 'codeline47'
    assert data['checksum_valid'] is True
    assert data['amount'] == '100.00'
    assert data['barcode'] == SIMPLE_BARCODE
    assert data['raw_fields']['block_check_digit1'] == '9'


def test_decoder_is_reusable_across_calls(decoder):
    results = [decoder.decode(code) for code in REAL_BARCODES * 3]
    assert all(isinstance(r, DecodeResult) and r.checksum_valid for r in results)
    assert results[:len(REAL_BARCODES)] == results[len(REAL_BARCODES):2 * len(REAL_BARCODES)]
