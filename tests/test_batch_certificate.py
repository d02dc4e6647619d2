import pytest

from coursechain.batch.certificate import (
    CertificateData,
    CertificateType,
    ConversionError,
)


def _cert(valid_from, valid_until, revocable=True):
    return CertificateData(
        id=1,
        metadata_hash=bytes([1] * 32),
        valid_from=valid_from,
        valid_until=valid_until,
        revocable=revocable,
        cert_type=CertificateType.STANDARD,
    )


@pytest.mark.parametrize("cert_type", list(CertificateType))
def test_from_value_round_trip(cert_type):
    assert CertificateType.from_value(int(cert_type)) is cert_type


@pytest.mark.parametrize("value", [3, -1, 100])
def test_from_value_unknown(value):
    assert CertificateType.from_value(value) is None


@pytest.mark.parametrize(
    "value, cert_type",
    [
        (0, CertificateType.STANDARD),
        (1, CertificateType.PREMIUM),
        (2, CertificateType.GOLD),
    ],
)
def test_numeric_values_fixed_by_contract(value, cert_type):
    assert CertificateType.from_value(value) is cert_type


def test_conversion_error_code():
    assert ConversionError(1) is ConversionError.INVALID_VALUE


def test_validate_accepts_future_window():
    assert _cert(10, 20).validate(now=5) is True
    assert _cert(10, 20).validate(now=15) is True


def test_validate_rejects_ended_window():
    assert _cert(10, 20).validate(now=20) is False
    assert _cert(10, 20).validate(now=25) is False


def test_validate_rejects_empty_or_reversed_window():
    assert _cert(20, 20).validate(now=0) is False
    assert _cert(30, 20).validate(now=0) is False


def test_certificate_data_is_immutable():
    cert = _cert(10, 20)
    with pytest.raises(AttributeError):
        cert.valid_until = 5
    assert cert.valid_until == 20