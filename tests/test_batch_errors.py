import pytest

from coursechain.batch.errors import BatchError, BatchErrorCode, MintResult
from coursechain.ledger import ContractError


def test_error_carries_code():
    error = BatchError(BatchErrorCode.UNAUTHORIZED)
    assert error.code is BatchErrorCode.UNAUTHORIZED
    assert isinstance(error, ContractError)


def test_error_accepts_integer_code():
    assert BatchError(101).code is BatchErrorCode.DUPLICATE_CERTIFICATE


def test_unknown_code_is_rejected():
    with pytest.raises(ValueError):
        BatchError(9999)


@pytest.mark.parametrize(
    "value, code",
    [
        (103, BatchErrorCode.BATCH_SIZE_TOO_LARGE),
        (202, BatchErrorCode.CERTIFICATE_NOT_REVOCABLE),
        (3, BatchErrorCode.NOT_INITIALIZED),
    ],
)
def test_code_values_fixed_by_contract(value, code):
    error = BatchError(value)
    assert error.code is code
    assert int(error.code) == value


def test_message_names_the_code():
    assert "INVALID_TIME_RANGE" in str(BatchError(BatchErrorCode.INVALID_TIME_RANGE))


def test_mint_result_success_and_failure():
    ok = MintResult(5)
    failed = MintResult(5, BatchErrorCode.DUPLICATE_CERTIFICATE)
    assert ok.succeeded is True
    assert ok.error is None
    assert failed.succeeded is False
    assert failed.error is BatchErrorCode.DUPLICATE_CERTIFICATE
    assert ok == MintResult(5)
    assert ok != failed