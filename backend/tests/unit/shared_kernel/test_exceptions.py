import pytest

from casebook.shared_kernel.exceptions import (
    DecodeError,
    DomainException,
    EntityNotFoundError,
    IdentityError,
    StoreError,
    ValidationError,
    http_status_for,
)


def test_default_codes():
    assert ValidationError("bad").code == "validation_error"
    assert DecodeError("bad").code == "decode_error"
    assert EntityNotFoundError("missing").code == "not_found"
    assert StoreError("down").code == "store_error"
    assert IdentityError("clock").code == "identity_error"


def test_explicit_code_and_details():
    error = StoreError("down", code="backend_unavailable", details={"backend": "memory"})
    assert error.code == "backend_unavailable"
    assert error.details == {"backend": "memory"}
    assert str(error) == "down"
    assert isinstance(error, DomainException)


@pytest.mark.parametrize(
    "error, status",
    [
        (ValidationError("x"), 400),
        (DecodeError("x"), 400),
        (EntityNotFoundError("x"), 404),
        (StoreError("x"), 500),
        (IdentityError("x"), 500),
        (RuntimeError("x"), 500),
    ],
)
def test_http_status_for(error, status):
    assert http_status_for(error) == status
