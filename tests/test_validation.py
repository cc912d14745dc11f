"""Tests for required-field presence checks."""

import pytest

from site_api.errors import ClientInputError
from site_api.services.validation import (
    APPOINTMENT_REQUIRED,
    BLOG_REQUIRED,
    MESSAGE_REQUIRED,
    missing_fields,
    require_fields,
)


def test_all_present_passes():
    require_fields({"name": "A", "phone": "1", "date": "d", "service": "s"}, APPOINTMENT_REQUIRED)


def test_missing_fields_in_declared_order():
    assert missing_fields({"phone": "1"}, MESSAGE_REQUIRED) == ["name", "email", "message"]


def test_falsy_values_count_as_missing():
    payload = {"title": "", "date": None, "image": 0, "content": "ok"}
    assert missing_fields(payload, BLOG_REQUIRED) == ["title", "date", "image"]


def test_no_format_checks():
    # Presence only: nonsense values pass.
    require_fields({"name": "x", "email": "not-an-email", "phone": "abc", "message": "."}, MESSAGE_REQUIRED)


def test_require_fields_raises_client_error():
    with pytest.raises(ClientInputError) as exc_info:
        require_fields({}, APPOINTMENT_REQUIRED)

    assert exc_info.value.status_code == 400
    assert exc_info.value.message == "All fields are required."
    assert exc_info.value.detail == {"missing": list(APPOINTMENT_REQUIRED)}
