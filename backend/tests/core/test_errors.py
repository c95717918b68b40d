"""Error hierarchy — status codes and response bodies."""

from message_api.core.errors import MessageApiError, MissingFieldsError, StorageError


def test_missing_fields_is_400_with_received():
    err = MissingFieldsError({"name": None, "email": "a@b.c", "message": ""})

    assert isinstance(err, MessageApiError)
    assert err.http_status == 400
    assert err.code == "MISSING_FIELDS"
    assert err.to_response() == {
        "error": "All fields are required",
        "received": {"name": None, "email": "a@b.c", "message": ""},
    }


def test_storage_error_hides_details_by_default():
    err = StorageError("Failed to fetch messages", "list", details="boom")

    assert err.http_status == 500
    assert err.operation == "list"
    assert err.to_response() == {"error": "Failed to fetch messages"}


def test_storage_error_exposes_details_when_asked():
    err = StorageError(
        "Failed to save message to database", "create",
        details="disk full", expose_details=True,
    )
    assert err.to_response() == {
        "error": "Failed to save message to database",
        "details": "disk full",
    }


def test_message_is_exception_text():
    assert str(StorageError("Failed to delete messages", "delete")) == (
        "Failed to delete messages"
    )
