"""Tests for domain and storage exceptions (error_code, message, details)."""

from todai.domain.exceptions import (
    ResourceNotFoundException,
    TaskNotFoundException,
    TodaiException,
    ValidationException,
)
from todai.infrastructure.exceptions import StorageException, StoreNotConfiguredException


def test_todai_exception_default_error_code() -> None:
    """Base TodaiException uses class name as error_code when not provided."""
    exc = TodaiException("Something failed")
    assert exc.message == "Something failed"
    assert exc.error_code == "TodaiException"
    assert exc.details == {}


def test_todai_exception_to_dict() -> None:
    exc = TodaiException("Oops", error_code="CUSTOM", details={"key": "value"})
    assert exc.to_dict() == {"error": "CUSTOM", "message": "Oops", "details": {"key": "value"}}


def test_validation_exception() -> None:
    """ValidationException sets VALIDATION_ERROR and optional field in details."""
    exc = ValidationException("Title is required", field="title")
    assert exc.error_code == "VALIDATION_ERROR"
    assert exc.details == {"field": "title"}
    assert exc.field == "title"


def test_validation_exception_without_field() -> None:
    exc = ValidationException("Invalid")
    assert exc.details == {}
    assert exc.field is None


def test_task_not_found() -> None:
    exc = TaskNotFoundException("abc")
    assert isinstance(exc, ResourceNotFoundException)
    assert exc.message == "Task not found"
    assert exc.error_code == "RESOURCE_NOT_FOUND"
    assert exc.details == {"resource_type": "Task", "resource_id": "abc"}


def test_storage_exceptions() -> None:
    assert StorageException().error_code == "STORAGE_ERROR"
    exc = StoreNotConfiguredException()
    assert isinstance(exc, StorageException)
    assert exc.error_code == "STORE_NOT_CONFIGURED"
    assert exc.message == "Task store is not configured"
