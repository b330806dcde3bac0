"""Validation message formatting for RequestValidationError."""

from todo_api.api.error_handlers import build_validation_message


def test_path_error_uses_invalid_id_message():
    errors = [{"loc": ("path", "todo_id"), "msg": "Input should be a valid integer", "type": "int_parsing"}]
    assert build_validation_message(errors) == "Invalid ID! ID must be an integer"


def test_body_field_error_names_field():
    errors = [{"loc": ("body", "done"), "msg": "Input should be a valid boolean", "type": "bool_type"}]
    assert build_validation_message(errors) == (
        "Invalid request body: done: Input should be a valid boolean"
    )


def test_json_error():
    errors = [{"loc": ("body", 1), "msg": "JSON decode error", "type": "json_invalid"}]
    assert build_validation_message(errors).startswith("Invalid JSON body")


def test_missing_body():
    errors = [{"loc": ("body",), "msg": "Field required", "type": "missing"}]
    assert build_validation_message(errors) == "Invalid request body: Field required"


def test_no_errors():
    assert build_validation_message([]) == "Invalid request"
