from app.schemas import response as resp


def test_ok_envelope_omits_error():
    assert resp.OK().model_dump(exclude_none=True) == {"status": "ok"}


def test_error_envelope():
    assert resp.Error("boom").model_dump(exclude_none=True) == {"status": "error", "error": "boom"}


def test_validation_error_missing_url():
    errors = [{"type": "missing", "loc": ("body", "url"), "msg": "Field required"}]
    assert resp.validation_error(errors).error == "field URL is a required field"


def test_validation_error_joins_messages():
    errors = [
        {"type": "value_error", "loc": ("body", "url"), "msg": "not a valid URL"},
        {"type": "string_pattern_mismatch", "loc": ("body", "alias"), "msg": "..."},
    ]
    envelope = resp.validation_error(errors)
    assert envelope.status == "error"
    assert envelope.error == "field URL is not a valid URL, field Alias is invalid: string_pattern_mismatch"


def test_validation_error_bad_json():
    errors = [{"type": "json_invalid", "loc": ("body", 3), "msg": "JSON decode error"}]
    assert resp.validation_error(errors).error == "failed to decode request"
