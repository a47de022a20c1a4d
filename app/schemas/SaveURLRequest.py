from pydantic import BaseModel, Field, HttpUrl, TypeAdapter, ValidationError, field_validator
from typing import Optional

MAX_URL_LENGTH = 2048
MAX_ALIAS_LENGTH = 64

_http_url = TypeAdapter(HttpUrl)


class SaveURLRequest(BaseModel):
    # kept as str so the exact URL sent is the URL stored
    url: str = Field(..., min_length=1)
    # empty alias means "generate one"
    alias: Optional[str] = Field(None, max_length=MAX_ALIAS_LENGTH, pattern=r"^[A-Za-z0-9_-]*$")

    @field_validator('url')
    def validate_url(cls, v):
        if len(v) > MAX_URL_LENGTH:
            raise ValueError(f'URL must be less than {MAX_URL_LENGTH} characters')
        try:
            _http_url.validate_python(v)
        except ValidationError:
            raise ValueError('not a valid URL')
        return v
