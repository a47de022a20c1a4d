# re-export common schemas for simpler imports
from .SaveURLRequest import SaveURLRequest
from .response import AliasResponse, Response

__all__ = [
    "SaveURLRequest",
    "AliasResponse",
    "Response",
]
