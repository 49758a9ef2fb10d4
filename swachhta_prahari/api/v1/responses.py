# Standard library imports
from typing import Any, Dict, Optional

# External package imports
from fastapi import HTTPException
from fastapi.encoders import jsonable_encoder

# Local application imports
from ...domain.exceptions import PrahariError


def envelope(data: Any = None, message: Optional[str] = None, meta: Any = None) -> Dict[str, Any]:
    """
    Build the success envelope ``{success, message?, data?, meta?}``.

    DTOs are serialized by alias so the wire format is camelCase.
    """
    body: Dict[str, Any] = {"success": True}
    if message is not None:
        body["message"] = message
    if data is not None:
        body["data"] = jsonable_encoder(data, by_alias=True)
    if meta is not None:
        body["meta"] = jsonable_encoder(meta, by_alias=True)
    return body


def http_error(exception: PrahariError) -> HTTPException:
    """Translate a use case exception into an HTTPException carrying its field errors"""
    detail: Any = exception.message
    if exception.errors:
        detail = {"message": exception.message, "errors": exception.errors}
    return HTTPException(status_code=exception.status_code, detail=detail)
