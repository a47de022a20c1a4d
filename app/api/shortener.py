from fastapi import APIRouter, Depends, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, RedirectResponse
import logging
from pydantic import ValidationError

from app.core.exceptions import AliasExistsError, AliasNotFoundError, URLShortenerException
from app.core.security import require_basic_auth
from app.db.Connection import database
from app.db.repository import URLStorage
from app.middleware.request_id import get_request_id
from app.schemas import response as resp
from app.schemas.SaveURLRequest import SaveURLRequest
from app.services.shortener import URLService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/url", tags=["url"])


def _extra(op: str, request: Request) -> dict:
    return {"op": op, "request_id": get_request_id(request)}


async def read_save_request(request: Request, user: str = Depends(require_basic_auth)) -> SaveURLRequest:
    """
    Decode the save body only once the caller is authenticated.
    Decode and field errors surface as RequestValidationError like any other body.
    """
    body = await request.body()
    try:
        return SaveURLRequest.model_validate_json(body)
    except ValidationError as e:
        raise RequestValidationError(e.errors(include_url=False)) from e


@router.post(
    "",
    response_model=resp.AliasResponse,
    response_model_exclude_none=True,
    dependencies=[Depends(require_basic_auth)],
)
def save_url_endpoint(
    request: Request,
    url_request: SaveURLRequest = Depends(read_save_request),
    storage: URLStorage = Depends(database.get_storage),
):
    extra = _extra("handlers.url.save", request)
    logger.info(f"Request body decoded: url={url_request.url[:50]} alias={url_request.alias!r}", extra=extra)

    try:
        url_id, alias = URLService.create_short_url(storage, url_request.url, url_request.alias)
    except AliasExistsError as e:
        logger.error(f"URL already exists: {e}", extra=extra)
        return resp.Error("url already exists")
    except URLShortenerException as e:
        logger.error(f"failed to add url: {e}", exc_info=True, extra=extra)
        return resp.Error("failed to add url")

    logger.info(f"URL saved: id={url_id} alias={alias}", extra=extra)
    return resp.AliasResponse(status=resp.STATUS_OK, alias=alias)


@router.get("/{alias}", tags=["redirect"])
def redirect_endpoint(
    alias: str,
    request: Request,
    storage: URLStorage = Depends(database.get_storage),
):
    """
    Redirect to the URL stored under ``alias``.
    """
    extra = _extra("handlers.url.redirect", request)

    try:
        target = storage.get_url(alias)
    except AliasNotFoundError:
        logger.info(f"url not found: {alias}", extra=extra)
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content=resp.Error("url not found").model_dump(exclude_none=True),
        )
    except URLShortenerException as e:
        logger.error(f"failed to get url: {e}", exc_info=True, extra=extra)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=resp.Error("internal error").model_dump(exclude_none=True),
        )

    logger.info(f"got url: {alias} -> {target[:50]}", extra=extra)
    return RedirectResponse(url=target, status_code=status.HTTP_302_FOUND)


@router.delete(
    "/{alias}",
    response_model=resp.AliasResponse,
    response_model_exclude_none=True,
    dependencies=[Depends(require_basic_auth)],
)
def delete_url_endpoint(
    alias: str,
    request: Request,
    storage: URLStorage = Depends(database.get_storage),
):
    extra = _extra("handlers.url.delete", request)

    try:
        storage.delete_url(alias)
    except AliasNotFoundError:
        logger.info(f"url not found: {alias}", extra=extra)
        return resp.Error("url not found")
    except URLShortenerException as e:
        logger.error(f"failed to delete url: {e}", exc_info=True, extra=extra)
        return resp.Error("failed to delete url")

    logger.info(f"deleted url: {alias}", extra=extra)
    return resp.AliasResponse(status=resp.STATUS_OK, alias=alias)
