from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
import uvicorn

from app.core.config import settings
from app.core.logging_config import configure_logging
from app.db.Connection import database
from app.api import shortener
from app.middleware.request_id import RequestIDMiddleware
from app.schemas import response as resp

logger = configure_logging(settings.ENV)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"Application '{settings.PROJECT_NAME}' starting up.", extra={"op": "main.startup"})
    logger.debug("debug messages are enabled")
    database.init_db()
    database.verify_database_connection()
    yield
    logger.info("Shutting down gracefully...")
    database.engine.dispose()


app = FastAPI(
    title=settings.PROJECT_NAME,
    description="URL shortener with alias redirects",
    lifespan=lifespan,
)

app.add_middleware(RequestIDMiddleware)

app.include_router(shortener.router)


@app.get("/health", tags=["health"], response_model=resp.Response, response_model_exclude_none=True)
def health_check():
    return resp.OK()


@app.get("/ready", tags=["health"])
def readiness():
    db_ok = database.verify_database_connection()
    return {"ready": db_ok, "details": {"db": "ok" if db_ok else "error"}}


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    logger.error(f"invalid request: {exc.errors()}", extra={"op": "handlers.validation"})
    envelope = resp.validation_error(exc.errors())
    return JSONResponse(status_code=200, content=envelope.model_dump(exclude_none=True))


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled exception: {exc}", exc_info=True)
    return JSONResponse(status_code=500, content=resp.Error("internal error").model_dump(exclude_none=True))


def run():
    logger.info(f"starting server on {settings.HTTP_SERVER_ADDRESS}")
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        timeout_keep_alive=settings.HTTP_SERVER_IDLE_TIMEOUT,
        timeout_graceful_shutdown=settings.HTTP_SERVER_TIMEOUT,
        log_config=None,
    )


if __name__ == "__main__":
    run()
