import logging
from contextlib import asynccontextmanager
from http import HTTPStatus

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from domino_api.domain.errors import DominoError
from domino_api.load_settings import host, log_level, port, reload
from domino_api.models.dc_models import ErrorModel
from domino_api.routers import game

logging.basicConfig(level=log_level.upper())


@asynccontextmanager
async def lifespan(app):
    """Log server start and stop. The engine keeps no state, so nothing is set up."""
    logging.info("Start Server")
    try:
        yield
    finally:
        logging.info("Stop Server")


def error_response(message: str, status_code: int) -> JSONResponse:
    body = ErrorModel(
        error=message,
        status=HTTPStatus(status_code).phrase,
        code=status_code,
    )
    return JSONResponse(status_code=status_code, content=body.model_dump())


async def domino_error_handler(request: Request, exc: DominoError) -> JSONResponse:
    if exc.status_kind == "client":
        logging.info(f"Rejected request: {exc.message}")
        return error_response(exc.message, status.HTTP_400_BAD_REQUEST)
    logging.error(f"Error happened in play. Err: {exc.message}")
    return error_response(exc.message, status.HTTP_500_INTERNAL_SERVER_ERROR)


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logging.info(f"Invalid request body: {exc.errors()}")
    return error_response(str(exc), status.HTTP_400_BAD_REQUEST)


async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logging.exception(f"Unexpected error: {exc}")
    return error_response(str(exc) or type(exc).__name__, status.HTTP_500_INTERNAL_SERVER_ERROR)


app = FastAPI(lifespan=lifespan)
app.include_router(game.game_router)
app.add_exception_handler(DominoError, domino_error_handler)
app.add_exception_handler(RequestValidationError, validation_error_handler)
app.add_exception_handler(Exception, unexpected_error_handler)


if __name__ == "__main__":
    uvicorn.run("domino_api.main:app", host=host, port=port, reload=reload, log_level=log_level)
