# app/main.py
import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError

from app.api import books
from app.config import settings
from app.repo.base import BookRepo
from app.singletons import build_repo
from app.domain.errors import NotFoundError, BadRequestError
from pydantic import ValidationError as PydanticValidationError

LOG_DIR = Path(__file__).resolve().parent.parent / "logs"
LOG_FILE = LOG_DIR / "catalog.log"


def _configure_logging():
    logger = logging.getLogger("catalog")
    logger.setLevel(settings.log_level)
    if not logger.handlers:
        fmt = logging.Formatter("%(asctime)s %(levelname)s %(name)s - %(message)s")

        stream_handler = logging.StreamHandler()
        stream_handler.setFormatter(fmt)
        logger.addHandler(stream_handler)

        if settings.log_to_file:
            try:
                LOG_DIR.mkdir(parents=True, exist_ok=True)
                file_handler = RotatingFileHandler(LOG_FILE, maxBytes=5 * 1024 * 1024, backupCount=5)
                file_handler.setFormatter(fmt)
                logger.addHandler(file_handler)
            except OSError as exc:
                logger.warning("Failed to initialize file logging at %s: %s", LOG_FILE, exc)

    logger.propagate = False
    logging.getLogger("uvicorn").setLevel(logging.INFO)
    logging.getLogger("uvicorn.access").setLevel(logging.INFO)
    logging.getLogger("uvicorn.error").setLevel(logging.INFO)

def create_app(repo: BookRepo | None = None) -> FastAPI:
    _configure_logging()

    app = FastAPI(title="Library Catalog")
    app.state.repo = repo if repo is not None else build_repo(settings)

    # Routers
    app.include_router(books.router)

    # Exception handlers
    @app.exception_handler(NotFoundError)
    async def not_found_handler(_: Request, exc: NotFoundError):
        return JSONResponse(status_code=status.HTTP_404_NOT_FOUND,
                            content={"error":"NotFound","detail":f"{exc.what} not found"})

    @app.exception_handler(BadRequestError)
    async def badreq_handler(_: Request, exc: BadRequestError):
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST,
                            content={"error":exc.code,"detail":exc.detail})

    @app.exception_handler(RequestValidationError)
    @app.exception_handler(PydanticValidationError)
    async def validation_handler(_: Request, exc: RequestValidationError | PydanticValidationError):
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content=jsonable_encoder({"error":"ValidationError","detail":exc.errors()}),
        )

    return app

# Instantiate for uvicorn
app = create_app()
