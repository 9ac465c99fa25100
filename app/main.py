"""Movies Library - FastAPI Entry Point."""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .config import INVALID_MOVIE_MESSAGE, LOG_LEVEL, ROOT_PATH
from .errors import ArgumentError, NotFoundError, ValidationError
from .infrastructure.database import init_async_db, close_async_db

# Import routers
from .routes.movies import router as movies_router

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    # Startup: runs before the application starts accepting requests
    await init_async_db()
    yield
    # Shutdown: close pooled connections
    await close_async_db()


app = FastAPI(title="Movies Library", root_path=ROOT_PATH, lifespan=lifespan)


# Error taxonomy -> HTTP status

@app.exception_handler(ValidationError)
async def validation_error_handler(request: Request, exc: ValidationError):
    return JSONResponse(status_code=400, content={"detail": str(exc), "errors": exc.errors})


@app.exception_handler(ArgumentError)
async def argument_error_handler(request: Request, exc: ArgumentError):
    return JSONResponse(status_code=400, content={"detail": str(exc)})


@app.exception_handler(NotFoundError)
async def not_found_error_handler(request: Request, exc: NotFoundError):
    return JSONResponse(status_code=404, content={"detail": str(exc)})


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Report a malformed movie body the same way as a rule failure."""
    errors = exc.errors()
    if not errors or any(tuple(err["loc"][:1]) != ("body",) for err in errors):
        return await request_validation_exception_handler(request, exc)
    fields = sorted({str(err["loc"][1]) if len(err["loc"]) > 1 else "movie" for err in errors})
    return JSONResponse(status_code=400, content={"detail": INVALID_MOVIE_MESSAGE, "errors": fields})


@app.get("/health")
async def health():
    return {"status": "ok"}


# Include routers
app.include_router(movies_router)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("app.main:app", host="127.0.0.1", port=8000, reload=True)
