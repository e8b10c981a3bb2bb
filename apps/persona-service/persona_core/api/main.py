"""
FastAPI app assembly: logging, middleware, error translation and router wiring.
"""
import logging
import os
from fastapi import FastAPI, status
from fastapi.middleware.cors import CORSMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse

# Configure logging
LOG_LEVEL_NAME = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_LEVEL = getattr(logging, LOG_LEVEL_NAME, logging.INFO)
logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)
logger.setLevel(LOG_LEVEL)
logger.info("app_startup: log_level=%s", LOG_LEVEL_NAME)

from persona_core.api.personas import router as personas_router
from persona_core.services import (
    PersonaDuplicateDisplayNameError,
    PersonaNotFoundError,
    PersonaValidationError,
)
from persona_core.storage import TrainingStorageError

GENERIC_ERROR_MESSAGE = "An error occurred. Please try again or contact support if the problem persists."

app = FastAPI(
    title="Persona Service",
    description="API for managing personas and their training content.",
    version="1.0.0",
)

origins = [
    "http://localhost",
    "http://localhost:3000",
    "http://localhost:8000",
]
extra_origins = os.getenv("CORS_ALLOWED_ORIGINS", "")
if extra_origins:
    origins.extend(o.strip() for o in extra_origins.split(",") if o.strip())

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(PersonaNotFoundError)
async def persona_not_found_handler(request: Request, exc: PersonaNotFoundError):
    return JSONResponse({"detail": str(exc)}, status_code=status.HTTP_404_NOT_FOUND)


@app.exception_handler(PersonaDuplicateDisplayNameError)
async def persona_duplicate_handler(request: Request, exc: PersonaDuplicateDisplayNameError):
    return JSONResponse({"detail": str(exc)}, status_code=status.HTTP_409_CONFLICT)


@app.exception_handler(PersonaValidationError)
async def persona_validation_handler(request: Request, exc: PersonaValidationError):
    return JSONResponse({"detail": str(exc)}, status_code=status.HTTP_400_BAD_REQUEST)


@app.exception_handler(TrainingStorageError)
async def training_storage_error_handler(request: Request, exc: TrainingStorageError):
    if exc.kind.is_validation:
        return JSONResponse(
            {"detail": exc.message, "kind": exc.kind.value, "details": exc.details},
            status_code=status.HTTP_400_BAD_REQUEST,
        )
    # Technical failures: log everything, expose nothing internal.
    logger.error(
        "training_storage_error: path=%s kind=%s error=%s",
        request.url.path,
        exc.kind.value,
        exc,
        exc_info=exc,
    )
    return JSONResponse(
        {"detail": GENERIC_ERROR_MESSAGE, "kind": exc.kind.value},
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


@app.get("/health")
def health_check():
    return {"status": "ok"}


app.include_router(personas_router)
