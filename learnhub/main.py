# learnhub/main.py
import logging

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from learnhub.core.config import settings
from learnhub.core.errors import InvalidInput, ServiceError, StoreFailure
from learnhub.core.logging_config import setup_logging
from learnhub.db.base import Base
from learnhub.db.session import engine
from learnhub.api.v1.endpoints import (
    assignments,
    auth,
    classes,
    feedback,
    health,
    payments,
    stats,
    teacher_requests,
    users,
)
from learnhub import models  # noqa

logger = logging.getLogger(__name__)

app = FastAPI(title=settings.PROJECT_NAME)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.on_event("startup")
def on_startup():
    setup_logging()
    Base.metadata.create_all(bind=engine)
    logger.info(f"{settings.PROJECT_NAME} started")


def _error_response(exc: ServiceError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.error, "detail": exc.detail},
    )


@app.exception_handler(ServiceError)
async def handle_service_error(request: Request, exc: ServiceError):
    return _error_response(exc)


@app.exception_handler(RequestValidationError)
async def handle_validation_error(request: Request, exc: RequestValidationError):
    fields = sorted({".".join(str(p) for p in err["loc"][1:]) for err in exc.errors()} - {""})
    if not fields:
        return _error_response(InvalidInput("Invalid request body"))
    return _error_response(InvalidInput(f"Missing or invalid fields: {', '.join(fields)}"))


@app.exception_handler(SQLAlchemyError)
async def handle_store_error(request: Request, exc: SQLAlchemyError):
    logger.error(f"Store failure on {request.method} {request.url.path}", exc_info=exc)
    return _error_response(StoreFailure())


@app.exception_handler(Exception)
async def handle_unexpected_error(request: Request, exc: Exception):
    logger.error(f"Unhandled error on {request.method} {request.url.path}", exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "ServerError", "detail": "Internal server error"},
    )


@app.get("/")
def read_root():
    return {"message": "LearnHub server is running"}


API_PREFIX = "/api/v1"

app.include_router(auth.router, prefix=API_PREFIX)
app.include_router(users.router, prefix=API_PREFIX)
app.include_router(teacher_requests.router, prefix=API_PREFIX)
app.include_router(classes.router, prefix=API_PREFIX)
app.include_router(assignments.router, prefix=API_PREFIX)
app.include_router(payments.router, prefix=API_PREFIX)
app.include_router(feedback.router, prefix=API_PREFIX)
app.include_router(stats.router, prefix=API_PREFIX)
app.include_router(health.router, prefix=API_PREFIX)


def run():
    uvicorn.run("learnhub.main:app", host="0.0.0.0", port=settings.PORT)


if __name__ == "__main__":
    run()
