import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from leave_service import __version__
from leave_service.api.employees import router as employees_router
from leave_service.api.leave_requests import router as leave_requests_router
from leave_service.api.leave_types import router as leave_types_router
from leave_service.core.config import settings
from leave_service.core.db import init_db
from leave_service.core.exceptions import LeaveServiceError, StorageError

logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Leave Service",
    version=__version__,
    description="Employee leave balances and leave request lifecycle (REST + SQLAlchemy)",
)


@app.on_event("startup")
async def on_startup() -> None:
    logger.info("Starting Leave Service (database: %s)", settings.DATABASE_URL)
    init_db()


@app.exception_handler(LeaveServiceError)
async def leave_service_error_handler(request: Request, exc: LeaveServiceError):
    if isinstance(exc, StorageError):
        logger.error("Storage failure on %s %s: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


@app.get("/health")
async def health_check():
    return {
        "status": "ok",
        "service": "leave-service",
    }


@app.get("/")
async def root():
    return {
        "message": "Leave Service is running",
        "docs": "/docs",
    }


app.include_router(employees_router)
app.include_router(leave_types_router)
app.include_router(leave_requests_router)
