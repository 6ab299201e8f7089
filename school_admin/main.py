# /school_admin/main.py

# --- Core FastAPI Imports ---
import logging
from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager

# --- Application-specific Router Imports ---
from .routers import (
    classes_router,
    students_router,
    attendance_router,
    dashboard_router,
)

# --- Startup Imports ---
from . import config
from .db.database import init_db
from .logging_config import configure_logging

logger = logging.getLogger(__name__)

# --- Application Lifecycle Management ---
@asynccontextmanager
async def lifespan(app: FastAPI):
    # This code runs ONCE when the application starts up.
    configure_logging(config.LOG_LEVEL, config.LOG_FILE)
    init_db()
    logger.info("School Admin API started")
    yield
    # This code runs ONCE when the application shuts down.
    logger.info("School Admin API stopped")

# --- FastAPI Application Instance Creation ---
app = FastAPI(
    title="School Admin API",
    description="Classes, students and daily attendance for a small school.",
    version="1.0.0",
    lifespan=lifespan
)

# --- Middleware Configuration ---
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# --- Request Validation ---
# Malformed bodies are a client error: answer 400 with the offending fields
# instead of FastAPI's default 422.
@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    logger.info("Rejected %s %s: invalid input", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": "Invalid input", "issues": jsonable_encoder(exc.errors())},
    )

# --- API Router Inclusion ---
app.include_router(dashboard_router.router, prefix="/api/dashboard", tags=["Dashboard"])
app.include_router(classes_router.router, prefix="/api/classes", tags=["Classes"])
app.include_router(students_router.router, prefix="/api/students", tags=["Students"])
app.include_router(attendance_router.router, prefix="/api/attendance", tags=["Attendance"])

# --- Root / Health Check Endpoint ---
@app.get("/", tags=["Health Check"])
async def read_root():
    """A simple health check endpoint to confirm the API is online."""
    return {"status": "School Admin API is running!", "version": app.version}
