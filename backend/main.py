from fastapi import FastAPI, Depends, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager
from sqlalchemy import text
from sqlalchemy.orm import Session
from database import engine, get_db
from init_db import init_database
from api import authors, books
from config.app_config import get_log_level, get_log_file, get_server_host, get_server_port
from constants import HTTPStatus
from dtos.response import HealthResponse
from services.schema_validator import SchemaValidator
from utils.logging_utils import configure_logging, set_logging_context, clear_logging_context
import logging
import uuid

# Configure logging (console, plus rotating file unless disabled)
LOG_FILE = get_log_file()
configure_logging(get_log_level(), LOG_FILE)

logger = logging.getLogger(__name__)
logger.info(f"Logging initialized: {LOG_FILE or 'console only'}")

SCHEMA_STATUS = {"valid": True, "issues": []}


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifespan - startup and shutdown"""
    global SCHEMA_STATUS

    # Startup
    init_database(engine)
    SCHEMA_STATUS = SchemaValidator.check(engine)
    if not SCHEMA_STATUS["valid"]:
        logger.error(f"Database schema validation failed: {SCHEMA_STATUS['issues']}")
    else:
        logger.info("Database schema valid - ready to serve requests")

    yield

    # Shutdown
    logger.info("Shutting down...")
    engine.dispose()


app = FastAPI(
    title="Book Manager API",
    description="Manage authors and books with many-to-many authorship",
    version="0.1.0",
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def request_logging_context(request: Request, call_next):
    """Tag every log record of a request with a request id."""
    request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
    set_logging_context(request_id=request_id, method=request.method, path=request.url.path)
    try:
        response = await call_next(request)
    finally:
        clear_logging_context()
    response.headers["X-Request-ID"] = request_id
    return response


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    """Malformed request bodies and parameters are client errors: 400, not 422."""
    logger.warning(f"{request.method} {request.url.path} - Invalid request: {exc.errors()}")
    return JSONResponse(
        status_code=HTTPStatus.BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())}
    )


# Include API routers
app.include_router(authors.router, tags=["authors"])
app.include_router(books.router, tags=["books"])


@app.get("/health", response_model=HealthResponse)
def health_check(db: Session = Depends(get_db)):
    """Report service health and database reachability"""
    try:
        db.execute(text("SELECT 1"))
        database_status = "ok"
    except Exception as e:
        logger.error(f"Health check - database unreachable: {e}", exc_info=True)
        database_status = "unreachable"

    healthy = database_status == "ok" and SCHEMA_STATUS["valid"]
    return HealthResponse(
        status="ok" if healthy else "degraded",
        database=database_status,
        issues=SCHEMA_STATUS["issues"]
    )


if __name__ == "__main__":
    import uvicorn

    host = get_server_host()
    port = get_server_port()
    logger.info(f"Starting Book Manager on http://{host}:{port}...")
    uvicorn.run(app, host=host, port=port)
