"""
HireHub - Main Application

FastAPI backend with:
- SQLAlchemy ORM over PostgreSQL (SQLite works for local runs and tests)
- JWT authentication with Employer, JobSeeker and Admin roles
- Email notifications (logged or sent over SMTP)
- Built web client served from settings.frontend_dir when present

Run: uvicorn hirehub.main:app --reload
"""

import logging
import os
import traceback

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse
from fastapi.staticfiles import StaticFiles

from hirehub.api.routes import api_router
from hirehub.core.config import get_settings
from hirehub.core.exceptions import HireHubError, ValidationError
from hirehub.db.database import get_db_session, init_db, test_db_connection
from hirehub.services.email_service import get_email_service
from hirehub.services.user_service import UserService
from hirehub.utils.file_upload import UPLOADS_URL_PREFIX

settings = get_settings()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

# Get the project root directory
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
FRONTEND_DIR = (
    settings.frontend_dir if os.path.isabs(settings.frontend_dir)
    else os.path.join(PROJECT_ROOT, settings.frontend_dir)
)

# Create FastAPI app
app = FastAPI(
    title="HireHub",
    description="""
    A job board where employers post jobs and job seekers apply with their resumes.

    ## Features
    - **Users**: Registration, JWT login, password reset by email, account deactivation
    - **Employers / Job Seekers**: Profiles linked to user accounts
    - **Jobs**: Posting and search by title, location, skill and company
    - **Applications**: Apply with a resume, status tracking, shortlists and interviews
    - **Resumes**: Upload PDF/DOCX/TXT, one default resume per job seeker
    - **Notifications**: In-app notifications with optional email copies
    - **Admin**: Counts and moderation of users, jobs and applications

    Routes are served under /api/v1 and, unversioned, under /api.
    """,
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc"
)

# CORS middleware (the web client's dev server origins)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ============================================================
# ERROR HANDLERS
# ============================================================

@app.exception_handler(HireHubError)
async def hirehub_error_handler(request: Request, exc: HireHubError):
    if exc.status_code >= 500:
        logger.error("Request %s %s failed: %s", request.method, request.url.path, exc.message)
    else:
        logger.info("Request %s %s -> %s: %s", request.method, request.url.path, exc.status_code, exc.message)
    content = {"error": exc.message}
    if isinstance(exc, ValidationError):
        content["details"] = exc.details
    return JSONResponse(status_code=exc.status_code, content=content)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Malformed request bodies and parameters are client errors (400)."""
    details = {}
    for error in exc.errors():
        field = ".".join(str(part) for part in error.get("loc", ()))
        details.setdefault(field, []).append(error.get("msg", "Invalid value"))
    return JSONResponse(
        status_code=400,
        content={"error": "One or more validation errors occurred.", "details": details},
    )


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception("Unhandled exception on %s %s", request.method, request.url.path)
    if settings.debug:
        return JSONResponse(
            status_code=500,
            content={"error": str(exc), "details": traceback.format_exc()},
        )
    return JSONResponse(status_code=500, content={"error": "An unexpected error occurred."})


# Include API routes; the unversioned alias is what the web client calls
app.include_router(api_router, prefix="/api/v1")
app.include_router(api_router, prefix="/api", include_in_schema=False)

# Uploaded resume files
os.makedirs(settings.upload_dir, exist_ok=True)
app.mount(f"/{UPLOADS_URL_PREFIX}", StaticFiles(directory=settings.upload_dir), name="uploads")

# Serve static files of the built client
if os.path.isdir(os.path.join(FRONTEND_DIR, "assets")):
    app.mount("/assets", StaticFiles(directory=os.path.join(FRONTEND_DIR, "assets")), name="assets")


# Startup event
@app.on_event("startup")
async def startup_event():
    """Create missing tables and purge accounts whose scheduled deletion is due."""
    try:
        init_db()
        logger.info("Database tables ready")
    except Exception as e:
        logger.error("Database initialization failed: %s", e)
        return

    try:
        with get_db_session() as db:
            purged = UserService(db, get_email_service()).purge_scheduled_deletions()
        logger.info("Scheduled deletion purge removed %d accounts", purged)
    except Exception as e:
        logger.error("Scheduled deletion purge failed: %s", e)


# Serve web frontend for root path
@app.get("/", tags=["Frontend"])
async def serve_frontend():
    """Serve the web frontend."""
    index_path = os.path.join(FRONTEND_DIR, "index.html")
    if os.path.exists(index_path):
        return FileResponse(index_path)
    return {"status": "healthy", "app": "HireHub", "message": "Frontend not found. API is running."}


@app.get("/health", tags=["Health"])
async def health_check():
    """Detailed health check."""
    database_ok = test_db_connection()
    return {
        "status": "healthy" if database_ok else "degraded",
        "database": "connected" if database_ok else "disconnected",
        "email_backend": settings.email_backend,
    }
