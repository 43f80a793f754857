"""
Clubhouse - FastAPI web server

REST API for the club (players, coaches, teams, matches, stats, users)
plus a single landing page with a login button.

Data source: SQLAlchemy (SQLite by default, any URL via DATABASE_URL)
"""
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, JSONResponse
from fastapi.templating import Jinja2Templates
from loguru import logger
from pydantic import ValidationError

from clubhouse import __version__
from clubhouse.auth import auth_router
from clubhouse.auth.repository import UserRepository
from clubhouse.auth.service import UserService
from clubhouse.club import club_router
from clubhouse.config import get_settings
from clubhouse.database import SessionLocal, init_db
from clubhouse.errors import ClubError

TEMPLATES_DIR = Path(__file__).parent / "templates"

settings = get_settings()

# FastAPI app
app = FastAPI(
    title=settings.APP_NAME,
    description=f"{settings.CLUB_NAME} - squad, staff, fixtures and statistics",
    version=__version__
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

# Routers
app.include_router(auth_router)
app.include_router(club_router)


# ==================== Error handlers ====================

def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"status": "error", "message": message})


def _validation_message(errors) -> str:
    """First validation error as a readable message"""
    if not errors:
        return "Invalid request"
    err = errors[0]
    msg = str(err.get("msg", "Invalid request"))
    if msg.startswith("Value error, "):
        return msg[len("Value error, "):]
    loc = [str(part) for part in err.get("loc", ()) if part not in ("body", "query", "path")]
    return f"{'.'.join(loc)}: {msg}" if loc else msg


@app.exception_handler(ClubError)
async def club_error_handler(request: Request, exc: ClubError):
    return _error(exc.status_code, exc.message)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    return _error(400, _validation_message(exc.errors()))


@app.exception_handler(ValidationError)
async def model_validation_handler(request: Request, exc: ValidationError):
    return _error(400, _validation_message(exc.errors()))


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return _error(500, "Internal server error")


# ==================== Lifecycle ====================

@app.on_event("startup")
def startup_event():
    """Create tables and the bootstrap admin"""
    init_db()

    if settings.ADMIN_EMAIL and settings.ADMIN_PASSWORD:
        db = SessionLocal()
        try:
            UserService(UserRepository(db)).ensure_admin(settings.ADMIN_EMAIL, settings.ADMIN_PASSWORD)
        finally:
            db.close()

    logger.info(f"{settings.APP_NAME} started for {settings.CLUB_NAME}")


@app.on_event("shutdown")
def shutdown_event():
    logger.info(f"{settings.APP_NAME} stopped")


# ==================== Pages ====================

@app.get("/", response_class=HTMLResponse)
def home(request: Request):
    """Landing page"""
    return templates.TemplateResponse(request, "index.html", {
        "title": settings.CLUB_NAME,
        "club_name": settings.CLUB_NAME,
    })


@app.get("/health")
def health():
    return {"status": "ok", "app": settings.APP_NAME, "version": __version__}
