"""Print Booth API – FastAPI application."""
# Load .env before any app code that might read config
from dotenv import load_dotenv
from pathlib import Path
load_dotenv(Path(__file__).resolve().parent.parent / ".env")

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from printbooth.config import get_settings
from printbooth.database import Base, engine
# Import models so Base.metadata has all tables before create_all (schema source of truth)
from printbooth.models import PendingAccount, BoothManager  # noqa: F401
from printbooth.errors import AccountValidationError, CredentialHashError, DuplicateAccountError
from printbooth.routers import auth, booth_managers
from printbooth.utils.responses import respond_error

log = logging.getLogger("uvicorn.error")

settings = get_settings()
app = FastAPI(title=settings.app_name, debug=settings.debug)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(auth.router)
app.include_router(booth_managers.router)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return respond_error(exc.status_code, str(exc.detail))


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    errors = [
        {"field": str(err.get("loc", ["body"])[-1]), "message": err.get("msg", "Invalid value")}
        for err in exc.errors()
    ]
    return respond_error(400, "Validation failed", data={"errors": errors})


@app.exception_handler(AccountValidationError)
async def account_validation_handler(request: Request, exc: AccountValidationError):
    return respond_error(400, "Validation failed", data={"errors": [e.as_dict() for e in exc.errors]})


@app.exception_handler(DuplicateAccountError)
async def duplicate_account_handler(request: Request, exc: DuplicateAccountError):
    return respond_error(400, f"{exc.field} already exists")


@app.exception_handler(CredentialHashError)
async def credential_hash_handler(request: Request, exc: CredentialHashError):
    return respond_error(500, "Server Error", error=exc)


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    log.exception("Unhandled error on %s %s", request.method, request.url.path)
    return respond_error(500, "Server Error", error=exc)


@app.on_event("startup")
def startup():
    try:
        Base.metadata.create_all(bind=engine)
    except Exception as e:
        log.warning("Database startup failed (tables skipped). Check DATABASE_URL and network. Error: %s", e)

    if settings.pending_cleanup_enabled:
        from apscheduler.schedulers.background import BackgroundScheduler
        from printbooth.services.pending_cleanup import run_pending_cleanup_job
        scheduler = BackgroundScheduler()
        scheduler.add_job(run_pending_cleanup_job, "interval", hours=1)
        scheduler.start()
        app.state.scheduler = scheduler


@app.on_event("shutdown")
def shutdown():
    scheduler = getattr(app.state, "scheduler", None)
    if scheduler is not None:
        scheduler.shutdown(wait=False)


@app.get("/")
def root():
    return {"app": settings.app_name, "status": "ok"}


@app.get("/health")
def health():
    return {"status": "healthy"}
