import logging
import time
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from app.api.account import router as account_router
from app.api.games import router as games_router
from app.api.identity import router as identity_router
from app.api.schedules import router as schedules_router
from app.api.users import router as users_router
from app.core.config import API_PREFIX, LOG_LEVEL, ADMIN_NAME, ADMIN_EMAIL, ADMIN_PASSWORD
from app.core.db import SessionLocal
from app.core.exceptions import ServiceError
from app.services.registration_service import ensure_admin
import app.core.events  # Import so the ORM event listeners get registered

logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if ADMIN_EMAIL and ADMIN_PASSWORD:
        with SessionLocal() as db:
            ensure_admin(db, ADMIN_NAME or "admin", ADMIN_EMAIL, ADMIN_PASSWORD)
    yield


app = FastAPI(title="Game Partner Scheduler", lifespan=lifespan)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    start = time.perf_counter()
    response = await call_next(request)
    elapsed = time.perf_counter() - start
    logger.info(f"{request.method} {request.url.path} - {response.status_code} - {elapsed:.4f}s")
    return response


@app.exception_handler(ServiceError)
async def service_error_handler(request: Request, exc: ServiceError):
    """Map service errors to their HTTP status with a plain-text message"""
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path}: {exc.message}")
    headers = {"WWW-Authenticate": "Bearer"} if exc.status_code == 401 else None
    return PlainTextResponse(exc.message, status_code=exc.status_code, headers=headers)


# API routes
app.include_router(identity_router, prefix=API_PREFIX, tags=["Identity"])
app.include_router(account_router, prefix=f"{API_PREFIX}/auth", tags=["Auth"])
app.include_router(games_router, prefix=f"{API_PREFIX}/games", tags=["Games"])
app.include_router(schedules_router, prefix=f"{API_PREFIX}/schedules", tags=["Schedules"])
app.include_router(users_router, prefix=f"{API_PREFIX}/users", tags=["Users"])

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("main:app", host="0.0.0.0", port=8080, reload=True)
