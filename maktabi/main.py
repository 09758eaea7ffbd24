# maktabi/main.py
"""
FastAPI application entry point.
Includes security middleware, domain + global error handlers, and all routers.
"""

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.base import BaseHTTPMiddleware
from maktabi.routers import (
    vehicles, permits, fuel, employees, leaves, holidays, training,
    user_requests, correspondence, announcements, settings as settings_router, audit, health, dashboard,
)
from maktabi.database import create_tables
from maktabi.config import settings
from maktabi.exceptions import MaktabiError
from maktabi.utils.logger import get_logger
import time

logger = get_logger(__name__)

app = FastAPI(
    title="Maktabi Office Administration API",
    description="Fleet ledger, HR and correspondence for a government office.",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
)

# ── CORS (the browser front end is served separately) ───────────────────────
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],   # Restrict to the front end origin in production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ── API Key Middleware ───────────────────────────────────────────────────────
class APIKeyMiddleware(BaseHTTPMiddleware):
    """
    Optional shared API key in front of every endpoint except health and docs.
    Set API_KEY in .env. Leave empty to disable.
    """
    open_paths = {"/api/v1/health", "/docs", "/redoc", "/openapi.json"}

    async def dispatch(self, request: Request, call_next):
        if request.url.path in self.open_paths or not settings.API_KEY:
            return await call_next(request)

        api_key = request.headers.get("X-API-Key") or request.query_params.get("api_key")
        if api_key != settings.API_KEY:
            return JSONResponse(
                status_code=status.HTTP_401_UNAUTHORIZED,
                content={"detail": "Invalid or missing API key"},
            )
        return await call_next(request)


if settings.API_KEY:
    app.add_middleware(APIKeyMiddleware)


# ── Request Timing Middleware ────────────────────────────────────────────────
@app.middleware("http")
async def log_requests(request: Request, call_next):
    start = time.time()
    response = await call_next(request)
    duration = round((time.time() - start) * 1000, 2)
    logger.debug(f"{request.method} {request.url.path} → {response.status_code} ({duration}ms)")
    return response


# ── Exception Handlers ───────────────────────────────────────────────────────
@app.exception_handler(MaktabiError)
async def domain_exception_handler(request: Request, exc: MaktabiError):
    logger.info(f"{request.method} {request.url.path} rejected ({exc.status_code}): {exc.detail}")
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail})


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled exception on {request.url.path}: {exc}", exc_info=True)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


# ── Routers ──────────────────────────────────────────────────────────────────
app.include_router(vehicles.router,        prefix="/api/v1", tags=["🚗 Vehicles"])
app.include_router(permits.router,         prefix="/api/v1", tags=["📝 Vehicle Permits"])
app.include_router(fuel.router,            prefix="/api/v1", tags=["⛽ Fuel & Reports"])
app.include_router(employees.router,       prefix="/api/v1", tags=["👥 Employees"])
app.include_router(leaves.router,          prefix="/api/v1", tags=["🌴 Leaves"])
app.include_router(holidays.router,        prefix="/api/v1", tags=["📅 Public Holidays"])
app.include_router(training.router,        prefix="/api/v1", tags=["🎓 Training"])
app.include_router(user_requests.router,   prefix="/api/v1", tags=["💬 Suggestions"])
app.include_router(correspondence.router,  prefix="/api/v1", tags=["✉️  Correspondence"])
app.include_router(announcements.router,   prefix="/api/v1", tags=["📣 Announcements"])
app.include_router(settings_router.router, prefix="/api/v1", tags=["⚙️  Settings"])
app.include_router(audit.router,           prefix="/api/v1", tags=["🧾 Audit Log"])
app.include_router(dashboard.router,       prefix="/api/v1", tags=["📊 Dashboard"])
app.include_router(health.router,          prefix="/api/v1", tags=["💚 Health"])


# ── Startup ───────────────────────────────────────────────────────────────────
@app.on_event("startup")
async def startup():
    logger.info("🚀 Maktabi backend starting up...")
    create_tables()
    logger.info("✅ Database tables ready")
    logger.info(f"🌐 Listening on http://{settings.BACKEND_HOST}:{settings.BACKEND_PORT}")
    logger.info("📖 API docs at /docs")


@app.on_event("shutdown")
async def shutdown():
    logger.info("🛑 Maktabi backend shutting down...")
