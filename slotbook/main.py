from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import time
import logging

from .api.deps import status_for_error
from .api.v1.schedules import router as schedules_router
from .api.v1.reports import router as reports_router
from .core.config import settings
from .core.database import init_db
from .core.exceptions import SlotbookError

logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create missing tables before serving."""
    logger.info(f"Starting {settings.APP_NAME} on {settings.get_database_url.split(':', 1)[0]}")
    init_db()
    yield

app = FastAPI(
    title=settings.APP_NAME,
    version=settings.VERSION,
    description="Provider schedules, slot generation and slot booking",
    openapi_url="/api/v1/openapi.json",
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.middleware("http")
async def log_request_timing(request: Request, call_next):
    start_time = time.time()
    response = await call_next(request)
    elapsed = time.time() - start_time
    response.headers["X-Process-Time"] = str(elapsed)

    logger.info(f"{request.method} {request.url.path} -> {response.status_code} in {elapsed:.4f}s")
    return response

@app.exception_handler(SlotbookError)
async def domain_error_handler(request: Request, exc: SlotbookError):
    status_code = status_for_error(exc)
    if status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc}", exc_info=exc.__cause__)
        detail = "Database operation failed"
    else:
        detail = str(exc)

    return JSONResponse(
        status_code=status_code,
        content={"error": type(exc).__name__, "detail": detail}
    )

app.include_router(schedules_router, prefix="/api/v1")
app.include_router(reports_router, prefix="/api/v1")

@app.get("/health")
def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "version": settings.VERSION}

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "slotbook.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG,
        log_level="info"
    )
