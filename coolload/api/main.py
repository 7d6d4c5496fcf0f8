import logging
from datetime import datetime, timezone

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from coolload import __version__, config
from coolload.api import routes
from coolload.api.error_handler import (
    calculation_exception_handler,
    traceback_exception_handler,
    validation_exception_handler,
)
from coolload.errors import HVACCalculationError, ValidationError

config.setup_logging()
config.validate_settings()

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Cooling Load API",
    version=__version__,
    description="Room cooling load calculation by the ETD method"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.ALLOWED_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
    allow_credentials=True,
)

app.add_exception_handler(ValidationError, validation_exception_handler)
app.add_exception_handler(HVACCalculationError, calculation_exception_handler)
app.add_exception_handler(Exception, traceback_exception_handler)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    logger.info(f"REQUEST: {request.method} {request.url.path}")
    response = await call_next(request)
    logger.info(f"RESPONSE: {response.status_code}")
    return response


app.include_router(routes.router, prefix="/api/v1/cooling-load")


@app.get("/")
async def root():
    return {"message": "Cooling Load API is running"}


@app.get("/health")
async def health():
    return {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "version": __version__,
    }
