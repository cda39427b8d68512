import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.api.health import router as health_router
from app.api.routes_admin import router as admin_router
from app.api.routes_catalogue import router as catalogue_router
from app.api.routes_dashboard import router as dashboard_router
from app.config import settings
from app.db import init_db
from app.errors import CatalogError, InvalidInput

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # startup
    init_db()
    if not settings.API_SECRET_KEY:
        logger.warning("API_SECRET_KEY is not set; create/update requests will be rejected")
    yield


app = FastAPI(title="Storefront Catalog - Backend", version="0.1.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.FRONTEND_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(CatalogError)
async def catalog_error_handler(request: Request, exc: CatalogError):
    # StoreUnavailable is logged with its cause where it is raised; only the
    # generic message leaves the process
    body = {"success": False, "error": exc.message}
    if isinstance(exc, InvalidInput) and exc.fields:
        body["details"] = exc.fields
    return JSONResponse(status_code=exc.status_code, content=body)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=400,
        content={"success": False, "error": "Invalid request parameters"},
    )


app.include_router(health_router, prefix="/api", tags=["health"])

app.include_router(catalogue_router, prefix="/api/products", tags=["catalogue"])

app.include_router(admin_router)

app.include_router(dashboard_router)
