import tomllib
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from tradein.chat.router import router as chat_router
from tradein.config import get_app_settings, get_client_base_url
from tradein.estimate_log.router import router as estimate_log_router
from tradein.estimates.historical_data import HistoricalDataProvider
from tradein.estimates.router import router as estimates_router
from tradein.utils.logger import logger


def get_version():
    """Get version from pyproject.toml"""
    pyproject_path = Path(__file__).parent.parent / "pyproject.toml"
    with open(pyproject_path, "rb") as f:
        data = tomllib.load(f)
    return data["project"]["version"]


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Load the historical trade-in data once for the life of the process."""
    settings = get_app_settings()
    historical_data = HistoricalDataProvider(data_dir=settings.historical_data_dir)
    historical_data.load()
    app.state.historical_data = historical_data
    yield


app = FastAPI(
    title="Boat Trade-In Estimator API",
    description="Trade-in estimates and follow-up chat for boat owners",
    version=get_version(),
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[get_client_base_url()],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Render HTTP errors as {"error": ...}, keeping headers such as Allow."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Render malformed request bodies as 400 {"error": ...}."""
    problems = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"] if part != "body")
        problems.append(f"{location}: {error['msg']}" if location else error["msg"])
    logger.info("Rejected invalid request", path=request.url.path, problems=problems)
    return JSONResponse(
        status_code=400,
        content={"error": "Invalid request: " + "; ".join(problems)},
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Render anything unexpected as 500 {"error": ...}."""
    logger.exception("Unhandled error", path=request.url.path, error=str(exc))
    message = str(exc) or "An unknown server error occurred."
    return JSONResponse(status_code=500, content={"error": message})


app.include_router(estimates_router, prefix="/api")
app.include_router(chat_router, prefix="/api")
app.include_router(estimate_log_router, prefix="/api")


@app.get("/")
async def root():
    """Root endpoint."""
    return {"status": "ok", "message": "Boat Trade-In Estimator API is running"}


@app.get("/healthcheck")
async def healthcheck():
    """Health check endpoint."""
    return {"status": "ok", "message": "Boat Trade-In Estimator API is running"}
