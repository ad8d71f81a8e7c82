import sys
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, RedirectResponse
from loguru import logger
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.config import APPNAME, VERSION, CORS_ORIGINS, HOST, LOG_LEVEL, PORT
from src.database import Database
from src.routers import (auth_router, surname_router,
                         election_results_router, bjp_results_router)
from src.utils.errors import ApiError

# Single stderr sink at the configured level
logger.remove()
logger.add(sys.stderr, level=LOG_LEVEL)


@asynccontextmanager
async def lifespan(app: FastAPI):
    database = Database()
    try:
        database.ping()
    except Exception:
        logger.exception("Failed to connect to the database")
        database.close()
        raise
    logger.info("Database connected")
    app.state.database = database
    yield
    database.close()


# Defining the application
app = FastAPI(
    title=APPNAME,
    version=VERSION,
    lifespan=lifespan,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE"],
    allow_headers=["Content-Type", "Authorization"],
)


@app.exception_handler(ApiError)
async def api_error_handler(request: Request, exc: ApiError):
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    else:
        logger.warning(f"{request.method} {request.url.path} rejected ({exc.status_code}): {exc.message}")
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    message = errors[0].get("msg", "Invalid request") if errors else "Invalid request"
    logger.warning(f"{request.method} {request.url.path} invalid body: {message}")
    return JSONResponse(
        status_code=400,
        content={"success": False, "error": "Validation error", "message": message},
    )


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "error": "Request failed", "message": exc.detail},
        headers=getattr(exc, "headers", None),
    )


# Including all the routes
app.include_router(auth_router)
app.include_router(surname_router)
app.include_router(election_results_router)
app.include_router(bjp_results_router)


@app.get("/")
def main_function():
    """
    Redirect to documentation (`/docs/`).
    """
    return RedirectResponse(url="/docs/")


@app.get("/health")
def health_check():
    return {"success": True, "message": "All services are working fine"}


if __name__ == "__main__":
    uvicorn.run(app, host=HOST, port=PORT)
