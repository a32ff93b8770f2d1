"""
Main application entry point.
"""

import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import HTMLResponse, JSONResponse

from app.api.v1 import dependencies
from app.api.v1.book_endpoints import router as books_router
from app.api.v1.converters import domain_failures_to_api, request_errors_to_failures
from app.infrastructure.db.database_initializer import initialize_database

# Configure logging
logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

STATUS_PAGE = """<!DOCTYPE html>
<html lang="en">
<head>
    <title>Library API</title>
</head>
<body>
    <h1>Library API is up</h1>
    <p>Browse the catalog at <a href="/books">/books</a> or read the API docs at <a href="/docs">/docs</a>.</p>
</body>
</html>"""


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create the catalog table before serving requests."""
    initialize_database(dependencies.DB_PATH)
    if dependencies.API_KEY is None:
        logger.warning("API_KEY is not set, write endpoints are unauthenticated")
    yield


app = FastAPI(
    title="Library API",
    description="A catalog of books keyed by ISBN-13.",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)


@app.exception_handler(RequestValidationError)
async def request_validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report malformed request bodies in the same shape as domain validation failures."""
    failures = request_errors_to_failures(exc.errors())
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=domain_failures_to_api(failures),
    )


# Include API routers
app.include_router(books_router, tags=["books"])


@app.get("/status", response_class=HTMLResponse, include_in_schema=False)
def status_page() -> str:
    """Static page showing the service is up."""
    return STATUS_PAGE


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("app.main:app", host="0.0.0.0", port=8000, reload=True)
