"""Entry point for the StepWise sample API.

A small CRUD + auth service (login, users, orders) that the sample workflows
and the end-to-end tests run against.

To run the development server:
    uvicorn main:app --reload

To run in production:
    uvicorn main:app --host 0.0.0.0 --port 8000
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from api.dependencies import initialize_store, shutdown_store
from api.exceptions import (
    ResourceNotFoundError,
    UnauthorizedError,
    generic_exception_handler,
    resource_not_found_handler,
    unauthorized_handler,
    value_error_handler,
)
from api.routes import auth as auth_routes
from api.routes import orders as order_routes
from api.routes import users as user_routes

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create the in-memory store at startup and drop it at shutdown.

    Args:
        app: The FastAPI application instance.

    Yields:
        Control back to FastAPI to handle requests.
    """
    logger.info("Starting sample API - initializing store")
    initialize_store()

    yield

    logger.info("Shutting down sample API")
    shutdown_store()


app = FastAPI(
    title="StepWise Sample API",
    description="Toy CRUD + auth backend used to exercise StepWise workflows",
    version="0.1.0",
    lifespan=lifespan,
)

# Specific exceptions before general ones
app.add_exception_handler(ResourceNotFoundError, resource_not_found_handler)
app.add_exception_handler(UnauthorizedError, unauthorized_handler)
app.add_exception_handler(ValueError, value_error_handler)
app.add_exception_handler(Exception, generic_exception_handler)

app.include_router(auth_routes.router)
app.include_router(user_routes.router)
app.include_router(order_routes.router)


@app.get("/health")
async def health_check():
    """Health check endpoint for monitoring."""
    return {"status": "healthy"}
