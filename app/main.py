"""
Main entrypoint of the application

This module contains the main entrypoint of the application. It is responsible
for creating the FastAPI application and setting up the routes and middleware.
"""
from contextlib import asynccontextmanager
import os
import platform
import fastapi
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from starlette.middleware.cors import CORSMiddleware
from sqlalchemy.exc import IntegrityError

from app.api.router import api_router, tags_metadata
from app.core import db as database
from app.core.config import settings, logger
from app.core.utils import app_path, custom_generate_unique_id
from app.services.author import init_default_author


@asynccontextmanager
async def lifespan(app: FastAPI):  # pragma: no cover   # pylint: disable=unused-argument, redefined-outer-name
    """ Lifespan hook to run on application startup and shutdown. """
    logger.info("Starting up...")
    if settings.LOG_FILE_ENABLED:
        os.makedirs(app_path(os.path.join("data", "logs")), exist_ok=True)
    # Database
    logger.info("Creating or Loading the database tables...")
    await database.sessionmanager.init()
    # Init Default Author and Roles
    await init_default_author()
    logger.success("Initialization completed.")
    yield  # This is when the application code will run
    logger.info("Shutting down...")
    if database.sessionmanager.engine is not None:
        # Close the DB connection
        await database.sessionmanager.close()
    logger.info("Shutdown completed.")


app = FastAPI(
    debug=settings.LOG_LEVEL == "DEBUG",
    title=settings.PROJECT_NAME,
    summary="A bulletin board: authors publish announcements under headings.",
    description="""
Authors register, login and publish announcements classified under headings.

Authors can save **suitable ads** (a keyword and an optional maximum price): they
are notified by email when a matching announcement is published.
""",
    version="1.0.0",
    openapi_tags=tags_metadata,
    lifespan=lifespan,
    contact={
        "name": settings.CONTACT_EMAIL.split("@")[0] if settings.CONTACT_EMAIL else "Contact",
        "email": settings.CONTACT_EMAIL,
    },
    generate_unique_id_function=custom_generate_unique_id,
)

app.include_router(api_router, prefix=settings.API_STR)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ----- Exceptions Handler ----- #


@app.exception_handler(IntegrityError)
async def _catch_integrity_error(request: Request, exc: IntegrityError):  # pylint: disable=unused-argument
    # NOTE: Pretty-up the unique constraint violations, e.g. "UNIQUE constraint failed: authors.name"
    error = str(exc.orig)
    logger.warning(f"Integrity error: {error}")
    if error.startswith("UNIQUE"):
        return JSONResponse(
            status_code=400,
            content={"detail": f"This {error.split(' ')[-1]} already exists."},
        )
    return JSONResponse(status_code=400, content={"detail": error})


@app.exception_handler(ValueError)
async def _catch_value_error(request: Request, exc: ValueError):  # pylint: disable=unused-argument
    return JSONResponse(status_code=400, content={"detail": str(exc)})


# ----- Debugging ----- #


@app.get("/ping", tags=["DEBUG"])
def _ping():
    logger.info("Pong!")
    return "pong"


@app.get("/version", tags=["DEBUG"])
def _version():
    return JSONResponse(jsonable_encoder({
        "FastAPI_Version": fastapi.__version__,
        "Project_Version": app.version,
        "Python_Version": platform.python_version(),
    }))
