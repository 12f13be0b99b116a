# main.py
import logging
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from contextlib import asynccontextmanager
from typing import Any, Dict, List

from . import services
from .config import DEFAULT_DEPARTMENTS, LOG_LEVEL, SEED_DEPARTMENTS
from .database import AsyncSessionFactory, create_db_and_tables, engine
from .departments import router as departments_router
from .employees import router as employees_router
from .schemas import Extra, Msg

logger = logging.getLogger(__name__)


def configure_logging(level: str = LOG_LEVEL) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s"
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging()
    logger.info("Creating database and tables...")
    await create_db_and_tables()

    if SEED_DEPARTMENTS:
        async with AsyncSessionFactory() as session:
            await services.seed_departments(session, DEFAULT_DEPARTMENTS)

    yield

    logger.info("Shutting down, disposing engine")
    await engine.dispose()


app = FastAPI(
    title="Employee Management CRUD",
    description="Employee listing, search, create, update and single/batch delete over SQLModel.",
    lifespan=lifespan,
)

app.include_router(employees_router)
app.include_router(departments_router)


# --- Failure envelopes ---

def error_fields(errors: List[Dict[str, Any]]) -> Dict[str, str]:
    """Map each invalid field to its first message."""
    fields: Dict[str, str] = {}
    for error in errors:
        loc = error.get("loc") or ("body",)
        message = error.get("msg", "")
        fields.setdefault(str(loc[-1]), message.removeprefix("Value error, "))
    return fields


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    if isinstance(exc.detail, dict):
        body = Msg[Extra].fail(exc.detail)
    else:
        body = Msg[Extra].fail(msg=str(exc.detail))
    if exc.status_code >= 500:
        logger.error("%s %s -> %s", request.method, request.url.path, exc.detail)
    return JSONResponse(
        status_code=exc.status_code,
        content=body.model_dump(),
        headers=getattr(exc, "headers", None)
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    fields = error_fields(exc.errors())
    logger.info("%s %s rejected: %s", request.method, request.url.path, fields)
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content=Msg[Extra].fail({"errorFields": fields}).model_dump()
    )


@app.get("/")
def read_root():
    return {"message": "Welcome to the Employee Management CRUD API."}
