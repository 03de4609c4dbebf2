from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager
import logging

from .. import __version__
from .routes import router
from ..core.exceptions import HolidexError, NotFoundError
from ..core.registry import JurisdictionRegistry


logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: register every bundled jurisdiction
    JurisdictionRegistry.discover_jurisdictions()
    logger.info("%d jurisdictions available", len(JurisdictionRegistry.list_jurisdictions()))
    yield


async def holidex_error_handler(request: Request, exc: HolidexError) -> JSONResponse:
    status_code = 404 if isinstance(exc, NotFoundError) else 422
    return JSONResponse(status_code=status_code, content={"detail": str(exc)})


def create_app() -> FastAPI:
    app = FastAPI(
        title="holidex",
        description="Public, bank and observance holidays per jurisdiction and year",
        version=__version__,
        lifespan=lifespan
    )

    app.include_router(router)
    app.add_exception_handler(HolidexError, holidex_error_handler)

    return app


app = create_app()
