import logging
import os
from contextlib import asynccontextmanager
from copy import copy

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.routing import APIRoute

from routers import foundry_api
from utils import getLogger, init_logger, MODULE_TITLE

init_logger()

logger = getLogger(__name__)


@asynccontextmanager
async def lifespan(a: FastAPI):
    logger.critical(f"Starting {MODULE_TITLE}")
    logger.critical(f"Log Level is <{logging.getLevelName(logger.level)}>")
    settings = foundry_api.get_settings()
    logger.info(
        f"allow_merging={settings.allow_merging} "
        f"max_draw_retries={settings.max_draw_retries} "
        f"auth={'on' if settings.api_key else 'off'}"
    )
    for route in list(a.routes):
        if isinstance(route, APIRoute) and "GET" in route.methods:
            logger.debug(f"Adding HEAD route for {route.name}")
            new_route = copy(route)
            new_route.methods = {"HEAD"}
            new_route.include_in_schema = False
            a.routes.append(new_route)

    yield
    logger.critical("SHUTTING DOWN")


app = FastAPI(lifespan=lifespan)
# noinspection PyTypeChecker
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
    allow_credentials=True,
)

app.include_router(foundry_api.router)
foundry_api.attach_exception_handler(app)

if logger.level <= logging.DEBUG:
    from fastapi.exceptions import RequestValidationError
    from fastapi import Request
    from fastapi.exception_handlers import request_validation_exception_handler

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request, exc: RequestValidationError
    ):
        logger.error(f"{request.url.path} {str(exc).replace(chr(10), ' ')}")
        return await request_validation_exception_handler(request, exc)

if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host="127.0.0.1",
        port=int(os.getenv("UVICORN_PORT", "8000")),
        reload=True,
    )
