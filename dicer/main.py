from __future__ import annotations

import logging
from pathlib import Path

from fastapi import FastAPI
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.requests import Request

from dicer.config import settings
from dicer.errors import DiceError
from dicer.routers import dice, pages

logging.basicConfig(level=settings.log_level.upper())

logger = logging.getLogger(__name__)

app = FastAPI(title="Dicer", debug=settings.debug)

app.mount(
    "/static",
    StaticFiles(directory=Path(__file__).parent / "static"),
    name="static",
)
app.include_router(pages.router)
app.include_router(dice.router)


@app.exception_handler(DiceError)
async def dice_error_handler(request: Request, exc: DiceError) -> JSONResponse:
    logger.info("Rejected roll: %s", exc)
    return JSONResponse(status_code=422, content={"detail": str(exc)})
