import logging
import sys
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from colors import router as colors_router
from core import settings
from resistors import router as resistors_router

logging.basicConfig(
    level=settings.log_level(),
    format="%(levelname)s %(name)s: %(message)s",
    stream=sys.stdout,
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_: FastAPI):
    # The color table is a module constant; nothing to open or close.
    logger.info("api_startup")
    try:
        yield
    finally:
        logger.info("api_shutdown")


app = FastAPI(title="Resistor Bands API", version="1.0.0", lifespan=lifespan)

# Allow local frontend dev server to call this API from the browser.
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_allow_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(colors_router.router, tags=["colors"])
app.include_router(resistors_router.router, tags=["resistors"])


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}


@app.get("/")
def root() -> dict:
    return {"message": "resistor-bands api"}


def run() -> None:
    uvicorn.run(app, host=settings.api_host(), port=settings.api_port())


if __name__ == "__main__":
    run()
