from fastapi import FastAPI

from daily_mood import __version__
from daily_mood.config import LOG_LEVEL
from daily_mood.core import configure_logging

from .routes import router

configure_logging(LOG_LEVEL)

app = FastAPI(
    title="Daily Mood API",
    version=__version__,
    description="Daily listening mood, classified into one of five elements.",
)

app.include_router(router, tags=["mood"])
