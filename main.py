import sys
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from config import settings
from controllers.controller_books import router as books_router
from db.database import close_database, init_database
from exceptions.handlers import register_exception_handlers

from loguru import logger


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_database()
    try:
        yield
    finally:
        close_database()


app = FastAPI(title="Books API", lifespan=lifespan)

app.include_router(books_router)
register_exception_handlers(app)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Access-Control-Allow-Origin", "Access-Control-Allow-Headers", "Content-Type"]
)

if __name__ == "__main__":
    logger.remove()
    logger.add(sys.stderr, level=settings.LOG_LEVEL)
    logger.add(settings.LOG_FILE, retention=settings.LOG_RETENTION, level=settings.LOG_LEVEL)
    uvicorn.run("main:app", host=settings.HOST, port=settings.PORT)
