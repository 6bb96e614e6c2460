import logging
import uvicorn
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from app.core import database
from app.core.config import settings
from app.core.exceptions import TaskNotFound, NotificationFailed
from app.core.logging_config import configure_logging
from app.routers import health, tasks, texts

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Init DB
    configure_logging(settings.LOG_LEVEL)
    database.Base.metadata.create_all(bind=database.engine)
    logger.info("Task board started")
    yield
    database.engine.dispose()


app = FastAPI(
    title="Task Board API",
    version="0.1.0",
    lifespan=lifespan
)


@app.exception_handler(TaskNotFound)
async def task_not_found_handler(request: Request, exc: TaskNotFound):
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"detail": "Task not found"})


@app.exception_handler(NotificationFailed)
async def notification_failed_handler(request: Request, exc: NotificationFailed):
    logger.warning(str(exc))
    return JSONResponse(status_code=status.HTTP_502_BAD_GATEWAY, content={"detail": "SMS could not be sent"})


# Routes
app.include_router(health.router, prefix="/health")
app.include_router(tasks.root_router)
app.include_router(tasks.router)
app.include_router(texts.router)


def run():
    """Point d'entrée `taskboard` (voir pyproject.toml)"""
    uvicorn.run("app.main:app", host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()
