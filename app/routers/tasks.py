from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List

from app.core.database import get_db
from app.schemas.task import TaskResponse
from app.services.task_service import TaskStore

router = APIRouter(prefix="/tasks", tags=["tasks"])
# page d'accueil = liste des tâches
root_router = APIRouter(tags=["tasks"])


def get_task_store(db: Session = Depends(get_db)) -> TaskStore:
    return TaskStore(db)


@root_router.get("/", response_model=List[TaskResponse])
@router.get("", response_model=List[TaskResponse])
def list_tasks(store: TaskStore = Depends(get_task_store)):
    # Triées par échéance décroissante
    return store.list_tasks()


@router.get("/{task_id}", response_model=TaskResponse)
def get_task(task_id: int, store: TaskStore = Depends(get_task_store)):
    return store.get_task(task_id)


@router.patch("/{task_id}/disable", response_model=TaskResponse)
def disable_task(task_id: int, store: TaskStore = Depends(get_task_store)):
    return store.disable(task_id)


@router.patch("/{task_id}/enable", response_model=TaskResponse)
def enable_task(task_id: int, store: TaskStore = Depends(get_task_store)):
    return store.enable(task_id)
