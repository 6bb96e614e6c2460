"""Task service"""

import logging
from sqlalchemy.orm import Session
from datetime import datetime
from typing import List, Optional
from app.core.exceptions import TaskNotFound
from app.models.task import Task

logger = logging.getLogger(__name__)


class TaskStore:
    """Accès aux tâches à travers une session SQLAlchemy injectée.

    Seul composant qui écrit dans la table `tasks`.
    """

    def __init__(self, db: Session):
        self.db = db

    def list_tasks(self) -> List[Task]:
        # échéance la plus lointaine d'abord, tâches sans échéance à la fin
        return self.db.query(Task).order_by(
            Task.due.desc().nulls_last(),
            Task.id.asc()
        ).all()

    def get_task(self, task_id: int) -> Task:
        task = self.db.query(Task).filter(Task.id == task_id).first()
        if not task:
            logger.debug(f"Task {task_id} not found")
            raise TaskNotFound(task_id)
        return task

    def create_task(
        self,
        description: Optional[str] = None,
        due: Optional[datetime] = None,
        completed: bool = False
    ) -> Task:
        now = datetime.utcnow()
        task = Task(
            description=description,
            due=due,
            completed=completed,
            created_at=now,
            updated_at=now
        )
        self.db.add(task)
        self.db.commit()
        self.db.refresh(task)
        logger.info(f"Task {task.id} created")
        return task

    def enable(self, task_id: int) -> Task:
        return self._set_completed(task_id, True)

    def disable(self, task_id: int) -> Task:
        return self._set_completed(task_id, False)

    def _set_completed(self, task_id: int, completed: bool) -> Task:
        task = self.get_task(task_id)
        task.completed = completed
        # explicite: onupdate ne se déclenche pas si la valeur ne change pas
        task.updated_at = max(datetime.utcnow(), task.created_at)
        self.db.commit()
        self.db.refresh(task)
        logger.info(f"Task {task_id} completed={completed}")
        return task
