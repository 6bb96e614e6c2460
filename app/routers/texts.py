from fastapi import APIRouter, Depends

from app.core.exceptions import NotificationFailed
from app.routers.tasks import get_task_store
from app.schemas.task import NotificationResponse
from app.services.notification_service import Notifier, get_notifier
from app.services.task_service import TaskStore

router = APIRouter(prefix="/text", tags=["texts"])


@router.get("/{task_id}", response_model=NotificationResponse)
def send_sms(
    task_id: int,
    store: TaskStore = Depends(get_task_store),
    notifier: Notifier = Depends(get_notifier)
):
    """Envoie un SMS au sujet de la tâche.

    `channel` vaut "log" quand aucune passerelle SMS n'est configurée:
    le message est alors seulement écrit dans les logs et `sent` vaut False.
    """
    task = store.get_task(task_id)
    if not notifier.notify(task):
        raise NotificationFailed(task_id)
    return NotificationResponse(task_id=task_id, sent=notifier.channel == "sms", channel=notifier.channel)
