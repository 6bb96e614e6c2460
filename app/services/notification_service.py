"""
Service SMS - envoi d'un texto à propos d'une tâche via une passerelle HTTP
"""

import requests
import logging
from typing import Protocol
from app.core.config import settings
from app.models.task import Task

logger = logging.getLogger(__name__)


class Notifier(Protocol):
    # "sms" = passerelle réelle, "log" = message seulement loggé
    channel: str

    def notify(self, task: Task) -> bool: ...


def build_message(task: Task) -> str:
    message = f"Task #{task.id}: {task.description or '(no description)'}"
    if task.due:
        message += f" - due {task.due:%Y-%m-%d %H:%M}"
    if task.completed:
        message += " [done]"
    return message


class SmsNotifier:
    channel = "sms"

    def __init__(self, gateway_url: str, token: str, sender: str, recipient: str, timeout: int = 10):
        self.gateway_url = gateway_url
        self.token = token
        self.sender = sender
        self.recipient = recipient
        self.timeout = timeout

    def notify(self, task: Task) -> bool:
        headers = {}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        
        try:
            response = requests.post(
                self.gateway_url,
                json={"from": self.sender, "to": self.recipient, "body": build_message(task)},
                headers=headers,
                timeout=self.timeout
            )
            response.raise_for_status()
        except requests.RequestException as e:
            logger.error(f"SMS for task {task.id} failed: {e}")
            return False
        
        logger.info(f"SMS for task {task.id} sent to {self.recipient}")
        return True


class LogNotifier:
    channel = "log"

    # Pas de passerelle configurée: on se contente de logger le message
    def notify(self, task: Task) -> bool:
        logger.info(f"SMS (not sent, no gateway): {build_message(task)}")
        return True


def get_notifier() -> Notifier:
    """Dépendance notifier, choisie selon la config"""
    if not settings.SMS_GATEWAY_URL:
        return LogNotifier()
    return SmsNotifier(
        gateway_url=settings.SMS_GATEWAY_URL,
        token=settings.SMS_GATEWAY_TOKEN,
        sender=settings.SMS_FROM,
        recipient=settings.SMS_TO,
        timeout=settings.SMS_TIMEOUT
    )
