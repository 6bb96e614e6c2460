"""Pydantic schemas for task request/response validation."""

from pydantic import BaseModel, ConfigDict
from datetime import datetime
from typing import Optional


class TaskResponse(BaseModel):
    """Schema for task responses from API."""
    
    id: int
    description: Optional[str]
    due: Optional[datetime]
    completed: bool
    created_at: datetime
    updated_at: datetime
    
    model_config = ConfigDict(from_attributes=True)


class NotificationResponse(BaseModel):
    task_id: int
    sent: bool
    channel: str
