"""Domain errors raised by the services and mapped to HTTP responses in app.main"""


class TaskNotFound(Exception):
    def __init__(self, task_id: int):
        self.task_id = task_id
        super().__init__(f"Task {task_id} not found")


class NotificationFailed(Exception):
    def __init__(self, task_id: int):
        self.task_id = task_id
        super().__init__(f"SMS for task {task_id} could not be sent")
