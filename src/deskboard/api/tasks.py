"""Tasks API client."""

from typing import Any

from pydantic import TypeAdapter

from deskboard.api.base import BaseApiClient
from deskboard.models.task import WIRE_CONTEXT, Task, TaskCreate, TaskFinishedUpdate

_TASK_LIST = TypeAdapter(list[Task])


class TasksClient(BaseApiClient):
    """Task endpoints of the local backend."""

    async def list_tasks(self) -> list[Task]:
        """GET /tasks; order is kept exactly as served."""
        data = await self._request("GET", "/tasks")
        return self._parse(_TASK_LIST, data, context=WIRE_CONTEXT)

    async def update_finished(self, task_id: int, finished: int | bool) -> Any:
        """PATCH /tasks/{id} with a 0/1 finished flag; returns the raw body."""
        body = TaskFinishedUpdate(finished=finished)
        return await self._request(
            "PATCH", f"/tasks/{task_id}", decode=False, json=body.model_dump()
        )

    async def create_task(self, text: str) -> Any:
        """POST /tasks; the server assigns id and finished=0."""
        body = TaskCreate(task=text)
        return await self._request(
            "POST", "/tasks", decode=False, json=body.model_dump()
        )
