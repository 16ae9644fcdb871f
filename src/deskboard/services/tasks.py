"""Task list synchronizer: render tasks and push toggles/new tasks back.

Every mutation is followed by a full reload from the server, whether or not
the mutation itself succeeded, so the rendered list always shows server
state rather than what the user just clicked.
"""

import logging
from typing import Any

from deskboard.api.errors import ApiError
from deskboard.api.tasks import TasksClient
from deskboard.models.task import Task, finished_to_wire
from deskboard.services.base import BaseService
from deskboard.ui.dom import Document, Element, Event
from deskboard.ui.markup import (
    ADD_TASK_BTN_ID,
    NEW_TASK_FORM_ID,
    NEW_TASK_INPUT_ID,
    TASK_LIST_SELECTOR,
)

logger = logging.getLogger(__name__)


class TaskService(BaseService):
    def __init__(self, document: Document, client: TasksClient) -> None:
        super().__init__(document)
        self.client = client

    async def fetch_tasks(self) -> list[Task]:
        return await self.client.list_tasks()

    async def patch_task_finished(self, task_id: int, finished: int) -> Any:
        return await self.client.update_finished(task_id, finished)

    async def post_new_task(self, text: str) -> Any:
        return await self.client.create_task(text)

    def render_task_list(self, tasks: list[Task]) -> None:
        """Replace the list contents with one checkbox row per task."""
        list_el = self.document.query_selector(TASK_LIST_SELECTOR)
        if list_el is None:
            return
        list_el.replace_children(*(self._render_row(t) for t in tasks))

    def _render_row(self, task: Task) -> Element:
        row = self.document.create_element("li", class_name="task-item")
        checkbox = self.document.create_element(
            "input", type="checkbox", checked=task.finished
        )
        label = self.document.create_element("label", text_content=task.task)

        async def on_change(event: Event) -> None:
            finished = finished_to_wire(event.target.checked)
            try:
                await self.patch_task_finished(task.id, finished)
            except ApiError:
                logger.exception("Could not update task %s (finished=%s)", task.id, finished)
            await self.load_tasks()

        checkbox.add_event_listener("change", on_change)
        row.append_child(checkbox)
        row.append_child(label)
        return row

    async def load_tasks(self) -> None:
        """Fetch and render; on failure the previous rendering stays."""
        try:
            tasks = await self.fetch_tasks()
        except ApiError:
            logger.exception("Could not load tasks")
            return
        self.render_task_list(tasks)
        logger.debug("Rendered %d task(s)", len(tasks))

    async def handle_add_task(self) -> None:
        input_el = self.document.get_element_by_id(NEW_TASK_INPUT_ID)
        add_btn = self.document.get_element_by_id(ADD_TASK_BTN_ID)
        if input_el is None:
            return

        text = (input_el.value or "").strip()
        if not text:
            return

        # Blocks a second click while the POST is in flight
        if add_btn is not None:
            add_btn.disabled = True
        try:
            await self.post_new_task(text)
            input_el.value = ""
        except ApiError:
            logger.exception("Could not add task %r", text)
        finally:
            if add_btn is not None:
                add_btn.disabled = False

        await self.load_tasks()

    def wire_events(self) -> None:
        form = self.document.get_element_by_id(NEW_TASK_FORM_ID)
        add_btn = self.document.get_element_by_id(ADD_TASK_BTN_ID)

        if add_btn is not None:

            async def on_click(event: Event) -> None:
                await self.handle_add_task()

            add_btn.add_event_listener("click", on_click)

        if form is not None:

            async def on_submit(event: Event) -> None:
                event.prevent_default()
                await self.handle_add_task()

            form.add_event_listener("submit", on_submit)
