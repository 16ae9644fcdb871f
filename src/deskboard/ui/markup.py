"""Default page layout with every element the services bind to."""

from deskboard.ui.dom import Document, Element

QUOTE_TEXT_ID = "quote-text"
QUOTE_AUTHOR_ID = "quote-author"
QUOTE_CATEGORY_SELECT_ID = "quote-category-select"
NEW_QUOTE_BTN_ID = "new-quote-btn"
TASK_LIST_SELECTOR = ".task-list"
NEW_TASK_INPUT_ID = "new-task"
ADD_TASK_BTN_ID = "add-task-btn"
NEW_TASK_FORM_ID = "submit-new-task"
NOTES_TEXTAREA_ID = "notes-text"
SAVE_NOTES_BTN_ID = "save-notes-btn"

DEFAULT_CATEGORIES = ["general", "inspirational", "tech", "humor"]


def build_page(
    categories: list[str] | None = None,
    selected_category: str = "general",
) -> Document:
    """Build the quote, tasks and notes sections. The save button starts disabled."""
    body = Element("body")

    quote = body.append_child(Element("section", class_name="quote"))
    quote.append_child(Element("p", id=QUOTE_TEXT_ID))
    quote.append_child(Element("p", id=QUOTE_AUTHOR_ID))
    select = quote.append_child(
        Element("select", id=QUOTE_CATEGORY_SELECT_ID, value=selected_category)
    )
    for name in categories or DEFAULT_CATEGORIES:
        select.append_child(Element("option", value=name, text_content=name))
    quote.append_child(
        Element("button", id=NEW_QUOTE_BTN_ID, type="button", text_content="New quote")
    )

    tasks = body.append_child(Element("section", class_name="tasks"))
    tasks.append_child(Element("ul", class_name="task-list"))
    form = tasks.append_child(Element("form", id=NEW_TASK_FORM_ID))
    form.append_child(Element("input", id=NEW_TASK_INPUT_ID, type="text"))
    form.append_child(
        Element("button", id=ADD_TASK_BTN_ID, type="button", text_content="Add")
    )

    notes = body.append_child(Element("section", class_name="notes"))
    notes.append_child(Element("textarea", id=NOTES_TEXTAREA_ID))
    notes.append_child(
        Element(
            "button",
            id=SAVE_NOTES_BTN_ID,
            type="button",
            text_content="Save",
            disabled=True,
        )
    )

    return Document(body)
