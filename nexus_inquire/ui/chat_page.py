"""NiceGUI chat sidebar bound to a ChatPanel."""

import json
import os

from fastapi import Request
from nicegui import ui

from nexus_inquire.models.schemas import Message, Role
from nexus_inquire.ui.panel import ChatPanel

CUSTOM_CSS = """
<link href="https://fonts.googleapis.com/css2?family=Inter:wght@400;500;600&display=swap"
      rel="stylesheet">
<style>
    * { font-family: 'Inter', sans-serif; }

    body { background: #f5f5f5; }

    .message-user {
        background: #dbeafe;
        color: #1e3a8a;
        border-radius: 14px 14px 4px 14px;
    }

    .message-other {
        background: #e5e7eb;
        color: #1f2937;
        border-radius: 14px 14px 14px 4px;
    }

    .typing-dot {
        width: 7px; height: 7px;
        background: #1d4ed8;
        border-radius: 50%;
        animation: bounce 1.4s infinite ease-in-out;
    }
    .typing-dot:nth-child(2) { animation-delay: 0.2s; }
    .typing-dot:nth-child(3) { animation-delay: 0.4s; }

    @keyframes bounce {
        0%, 60%, 100% { transform: translateY(0); }
        30% { transform: translateY(-5px); }
    }

    .send-btn { background: #1d4ed8 !important; }
</style>
"""


def render_message(msg: Message) -> None:
    """Render one bubble: user on the right, everything else on the left."""
    is_user = msg.role == Role.USER
    align = "justify-end" if is_user else "justify-start"
    bubble = "message-user" if is_user else "message-other"

    with ui.row().classes(f"w-full {align}"):
        with ui.element("div").classes(f"max-w-[85%] px-3 py-2 {bubble}"):
            # Replies come back as markdown; user and system text is shown as typed
            if msg.role == Role.ASSISTANT:
                ui.markdown(msg.content).classes("text-sm leading-relaxed")
            else:
                ui.label(msg.content).classes("text-sm leading-relaxed whitespace-pre-wrap")


def render_typing_indicator() -> None:
    with ui.row().classes("w-full justify-start"):
        with ui.element("div").classes("message-other px-3 py-2"):
            with ui.row().classes("items-center gap-2"):
                with ui.row().classes("gap-1"):
                    for _ in range(3):
                        ui.element("div").classes("typing-dot")
                ui.label("Thinking...").classes("text-xs text-gray-500 italic")


def chat_sidebar(panel: ChatPanel) -> None:
    """Build the chat sidebar in the current container and wire it to ``panel``.

    Replies land through ``panel.on_change``, so the message list is rebuilt
    whenever the panel changes, including from background completions.
    """
    messages_container: ui.column
    scroll_area: ui.scroll_area
    input_field: ui.input

    def refresh_messages() -> None:
        messages_container.clear()
        with messages_container:
            for msg in panel.messages:
                render_message(msg)
            if panel.pending_count:
                render_typing_indicator()
        scroll_area.scroll_to(percent=1.0)

    def send() -> None:
        panel.submit()
        input_field.value = panel.draft

    panel.on_change = refresh_messages

    with ui.column().classes("w-full h-full gap-0 no-wrap"):
        ui.label("Nexus Inquire AI").classes("text-lg font-bold px-4 py-3")

        with ui.scroll_area().classes("flex-grow w-full bg-gray-50 rounded-lg") as scroll_area:
            messages_container = ui.column().classes("w-full gap-2 p-3")

        with ui.row().classes("w-full gap-2 p-3 items-center no-wrap"):
            input_field = (
                ui.input(
                    placeholder="Ask Nexus AI...",
                    value=panel.draft,
                    on_change=lambda e: panel.update_draft(e.value or ""),
                )
                .props("outlined dense")
                .classes("flex-grow")
                .on("keydown.enter", send)
            )
            ui.button("Send", on_click=send).props("unelevated color=primary").classes(
                "send-btn font-bold"
            )

    refresh_messages()


@ui.page("/")
def chat_page(request: Request) -> None:
    """Main page: session context in the body, chat in the right sidebar.

    Query parameters form the session context forwarded with every question.
    """
    ui.add_head_html(CUSTOM_CSS)
    params = dict(request.query_params)
    panel = ChatPanel(params=params)

    with ui.header().classes("bg-blue-900 items-center px-5"):
        ui.icon("smart_toy").classes("text-white text-2xl")
        ui.label("Nexus Inquire").classes("text-lg font-semibold text-white")

    with ui.right_drawer(value=True, fixed=True).props("width=400 bordered").classes("p-0"):
        chat_sidebar(panel)

    with ui.column().classes("w-full max-w-3xl p-6 gap-3"):
        ui.label("Session context").classes("text-lg font-semibold")
        ui.label("Sent with every question as opaque context.").classes(
            "text-sm text-gray-500"
        )
        ui.code(json.dumps(params, indent=2), language="json").classes("w-full")


def main() -> None:
    ui.run(title="Nexus Inquire", port=int(os.getenv("UI_PORT", "8080")), reload=False)


if __name__ in {"__main__", "__mp_main__"}:
    main()
