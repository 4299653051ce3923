"""NiceGUI chat page: a thin presentation layer over ChatView.

All state and actions live in ``ChatView``; this module only lays the page
out, wires UI events to the controller and refreshes after each change.
"""

from __future__ import annotations

import logging
from functools import partial

import httpx
from fastapi import FastAPI
from nicegui import ui

from mssgpt.core.settings import Settings
from mssgpt.view.client import RelayClient
from mssgpt.view.state import AVAILABLE_MODELS, IMAGE_ALT, MORE_MODELS_LABEL, ChatView

logger = logging.getLogger(__name__)

MODE_OPTIONS = {"chat": "Chat", "image": "Generate Image"}


def build_relay_client(fastapi_app: FastAPI, settings: Settings) -> RelayClient:
    if settings.relay_url:
        return RelayClient(settings.relay_url)
    # No external URL configured: call the relay route in-process.
    return RelayClient("http://mssgpt", transport=httpx.ASGITransport(app=fastapi_app))


def mount_chat_view(fastapi_app: FastAPI, settings: Settings) -> None:
    @ui.page("/")
    async def chat_page() -> None:
        view = ChatView(build_relay_client(fastapi_app, settings))

        ui.query("body").classes("bg-gray-50")

        @ui.refreshable
        def model_picker() -> None:
            with ui.button(
                view.selected_model_name,
                icon="expand_more",
                on_click=view.toggle_model_dropdown,
            ).props("flat no-caps color=grey-8"):
                with ui.menu().props("no-parent-event").bind_value(
                    view, "show_model_dropdown"
                ).classes("w-80"):
                    ui.label("Models").classes("px-4 py-2 text-sm text-gray-500")
                    for option in AVAILABLE_MODELS:
                        with ui.menu_item(
                            on_click=partial(view.select_model, option.id),
                            auto_close=False,
                        ).classes("w-full"):
                            with ui.row().classes("w-full items-center justify-between no-wrap"):
                                with ui.column().classes("gap-0"):
                                    ui.label(option.name).classes("font-medium text-sm")
                                    ui.label(option.description).classes("text-xs text-gray-500")
                                if option.id == view.selected_model:
                                    ui.icon("check").classes("text-gray-600")
                    ui.separator()
                    with ui.menu_item(auto_close=False).classes("w-full"):
                        with ui.row().classes("w-full items-center justify-between no-wrap text-sm"):
                            ui.label(MORE_MODELS_LABEL)
                            ui.icon("chevron_right")

        @ui.refreshable
        def conversation() -> None:
            if not view.messages:
                ui.label("How can I help you today?").classes(
                    "w-full text-center text-3xl font-semibold text-gray-900 py-24"
                )

            for message in view.messages:
                is_user = message.role == "user"
                with ui.row().classes("w-full no-wrap gap-4 px-4 py-6"):
                    if is_user:
                        ui.avatar("person", color="white", text_color="grey-8", size="md")
                    else:
                        ui.avatar("shield", color="black", text_color="white", size="md")
                    with ui.column().classes("flex-1 gap-1 overflow-hidden"):
                        ui.label("You" if is_user else "ChatGPT").classes("font-semibold text-sm")
                        if message.type == "image":
                            ui.image(message.content).props(f'alt="{IMAGE_ALT}"').classes(
                                "max-w-full rounded-lg shadow-sm"
                            )
                        else:
                            ui.markdown(
                                message.content,
                                extras=["fenced-code-blocks", "tables", "strike", "task_list"],
                            ).classes("prose prose-sm max-w-none text-gray-800")

            if view.is_loading:
                with ui.row().classes("w-full no-wrap gap-4 px-4 py-6"):
                    with ui.avatar(color="black", size="md"):
                        ui.spinner("dots", color="white")
                    with ui.column().classes("flex-1 gap-1"):
                        ui.label("ChatGPT").classes("font-semibold text-sm")
                        ui.label("Thinking...").classes("text-gray-600 text-sm")

        with ui.header().classes("bg-white text-black border-b border-gray-200 px-4 py-2"):
            with ui.row().classes("w-full max-w-3xl mx-auto items-center justify-between"):
                with ui.row().classes("items-center gap-3"):
                    ui.label(settings.app_name).classes("text-lg font-semibold")
                    model_picker()
                ui.button(icon="add", on_click=view.clear).props("flat round color=grey-8")

        with ui.column().classes("w-full max-w-3xl mx-auto"):
            conversation()

        with ui.footer().classes("bg-white border-t"):
            with ui.column().classes("w-full max-w-3xl mx-auto p-4 gap-2"):
                ui.toggle(
                    MODE_OPTIONS,
                    value=view.mode,
                    on_change=lambda e: view.set_mode(e.value),
                ).props("no-caps toggle-color=black")

                with ui.row().classes("w-full no-wrap items-end"):
                    textarea = (
                        ui.textarea(placeholder=view.placeholder)
                        .props("autogrow outlined rounded input-style='max-height: 200px'")
                        .classes("flex-1")
                        .bind_value(view, "input")
                        .bind_enabled_from(view, "is_loading", backward=lambda loading: not loading)
                    )
                    # Plain Enter submits; Shift+Enter falls through as a newline.
                    textarea.on(
                        "keydown.enter.exact.prevent",
                        lambda e: view.handle_key_down(
                            e.args.get("key", "Enter"), bool(e.args.get("shiftKey"))
                        ),
                        args=["key", "shiftKey"],
                    )
                    ui.button(icon="arrow_upward", on_click=view.submit).props(
                        "round color=black"
                    ).bind_enabled_from(view, "can_submit")

                ui.label().bind_text_from(view, "disclaimer").classes(
                    "w-full text-xs text-gray-500 text-center"
                )

        def refresh() -> None:
            model_picker.refresh()
            conversation.refresh()
            textarea.props(f'placeholder="{view.placeholder}"')
            ui.run_javascript("window.scrollTo(0, document.body.scrollHeight)")

        view.on_change = refresh

    logger.info("Mounting chat view at /")
    ui.run_with(fastapi_app, title=settings.app_name, mount_path="/")
