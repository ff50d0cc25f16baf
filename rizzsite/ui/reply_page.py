"""NiceGUI reply page: style grid, sliders, and the generated response."""

import logging
from collections.abc import Callable

from nicegui import ui

from rizzsite.agent.backend import BackendConstructionError
from rizzsite.agent.chat_ai import ChatAI
from rizzsite.models.schemas import MAX_LEVEL, MIN_LEVEL, ResponseMode
from rizzsite.ui.controller import ReplyController

logger = logging.getLogger(__name__)

# Seconds to wait for the response card binding to show the card
SCROLL_DELAY = 0.1

CUSTOM_CSS = """
<style>
    body { background: #1a1a2e; min-height: 100vh; font-family: Arial, sans-serif; }

    .app-container {
        background: rgba(255, 255, 255, 0.1);
        border-radius: 15px;
        color: #ffffff;
    }

    .title { color: #00ffff; }
    .accent { color: #00ffff; }

    .mode-card {
        background: rgba(255, 255, 255, 0.1);
        border: 1px solid transparent;
        border-radius: 8px;
        cursor: pointer;
        transition: all 0.3s ease;
        text-align: center;
    }
    .mode-card.selected {
        background: rgba(0, 255, 255, 0.2);
        border-color: #00ffff;
    }

    .message-box {
        border: 1px solid #00ffff;
        border-radius: 8px;
        background: rgba(0, 0, 0, 0.2);
    }

    .generate-btn { background: #00ffff !important; color: #000000 !important; }
    .generate-btn[disabled] { background: #4a4a5a !important; color: #ffffff !important; }

    .response-card {
        background: rgba(0, 255, 255, 0.1);
        border: 1px solid #00ffff;
        border-radius: 8px;
        max-height: 300px;
        overflow-y: auto;
        scroll-behavior: smooth;
    }

    .scroll-btn {
        position: fixed !important;
        bottom: 20px;
        right: 20px;
        background: rgba(0, 255, 255, 0.8) !important;
        color: #1a1a2e !important;
        box-shadow: 0 2px 10px rgba(0, 255, 255, 0.3);
        transition: all 0.3s ease;
    }
    .scroll-btn:hover { transform: scale(1.1); background: rgba(0, 255, 255, 1) !important; }
</style>
"""


def create_controller() -> ReplyController:
    """Create the controller and its conversation for one page instance."""
    return ReplyController(ChatAI())


def reveal_response(scroll: Callable[[], None]) -> ui.timer:
    """Run ``scroll`` once the response card has had time to become visible."""
    return ui.timer(SCROLL_DELAY, scroll, once=True)


@ui.page("/")
def reply_page() -> None:
    """Main reply page."""
    ui.add_head_html(CUSTOM_CSS)

    try:
        controller = create_controller()
    except BackendConstructionError as e:
        logger.error(f"Reply page unavailable: {e}")
        with ui.column().classes("w-full min-h-screen items-center justify-center"):
            ui.label("✨ RizzSite ✨").classes("text-3xl title")
            ui.label("The reply service is not configured.").classes("text-white")
        ui.notify(str(e), type="negative")
        return

    response_card: ui.element

    @ui.refreshable
    def render_modes() -> None:
        with ui.grid().classes("w-full gap-2 grid-cols-2 sm:grid-cols-3"):
            for mode in ResponseMode:
                selected = "selected" if controller.mode == mode else ""
                with (
                    ui.element("div")
                    .classes(f"mode-card p-2 {selected}")
                    .on("click", lambda m=mode: select_mode(m))
                ):
                    ui.label(mode.label).classes("font-bold")
                    ui.label(mode.description).classes("text-xs opacity-80")

    def select_mode(mode: ResponseMode) -> None:
        controller.select_mode(mode)
        render_modes.refresh()

    async def generate() -> None:
        await controller.generate()
        if controller.response:
            reveal_response(scroll_to_response)

    def scroll_to_response() -> None:
        ui.run_javascript(
            f'document.getElementById("c{response_card.id}")'
            '?.scrollIntoView({behavior: "smooth", block: "start"})'
        )

    # === UI Layout ===
    with ui.column().classes("w-full min-h-screen items-center p-5"):
        ui.label("✨ RizzSite ✨").classes("text-3xl font-bold title mb-6")

        with ui.column().classes("w-full max-w-xl app-container p-8 gap-5"):
            ui.label("🎭 Choose Your Vibe:").classes("accent")
            render_modes()

            ui.textarea(placeholder="✍️ Paste the message you received...").props(
                "borderless dark autogrow"
            ).classes("w-full message-box px-3").bind_value(controller, "message")

            with ui.column().classes("w-full gap-1"):
                ui.label().bind_text_from(
                    controller, "interest_level", lambda v: f"Interest Level: {int(v)}"
                )
                ui.slider(min=MIN_LEVEL, max=MAX_LEVEL, step=1).props(
                    "color=cyan"
                ).classes("w-full").bind_value(controller, "interest_level")

            with ui.column().classes("w-full gap-1"):
                ui.label().bind_text_from(
                    controller, "tone_level", lambda v: f"Tone Level: {int(v)}"
                )
                ui.slider(min=MIN_LEVEL, max=MAX_LEVEL, step=1).props(
                    "color=cyan"
                ).classes("w-full").bind_value(controller, "tone_level")

            ui.button(on_click=generate).classes(
                "w-full generate-btn font-bold"
            ).props("unelevated").bind_text_from(
                controller,
                "loading",
                lambda loading: "✨ Generating..." if loading else "✨ Generate Response",
            ).bind_enabled_from(controller, "can_generate")

            with (
                ui.element("div")
                .classes("w-full response-card p-5")
                .bind_visibility_from(controller, "response", backward=bool) as response_card
            ):
                ui.label("💫 Generated Response:").classes("text-lg accent mb-2")
                ui.label().bind_text_from(controller, "response").style(
                    "white-space: pre-wrap"
                )

    ui.button("↓", on_click=scroll_to_response).props("round").classes(
        "scroll-btn text-2xl"
    ).bind_visibility_from(controller, "response", backward=bool)
