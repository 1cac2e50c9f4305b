"""Gradio rendition of the Horizon landing page (carousel + filterable gallery)."""

from __future__ import annotations

import argparse
import asyncio
import logging
from collections.abc import Callable
from pathlib import Path
from typing import Any, cast

import gradio as gr

if __package__ is None or __package__ == "":
    # Allow running as `python src/gradio_app.py` by ensuring src/ is on sys.path.
    import sys

    PROJECT_ROOT = Path(__file__).resolve().parents[1]
    sys.path.append(str(PROJECT_ROOT))
    from src.gallery.categories import GalleryFilter
    from src.gallery.controller import GalleryPageController
    from src.gallery.lister import ImageLister
    from src.gallery.settings import GallerySettings, load_settings
    from src.gallery.signals import SentinelSignal
    from src.gallery.sources import HttpImageSource, ImageSource, LocalImageSource
    from src.logging_config import configure_logging
else:  # pragma: no cover - exercised when executed as a module
    from .gallery.categories import GalleryFilter
    from .gallery.controller import GalleryPageController
    from .gallery.lister import ImageLister
    from .gallery.settings import GallerySettings, load_settings
    from .gallery.signals import SentinelSignal
    from .gallery.sources import HttpImageSource, ImageSource, LocalImageSource
    from .logging_config import configure_logging

logger = logging.getLogger(__name__)

FILTER_LABELS: dict[str, GalleryFilter] = {
    "ALL": GalleryFilter.ALL,
    "EXTERIOR": GalleryFilter.EXTERIOR,
    "INTERIOR": GalleryFilter.INTERIOR,
}
UI_REFRESH_SECONDS = 1.0


class PageSessions:
    """One controller per browser session, keyed by Gradio's session hash.

    Every caller of `open` waits for the session's startup listing, and a
    closed session stays closed for later events from the same tab.
    """

    def __init__(
        self,
        source_factory: Callable[[], ImageSource],
        settings: GallerySettings,
    ) -> None:
        self._source_factory = source_factory
        self._settings = settings
        self._controllers: dict[str, GalleryPageController] = {}
        self._activations: dict[str, asyncio.Task[None]] = {}
        self._closed: set[str] = set()

    def __len__(self) -> int:
        return len(self._controllers)

    def get(self, session_id: str) -> GalleryPageController | None:
        return self._controllers.get(session_id)

    def is_closed(self, session_id: str) -> bool:
        return session_id in self._closed

    async def open(self, session_id: str) -> GalleryPageController | None:
        """Return the session's ready controller, or None once it was closed."""
        if session_id in self._closed:
            return None
        controller = self._controllers.get(session_id)
        if controller is None:
            controller = GalleryPageController(
                self._source_factory(),
                settings=self._settings,
                sentinel=SentinelSignal(),
            )
            self._controllers[session_id] = controller
            self._activations[session_id] = asyncio.get_running_loop().create_task(
                controller.activate()
            )
        activation = self._activations.get(session_id)
        if activation is not None:
            await asyncio.wait({activation})
        if session_id in self._closed:
            return None
        if activation is not None:
            activation.result()
        return controller

    async def close(self, session_id: str) -> None:
        self._closed.add(session_id)
        activation = self._activations.pop(session_id, None)
        controller = self._controllers.pop(session_id, None)
        if activation is not None and not activation.done():
            activation.cancel()
            await asyncio.gather(activation, return_exceptions=True)
        if controller is None:
            return
        await controller.deactivate()
        aclose = getattr(controller.source, "aclose", None)
        if aclose is not None:
            await aclose()


def _local_paths(lister: ImageLister, refs: list[str]) -> list[str]:
    """Translate ImageRefs into files Gradio is allowed to serve."""
    return [str(lister.resolve(ref)) for ref in refs]


def _slide_choices(controller: GalleryPageController) -> list[str]:
    return [str(index + 1) for index in range(len(controller.carousel.images))]


def render_carousel(
    controller: GalleryPageController, lister: ImageLister
) -> tuple[str | None, dict[str, Any]]:
    """Current slide path plus the indicator update."""
    current = controller.carousel.current_image
    image = str(lister.resolve(current)) if current else None
    choices = _slide_choices(controller)
    value = str(controller.carousel.current_index + 1) if choices else None
    return image, gr.update(choices=choices, value=value)


def render_gallery(
    controller: GalleryPageController, lister: ImageLister
) -> tuple[list[str], dict[str, Any]]:
    """Displayed grid images plus the load-more button visibility."""
    return (
        _local_paths(lister, controller.gallery.displayed),
        gr.update(visible=controller.gallery.has_more),
    )


def build_interface(
    sessions: PageSessions,
    lister: ImageLister,
) -> gr.Blocks:
    """Construct the Blocks layout with carousel, filter menu and gallery."""

    def _session(request: gr.Request) -> str:
        return str(request.session_hash)

    async def _controller(request: gr.Request) -> GalleryPageController | None:
        return await sessions.open(_session(request))

    async def _on_load(request: gr.Request) -> tuple[Any, ...]:
        controller = await _controller(request)
        if controller is None:
            return gr.update(), gr.update(), gr.update(), gr.update()
        return (
            *render_carousel(controller, lister),
            *render_gallery(controller, lister),
        )

    async def _on_refresh(request: gr.Request) -> tuple[Any, ...]:
        controller = sessions.get(_session(request))
        if controller is None or not controller.is_ready:
            return gr.update(), gr.update()
        return render_carousel(controller, lister)

    async def _on_slide(choice: str | None, request: gr.Request) -> tuple[Any, ...]:
        controller = await _controller(request)
        if controller is None:
            return gr.update(), gr.update()
        if choice:
            controller.go_to_slide(int(choice) - 1)
        return render_carousel(controller, lister)

    async def _on_previous(request: gr.Request) -> tuple[Any, ...]:
        controller = await _controller(request)
        if controller is None:
            return gr.update(), gr.update()
        controller.previous_slide()
        return render_carousel(controller, lister)

    async def _on_next(request: gr.Request) -> tuple[Any, ...]:
        controller = await _controller(request)
        if controller is None:
            return gr.update(), gr.update()
        controller.next_slide()
        return render_carousel(controller, lister)

    async def _on_filter(label: str, request: gr.Request) -> tuple[Any, ...]:
        controller = await _controller(request)
        if controller is None:
            return gr.update(), gr.update()
        controller.select_filter(FILTER_LABELS.get(label, GalleryFilter.ALL))
        return render_gallery(controller, lister)

    async def _on_load_more(request: gr.Request) -> tuple[Any, ...]:
        controller = await _controller(request)
        if controller is None:
            return gr.update(), gr.update()
        await controller.load_more()
        return render_gallery(controller, lister)

    async def _on_unload(request: gr.Request) -> None:
        await sessions.close(_session(request))

    with gr.Blocks(title="HORIZON Architecture") as demo:
        gr.Markdown("# HORIZON\n**ARCHITECTURE**")
        with gr.Group():
            slide_image = gr.Image(
                label="Featured",
                type="filepath",
                interactive=False,
                height=540,
                show_label=False,
            )
            with gr.Row():
                previous_btn = gr.Button("◀", size="sm")
                slide_radio = gr.Radio(
                    label="Slide",
                    choices=[],
                    show_label=False,
                )
                next_btn = gr.Button("▶", size="sm")

        filter_radio = gr.Radio(
            label="Gallery",
            choices=list(FILTER_LABELS),
            value="ALL",
        )
        gallery = gr.Gallery(
            label="Projects",
            columns=4,
            object_fit="cover",
            height="auto",
            show_label=False,
        )
        load_more_btn = gr.Button("Load more", visible=False)
        refresh = gr.Timer(UI_REFRESH_SECONDS)

        demo.load(
            _on_load,
            inputs=None,
            outputs=[slide_image, slide_radio, gallery, load_more_btn],
        )
        refresh.tick(_on_refresh, inputs=None, outputs=[slide_image, slide_radio])
        slide_radio.input(_on_slide, inputs=slide_radio, outputs=[slide_image, slide_radio])
        previous_btn.click(_on_previous, inputs=None, outputs=[slide_image, slide_radio])
        next_btn.click(_on_next, inputs=None, outputs=[slide_image, slide_radio])
        filter_radio.change(_on_filter, inputs=filter_radio, outputs=[gallery, load_more_btn])
        load_more_btn.click(_on_load_more, inputs=None, outputs=[gallery, load_more_btn])
        demo.unload(_on_unload)

    return cast(gr.Blocks, demo)


def _source_factory(
    api_url: str | None, lister: ImageLister
) -> Callable[[], ImageSource]:
    """Each session either queries the listing API or reads the disk."""
    if api_url:
        return lambda: HttpImageSource(api_url)
    return lambda: LocalImageSource(lister)


def parse_args() -> argparse.Namespace:
    """Return CLI arguments for configuring the Gradio server."""
    parser = argparse.ArgumentParser(
        description="Launch the Horizon landing page with Gradio."
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help=(
            "Path to a YAML settings file "
            "(defaults to configs/gallery.yaml when present)."
        ),
    )
    parser.add_argument(
        "--api-url",
        type=str,
        default=None,
        help="Base URL of a running listing API; reads the disk directly when omitted.",
    )
    parser.add_argument(
        "--host",
        type=str,
        default="0.0.0.0",
        help="Server host passed to Gradio (defaults to 0.0.0.0).",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=7860,
        help="Server port passed to Gradio (defaults to 7860).",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show debug logging.",
    )
    return parser.parse_args()


def main() -> None:
    """CLI entry point to load settings and launch Gradio."""
    args = parse_args()
    configure_logging("DEBUG" if args.verbose else "INFO")
    settings = load_settings(args.config)
    lister = ImageLister(settings.public_root)
    sessions = PageSessions(_source_factory(args.api_url, lister), settings)
    app = build_interface(sessions, lister)
    logger.info("Serving images from %s", lister.images_root)
    app.launch(
        server_name=args.host,
        server_port=args.port,
        allowed_paths=[str(lister.images_root)],
    )


if __name__ == "__main__":
    main()
