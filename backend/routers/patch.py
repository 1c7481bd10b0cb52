"""Patch API endpoints"""

from __future__ import annotations

import asyncio
import logging

from fastapi import APIRouter, Request
from sse_starlette.sse import EventSourceResponse

from models.patch import (
    ParseRequest,
    ParseResponse,
    PatchRequest,
    PatchResult,
    PreviewContents,
    PreviewResponse,
)
from services.config_manager import ConfigManager
from services.diff_generator import DiffGenerator
from services.diff_parser import DiffParser
from services.patch_applier import PatchApplier
from services.preview_store import PreviewStore

logger = logging.getLogger(__name__)

router = APIRouter()
diff_parser = DiffParser()
patch_applier = PatchApplier()
diff_generator = DiffGenerator()

# Seconds between keep-alive checks on the event stream
EVENT_POLL_INTERVAL = 15.0
DEFAULT_CONTEXT_LINES = 3


def _context_lines(value) -> int:
    """Configured context line count, falling back to the default when unusable"""
    try:
        return max(0, int(value))
    except (TypeError, ValueError, OverflowError):
        logger.warning("[Patch] Ignoring invalid preview.contextLines: %r", value)
        return DEFAULT_CONTEXT_LINES


@router.post("/parse", response_model=ParseResponse)
async def parse_diff(request: ParseRequest) -> ParseResponse:
    """Parse a pasted diff without applying it"""
    operations = diff_parser.parse(request.diff)
    return ParseResponse(operations=operations, count=len(operations))


@router.post("/apply", response_model=PatchResult)
async def apply_patch(request: PatchRequest) -> PatchResult:
    """Apply a pasted diff; the plugin replaces the whole document with `patched`"""
    result = patch_applier.apply_with_report(request.original, request.diff)
    logger.info(
        "[Patch] Applied %d operations to %s",
        len(result.operations),
        request.file_path or "active document",
    )
    return result


@router.post("/preview", response_model=PreviewResponse)
async def preview_patch(request: PatchRequest) -> PreviewResponse:
    """Apply a pasted diff into the reusable preview"""
    preview_config = ConfigManager.get_instance().get("preview", {})
    context_lines = _context_lines(preview_config.get("contextLines", DEFAULT_CONTEXT_LINES))

    patched = patch_applier.apply(request.original, request.diff)
    contents = PreviewStore.get_instance().set_contents(request.original, patched)

    return PreviewResponse(
        left=contents.left,
        right=contents.right,
        version=contents.version,
        title=preview_config.get("title", "Just Paste Diff: Preview"),
        diff=diff_generator.generate_diff(request.original, patched, request.file_path),
        inline=diff_generator.generate_inline_preview(request.original, patched, context_lines),
    )


@router.get("/preview", response_model=PreviewContents)
async def get_preview() -> PreviewContents:
    """Current left/right contents of the preview"""
    return PreviewStore.get_instance().snapshot()


@router.delete("/preview", response_model=PreviewContents)
async def close_preview() -> PreviewContents:
    """Clear the preview; an open comparison shows empty contents"""
    return PreviewStore.get_instance().reset()


async def preview_event_stream(request: Request, store: PreviewStore):
    """Yield SSE messages for preview changes until the client disconnects"""
    queue = store.subscribe()
    try:
        while True:
            if await request.is_disconnected():
                break
            try:
                event = await asyncio.wait_for(queue.get(), timeout=EVENT_POLL_INTERVAL)
            except asyncio.TimeoutError:
                continue
            yield {"event": "preview", "data": event.model_dump_json()}
    finally:
        store.unsubscribe(queue)


@router.get("/preview/events")
async def preview_events(request: Request):
    """Stream preview change events (SSE)"""
    return EventSourceResponse(preview_event_stream(request, PreviewStore.get_instance()))
