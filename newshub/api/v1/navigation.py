"""Navigation header socket.

Each connection is one page session and owns one logo-click detector; route
changes are pushed back to the client as they are decided.
"""

import asyncio
import contextlib
import logging

from fastapi import APIRouter, WebSocket, WebSocketDisconnect
from pydantic import ValidationError

from newshub.navigation import TripleClickDetector
from newshub.schemas.navigation import HeaderEvent, NavigateCommand

logger = logging.getLogger(__name__)

router = APIRouter()


@router.websocket("/header")
async def header_socket(websocket: WebSocket) -> None:
    await websocket.accept()
    outbox: asyncio.Queue[str] = asyncio.Queue()

    async def forward_navigation() -> None:
        while True:
            path = await outbox.get()
            await websocket.send_json(NavigateCommand(path=path).model_dump())

    sender = asyncio.create_task(forward_navigation())
    try:
        with TripleClickDetector(outbox.put_nowait) as detector:
            while True:
                message = await websocket.receive_text()
                try:
                    event = HeaderEvent.model_validate_json(message)
                except (ValueError, ValidationError):
                    logger.debug("Ignoring unreadable header event %r", message)
                    continue
                if event.type == "logo_click":
                    detector.click()
    except WebSocketDisconnect:
        logger.debug("Header socket closed")
    finally:
        sender.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await sender
