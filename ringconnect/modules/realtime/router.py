import asyncio
import logging
from typing import Optional

from fastapi import APIRouter, WebSocket, WebSocketDisconnect, status
from starlette.concurrency import run_in_threadpool

from ringconnect.core.exceptions import RecordDecodeError, parse_record
from ringconnect.db.session import SessionLocal
from ringconnect.deps import resolve_token
from ringconnect.modules.realtime.hub import Subscription, realtime_hub
from ringconnect.modules.realtime.schemas import RealtimeFilter

logger = logging.getLogger(__name__)

router = APIRouter()

def _authenticate(token: str) -> Optional[str]:
    """ID of the token's user; the session is closed before the socket is accepted"""
    db = SessionLocal()
    try:
        user = resolve_token(db, token)
        return user.id if user else None
    finally:
        db.close()

async def _forward(websocket: WebSocket, subscription: Subscription) -> None:
    while True:
        event = await subscription.next_event()
        await websocket.send_json(event)

async def _stop_forwarding(forward: "asyncio.Task[None]", user_id: str) -> None:
    """Cancel the forwarding task and collect how it ended"""
    forward.cancel()
    try:
        await forward
    except asyncio.CancelledError:
        pass
    except Exception as e:
        logger.warning(f"[RT] Forwarding events to {user_id} failed: {e}")

@router.websocket("/ws")
async def realtime_socket(websocket: WebSocket):
    """
    Stream inserts on one table filtered by one column.

    Query parameters: token, table, column, value. Only the caller's own
    notifications (user_id) and received chat messages (receiver_id) can be
    watched; anything else is refused before the handshake completes.
    """
    params = websocket.query_params
    user_id = await run_in_threadpool(_authenticate, params.get("token") or "")
    if user_id is None:
        logger.warning("[RT] Rejected socket with invalid credentials")
        await websocket.close(code=status.WS_1008_POLICY_VIOLATION)
        return

    try:
        realtime_filter = parse_record(RealtimeFilter, dict(params))
    except RecordDecodeError as e:
        logger.warning(f"[RT] Rejected filter from {user_id}: {e}")
        await websocket.close(code=status.WS_1008_POLICY_VIOLATION)
        return
    if realtime_filter.value != user_id:
        logger.warning(f"[RT] User {user_id} tried to watch {realtime_filter.table} of {realtime_filter.value}")
        await websocket.close(code=status.WS_1008_POLICY_VIOLATION)
        return

    subscription = realtime_hub.subscribe(realtime_filter.table, realtime_filter.column, realtime_filter.value)
    await websocket.accept()
    forward = asyncio.create_task(_forward(websocket, subscription))
    try:
        # Client messages are ignored; reading only detects the disconnect
        while True:
            await websocket.receive_text()
    except WebSocketDisconnect:
        logger.info(f"[RT] Socket for {user_id} disconnected")
    finally:
        await _stop_forwarding(forward, user_id)
        realtime_hub.unsubscribe(subscription)
