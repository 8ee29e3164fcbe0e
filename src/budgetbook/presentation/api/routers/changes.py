"""Change notifications pushed to clients over a WebSocket.

Clients connect to ``/changes?token=<access token>`` and receive
``{"type": "ready"}`` once subscribed, then one message per committed
change::

    {"type": "change", "collection": "accounts", "action": "updated",
     "id": "...", "occurred_at": "..."}

A client only ever sees its own user's changes. Messages carry ids only;
clients re-read the collection they are interested in.
"""

import asyncio
import logging

from fastapi import APIRouter, HTTPException, Query, WebSocket, WebSocketDisconnect, status

from budgetbook.application.ports import ChangeEvent
from budgetbook.application.services import AuthenticationService
from budgetbook.domain.user import User
from budgetbook.infrastructure.persistence.sqlalchemy.repositories import (
    UserRepositorySQLAlchemy,
)
from budgetbook.presentation.api.dependencies import (
    authenticate_token,
    get_api_settings,
    get_change_feed,
    get_jwt_service,
    get_password_service,
    get_session_maker,
)

logger = logging.getLogger(__name__)

router = APIRouter()


async def _authenticate(websocket: WebSocket, token: str) -> User | None:
    settings = get_api_settings(websocket)
    session_maker = get_session_maker(websocket)

    # Short-lived session; the socket may stay open for hours
    async with session_maker() as session:
        auth_service = AuthenticationService(
            user_repository=UserRepositorySQLAlchemy(session),
            password_service=get_password_service(settings),
            jwt_service=get_jwt_service(settings),
        )
        try:
            return await authenticate_token(token, auth_service)
        except HTTPException:
            return None


async def _wait_for_disconnect(websocket: WebSocket) -> None:
    while True:
        message = await websocket.receive()
        if message["type"] == "websocket.disconnect":
            return


async def _forward(queue: "asyncio.Queue[ChangeEvent]", websocket: WebSocket) -> None:
    while True:
        event = await queue.get()
        await websocket.send_json({"type": "change", **event.to_dict()})


@router.websocket("/changes")
async def stream_changes(
    websocket: WebSocket,
    token: str = Query(..., description="Access token"),
) -> None:
    user = await _authenticate(websocket, token)
    if user is None:
        await websocket.close(code=status.WS_1008_POLICY_VIOLATION)
        return

    change_feed = get_change_feed(websocket)
    queue: asyncio.Queue[ChangeEvent] = asyncio.Queue()
    unsubscribe = change_feed.subscribe(user.id, queue.put_nowait)

    try:
        await websocket.accept()
        await websocket.send_json({"type": "ready"})
        logger.debug("Change stream opened for %s", user.email)

        receiver = asyncio.create_task(_wait_for_disconnect(websocket))
        sender = asyncio.create_task(_forward(queue, websocket))
        done, pending = await asyncio.wait(
            {receiver, sender},
            return_when=asyncio.FIRST_COMPLETED,
        )
        for task in pending:
            task.cancel()
        for task in done:
            error = task.exception()
            if error is not None and not isinstance(error, WebSocketDisconnect):
                raise error
    finally:
        unsubscribe()
        logger.debug("Change stream closed for %s", user.email)
