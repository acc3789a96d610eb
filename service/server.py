from __future__ import annotations

import asyncio
import json
import logging
from http import HTTPStatus
from typing import Any, Dict, Optional

import websockets
from websockets.asyncio.server import ServerConnection, serve
from websockets.datastructures import Headers
from websockets.http11 import Request, Response

from .config import ServerConfig
from .handlers import CribbageApi

LOGGER = logging.getLogger("cribbage_api")

# ApiServer glues CribbageApi to the network. Plain GET requests are answered
# from process_request before any WebSocket handshake; upgraded connections
# can send the same paths as JSON messages.

HEALTH_PATHS = {"/", "/health", "/healthz"}


def _http_response(status: HTTPStatus, body: bytes, content_type: str) -> Response:
    headers = Headers(
        [
            ("Content-Type", content_type),
            ("Content-Length", str(len(body))),
            ("Access-Control-Allow-Origin", "*"),
            ("Connection", "close"),
        ]
    )
    return Response(status.value, status.phrase, headers, body)


class ApiServer:
    def __init__(self, config: ServerConfig, api: Optional[CribbageApi] = None) -> None:
        self.config = config
        self.api = api or CribbageApi(config)

    async def start(self) -> None:
        # serve keeps accepting clients until the process stops.
        async with serve(self._handle_connection, self.config.host, self.config.port, process_request=self._process_request):
            LOGGER.info("Cribbage API listening on %s:%s", self.config.host, self.config.port)
            await asyncio.Future()

    def _process_request(self, connection: ServerConnection, request: Request) -> Optional[Response]:
        if request.headers.get("Upgrade", "").lower() == "websocket":
            return None  # let the WebSocket handshake continue

        path = request.path.split("?", 1)[0]
        if path in HEALTH_PATHS:
            return _http_response(HTTPStatus.OK, b"cribbage api running\n", "text/plain; charset=utf-8")

        status, payload = self.api.dispatch(request.path)
        if status != HTTPStatus.OK:
            LOGGER.info("GET %s -> %s", request.path, status.value)
        return _http_response(status, json.dumps(payload).encode("utf-8"), "application/json")

    async def _handle_connection(self, websocket: ServerConnection) -> None:
        LOGGER.info("Client connected from %s", websocket.remote_address)
        try:
            async for raw in websocket:
                await self._handle_message(websocket, raw)
        except websockets.ConnectionClosed:
            pass
        LOGGER.info("Client %s disconnected", websocket.remote_address)

    async def _handle_message(self, websocket: Any, raw: Any) -> None:
        message = self._decode(raw)
        if not message:
            await self._send_error(websocket, code="BAD_JSON", msg="Expected a JSON object")
            return
        if message.get("type") != "request":
            await self._send_error(websocket, code="UNKNOWN_TYPE", msg="Unsupported message type")
            return
        path = message.get("path")
        if not isinstance(path, str):
            await self._send_error(websocket, code="BAD_SCHEMA", msg="path required")
            return

        try:
            status, body = self.api.dispatch(path)
        except Exception as exc:  # noqa: BLE001
            LOGGER.exception("Request %s crashed: %s", path, exc)
            await self._send_error(websocket, code="INTERNAL", msg="Request failed")
            return
        await self._send_json(
            websocket,
            {"type": "response", "id": message.get("id"), "status": status.value, "body": body},
        )

    def _decode(self, raw: Any) -> Dict[str, Any]:
        try:
            message = json.loads(raw)
        except (TypeError, ValueError):
            return {}
        return message if isinstance(message, dict) else {}

    async def _send_json(self, websocket: Any, payload: Dict[str, Any]) -> None:
        await websocket.send(json.dumps({"v": 1, **payload}))

    async def _send_error(self, websocket: Any, code: str, msg: str) -> None:
        await self._send_json(websocket, {"type": "error", "code": code, "msg": msg})
