from __future__ import annotations

import asyncio
import json
import logging
from dataclasses import dataclass, field
from http import HTTPStatus
from typing import Any, Dict, List, Optional, Tuple
from urllib.parse import parse_qs, urlsplit

import websockets
from websockets.asyncio.server import ServerConnection, serve
from websockets.datastructures import Headers
from websockets.http11 import Request, Response

from stud.errors import EvaluationFailure, InsufficientCards, InvalidHand, InvalidInput, StudError
from stud.game import play_round
from stud.models import RoundConfig
from stud.summary import result_payload

LOGGER = logging.getLogger("dealer_host")

PLAY_PATH = "/api/play/fiveCardStud"
HEALTH_PATHS = {"/", "/health", "/healthz"}

# DealerServer glues the stud engine to HTTP and WebSocket clients.
# Every transport concern lives here; the engine stays pure.


@dataclass
class ServerConfig:
    host: str = "0.0.0.0"
    port: int = 8765
    cors_origin: str = "http://localhost:3000"
    round: RoundConfig = field(default_factory=RoundConfig)


def _error_body(code: str, msg: str) -> Dict[str, Any]:
    return {"type": "error", "code": code, "msg": msg}


def _players_from_query(query: str) -> Optional[List[str]]:
    values = parse_qs(query, keep_blank_values=True).get("players")
    if values is None:
        return None
    players: List[str] = []
    for value in values:
        players.extend(value.split(","))
    return players


class DealerServer:
    def __init__(self, config: Optional[ServerConfig] = None) -> None:
        self.config = config or ServerConfig()

    async def start(self) -> None:
        async with serve(
            self._handle_connection,
            self.config.host,
            self.config.port,
            process_request=self._process_request,
        ):
            LOGGER.info("Dealer listening on %s:%s", self.config.host, self.config.port)
            await asyncio.Future()

    # Round execution -------------------------------------------------

    def play(self, players: Any) -> Tuple[HTTPStatus, Dict[str, Any]]:
        """Run one round and map the outcome onto a status and JSON body."""
        try:
            result = play_round(players, self.config.round)
        except (InvalidInput, InsufficientCards) as exc:
            LOGGER.info("Rejected round request: %s", exc.msg)
            return HTTPStatus.BAD_REQUEST, _error_body(exc.code, exc.msg)
        except (InvalidHand, EvaluationFailure) as exc:
            LOGGER.exception("Round evaluation failed: %s", exc)
            return HTTPStatus.INTERNAL_SERVER_ERROR, _error_body(exc.code, "Hand evaluation failed")
        except StudError as exc:
            LOGGER.exception("Round failed: %s", exc)
            return HTTPStatus.INTERNAL_SERVER_ERROR, _error_body(exc.code, "Round failed")
        except Exception as exc:  # noqa: BLE001
            LOGGER.exception("Unexpected error while dealing: %s", exc)
            return HTTPStatus.INTERNAL_SERVER_ERROR, _error_body("INTERNAL", "An unexpected error occurred")
        return HTTPStatus.OK, result_payload(result)

    # HTTP ------------------------------------------------------------

    def handle_http(self, target: str) -> Tuple[HTTPStatus, str, bytes]:
        parts = urlsplit(target)
        path = parts.path.rstrip("/") or "/"
        if path in HEALTH_PATHS:
            return HTTPStatus.OK, "text/plain; charset=utf-8", b"dealer running\n"
        if path == PLAY_PATH:
            status, body = self.play(_players_from_query(parts.query))
            return status, "application/json", json.dumps(body).encode("utf-8")
        return HTTPStatus.NOT_FOUND, "text/plain; charset=utf-8", b"not found\n"

    def _process_request(self, connection: ServerConnection, request: Request) -> Optional[Response]:
        upgrade_header = request.headers.get("Upgrade", "").lower()
        if upgrade_header == "websocket":
            return None  # let the WebSocket handshake continue

        status, content_type, body = self.handle_http(request.path)
        headers = Headers(
            [
                ("Content-Type", content_type),
                ("Content-Length", str(len(body))),
                ("Access-Control-Allow-Origin", self.config.cors_origin),
            ]
        )
        return Response(status.value, status.phrase, headers, body)

    # WebSocket -------------------------------------------------------

    def handle_message(self, raw: Any) -> Dict[str, Any]:
        try:
            message = json.loads(raw)
        except (TypeError, ValueError):
            return _error_body("BAD_JSON", "Message must be valid JSON")
        if not isinstance(message, dict) or message.get("type") != "play":
            return _error_body("BAD_TYPE", "Expected play")

        status, body = self.play(message.get("players"))
        if status is HTTPStatus.OK:
            return {"type": "result", **body}
        return body

    async def _handle_connection(self, websocket: ServerConnection) -> None:
        # Each frame is an independent request; the socket stays open between them.
        try:
            async for raw in websocket:
                reply = self.handle_message(raw)
                await websocket.send(json.dumps({"v": 1, **reply}))
        except websockets.ConnectionClosed:
            LOGGER.debug("Client disconnected")
