#!/usr/bin/env python3
"""Ask a running dealer for one round over WebSocket and print the table.

Example:
    python scripts/play_client.py Alice Bob Carol --url ws://localhost:8765
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from typing import Any, Dict, List

import websockets

logging.basicConfig(level=logging.INFO)
LOGGER = logging.getLogger("play_client")


async def request_round(url: str, players: List[str]) -> Dict[str, Any]:
    async with websockets.connect(url) as websocket:
        await websocket.send(json.dumps({"type": "play", "players": players}))
        raw = await websocket.recv()
    return json.loads(raw)


def render(reply: Dict[str, Any]) -> str:
    if reply.get("type") == "error":
        return f"error {reply.get('code')}: {reply.get('msg')}"
    lines = []
    for row in reply.get("player_results", []):
        cards = " ".join(row["cards"])
        lines.append(f"{row['player']:<12} {cards:<18} {row['hand_summary']}")
    lines.append(reply.get("reason", ""))
    return "\n".join(lines)


def main() -> None:
    parser = argparse.ArgumentParser(description="Request a five-card stud round")
    parser.add_argument("players", nargs="+")
    parser.add_argument("--url", default="ws://localhost:8765")
    args = parser.parse_args()

    try:
        reply = asyncio.run(request_round(args.url, args.players))
    except OSError as exc:
        LOGGER.error("Could not reach dealer at %s: %s", args.url, exc)
        sys.exit(1)
    print(render(reply))
    if reply.get("type") == "error":
        sys.exit(2)


if __name__ == "__main__":
    main()
