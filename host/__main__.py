import argparse
import asyncio
import logging

from stud.models import RoundConfig

from .server import DealerServer, ServerConfig


def main() -> None:
    parser = argparse.ArgumentParser(description="Five-card stud dealer")
    parser.add_argument("--host", default="0.0.0.0")
    parser.add_argument("--port", type=int, default=8765)
    parser.add_argument(
        "--cors-origin",
        default="http://localhost:3000",
        help="Value sent in Access-Control-Allow-Origin on HTTP responses",
    )
    parser.add_argument("--house-player", default="CPU", help="Name of the seat added for single-player rounds")
    parser.add_argument("--log-level", default="INFO")
    args = parser.parse_args()

    logging.basicConfig(level=args.log_level.upper())

    config = ServerConfig(
        host=args.host,
        port=args.port,
        cors_origin=args.cors_origin,
        round=RoundConfig(house_player=args.house_player),
    )

    server = DealerServer(config)
    asyncio.run(server.start())


if __name__ == "__main__":
    main()
