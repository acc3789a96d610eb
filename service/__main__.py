import argparse
import asyncio
import logging
import os

from .config import ServerConfig
from .server import ApiServer

logging.basicConfig(level=logging.INFO)


def main() -> None:
    defaults = ServerConfig.from_env()
    parser = argparse.ArgumentParser(description="Cribbage scoring and strategy API")
    parser.add_argument("--host", default=defaults.host)
    parser.add_argument("--port", type=int, default=defaults.port, help="Defaults to $CRIBBAGE_PORT or 8080")
    parser.add_argument(
        "--host-name",
        default=None,
        help="Public prefix for repeat URLs (defaults to $CRIBBAGE_HOST_NAME or localhost:<port>/api)",
    )
    args = parser.parse_args()

    host_name = args.host_name or os.environ.get("CRIBBAGE_HOST_NAME") or f"localhost:{args.port}/api"

    config = ServerConfig(host=args.host, port=args.port, host_name=host_name.rstrip("/"))
    server = ApiServer(config)
    try:
        asyncio.run(server.start())
    except KeyboardInterrupt:
        logging.getLogger("cribbage_api").info("Shutting down")


if __name__ == "__main__":
    main()
