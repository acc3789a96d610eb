"""HTTP/WebSocket front end for the cribbage engine."""

from .config import ServerConfig
from .handlers import CribbageApi
from .server import ApiServer

__all__ = ["ServerConfig", "CribbageApi", "ApiServer"]
