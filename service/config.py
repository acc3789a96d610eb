from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional


@dataclass
class ServerConfig:
    host: str = "localhost"
    port: int = 8080
    # Prefix used when building repeat URLs, with no trailing '/'.
    host_name: str = "localhost:8080/api"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ServerConfig":
        env = os.environ if environ is None else environ
        port = int(env.get("CRIBBAGE_PORT", "8080"))
        host_name = env.get("CRIBBAGE_HOST_NAME") or f"localhost:{port}/api"
        return cls(host=env.get("CRIBBAGE_HOST", "localhost"), port=port, host_name=host_name.rstrip("/"))
