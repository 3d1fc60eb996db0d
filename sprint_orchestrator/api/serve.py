"""Launch helpers for serving the planning API with uvicorn."""

from __future__ import annotations

import socket
import subprocess  # nosec B404
import sys
from dataclasses import dataclass


class ServeError(RuntimeError):
    """Raised when the API server cannot be launched."""


@dataclass(frozen=True)
class ServeConfig:
    """Runtime configuration for ``sprint-orchestrator api serve``."""

    host: str = "127.0.0.1"
    port: int = 8080
    reload: bool = False

    def __post_init__(self) -> None:
        if not 0 < self.port < 65536:
            raise ValueError("port must be between 1 and 65535.")


def build_serve_command(config: ServeConfig) -> list[str]:
    """Build the uvicorn command line for the planning API."""
    command = [
        sys.executable,
        "-m",
        "uvicorn",
        "sprint_orchestrator.api.app:create_app",
        "--factory",
        "--host",
        config.host,
        "--port",
        str(config.port),
    ]
    if config.reload:
        command.append("--reload")
    return command


def ensure_port_available(host: str, port: int) -> None:
    """Validate that ``host:port`` can be bound before launching uvicorn."""
    try:
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as test_socket:
            test_socket.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
            test_socket.bind((host, port))
    except OSError as exc:
        raise ServeError(f"Port {port} on {host} is unavailable: {exc}.") from exc


def serve_api(config: ServeConfig) -> int:
    """Run uvicorn in the foreground and return its exit code."""
    ensure_port_available(config.host, config.port)
    try:
        result = subprocess.run(build_serve_command(config), check=False)  # nosec B603
    except KeyboardInterrupt:
        return 0
    return result.returncode
