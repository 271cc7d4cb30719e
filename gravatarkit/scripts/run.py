"""Serve gravatarkit with uvicorn."""

from __future__ import annotations

import os

import uvicorn

from gravatarkit.config import config


def uvicorn_options() -> dict[str, object]:
    """Collect uvicorn keyword arguments from the environment and config."""
    raw_level = os.getenv("LOG_LEVEL", "debug" if config.DEBUG else "info").strip()
    options: dict[str, object] = {
        "host": os.getenv("BIND_HOST", "127.0.0.1"),
        "port": int(os.getenv("BIND_PORT", str(config.PORT))),
        "reload": config.DEBUG,
        "log_level": int(raw_level) if raw_level.isdigit() else raw_level.lower(),
        "proxy_headers": config.TRUST_FORWARDED_PROTO,
    }
    if config.TRUST_FORWARDED_PROTO:
        # TLS ends at the proxy, which may sit on any address
        options["forwarded_allow_ips"] = os.getenv("FORWARDED_ALLOW_IPS", "*")
    return options


def main() -> None:
    uvicorn.run("gravatarkit.main:app", **uvicorn_options())


if __name__ == "__main__":
    main()
