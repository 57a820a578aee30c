"""Run the flag authority with uvicorn: ``python -m flagsync``."""
from __future__ import annotations


def main() -> None:
    import uvicorn

    from flagsync.api import create_app
    from flagsync.config import load_settings

    settings = load_settings()
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    main()
