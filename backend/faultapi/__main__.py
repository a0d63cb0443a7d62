"""Serve the emulator: `python -m faultapi` (host/port from settings)."""

import uvicorn

from faultapi.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "faultapi.main:app",
        host=settings.host,
        port=settings.port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
