"""`todai-server` entry point: run the API with uvicorn on HOST/PORT."""

import uvicorn

from todai.core.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "todai.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_config=None,
    )


if __name__ == "__main__":
    main()
