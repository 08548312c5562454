"""Run the API with uvicorn: python -m bookclub"""

import uvicorn

from bookclub.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "bookclub.main:app",
        host=settings.host,
        port=settings.port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
