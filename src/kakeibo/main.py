import os

import uvicorn

from kakeibo.app import create_app
from kakeibo.core import settings

app = create_app()


def run() -> None:
    uvicorn.run(
        "kakeibo.main:app",
        host=os.getenv("HOST", "127.0.0.1"),
        port=settings.get_env_int("PORT", 8000, min_value=1),
        log_config=None,
    )


if __name__ == "__main__":
    run()
