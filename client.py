# client.py

import asyncio

from app.client.recorder import record_quote
from app.core.config import CLIENT_TIMEOUT, settings
from app.core.logging_config import configure_logging


def main() -> None:
    configure_logging(settings.LOG_LEVEL)
    # sempre termina com status 0: falhas ficam só no log
    asyncio.run(
        record_quote(
            settings.SERVER_URL,
            settings.QUOTE_FILE_PATH,
            CLIENT_TIMEOUT,
        )
    )


if __name__ == "__main__":
    main()
