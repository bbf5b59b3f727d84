"""
Main entrypoint: FastAPI server for the honeypot checker.

Env: SOLANA_RPC_URL (or HELIUS_API_KEY), COINGECKO_API_URL, COINGECKO_API_KEY,
RATE_LIMIT_MIN_TIME_MS, RATE_LIMIT_MAX_CONCURRENT, API_HOST, API_PORT, LOG_LEVEL.

Equivalent: uvicorn honeypot_checker.api_server.app:app --host 0.0.0.0 --port 8000
"""

import os

# Configure structured JSON logging before other imports that may log
from honeypot_checker.checker_logging import get_logger

logger = get_logger("main")


def main() -> None:
    """Run the FastAPI server in the main thread."""
    from honeypot_checker.config import get_settings

    settings = get_settings()

    from honeypot_checker.api_server.app import app
    import uvicorn

    logger.info("main_server_starting", host=settings.api_host, port=settings.api_port)
    uvicorn.run(
        app,
        host=settings.api_host,
        port=settings.api_port,
        log_level=os.getenv("LOG_LEVEL", "info").lower(),
    )


if __name__ == "__main__":
    main()
