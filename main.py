"""
FastAPI Application Entry Point

Integrates:
  - WhatsApp client bootstrap (pairing on first run)
  - Inbound event relay to logs
  - POST /send
  - Middleware for logging & error handling

Run: python main.py   (listens on 0.0.0.0:8080)
"""

import logging
import sys
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from config import Config
from infra.bootstrap import BootstrapError, InfraBootstrap
from infra.config import get_config
from transport.whatsapp.routes import router as whatsapp_router
from transport.whatsapp.sender import SendOrchestrator

logger = logging.getLogger(__name__)


def setup_logging(level: str = Config.LOG_LEVEL) -> None:
    """Line-oriented log text on stdout."""
    logging.basicConfig(
        level=getattr(logging, level, logging.DEBUG),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stdout,
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan: startup and shutdown handlers.
    """
    # Startup
    logger.info("=" * 60)
    logger.info("WhatsApp relay starting up...")
    logger.info(f"Environment: {Config.ENVIRONMENT}")
    logger.info(f"Messaging Backend: {get_config().messaging_backend}")
    logger.info(f"Starting server on port {Config.PORT}")
    logger.info("=" * 60)

    yield

    # Shutdown
    logger.info("WhatsApp relay shutting down...")


def create_app(sender: SendOrchestrator) -> FastAPI:
    """
    Build the HTTP app around an already-connected client's sender.

    The orchestrator is stored on app.state and injected into routes.
    """
    app = FastAPI(
        title="WhatsApp Relay API",
        description="Send WhatsApp text messages over HTTP",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.sender = sender

    # Middleware for logging
    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        """Log all requests."""
        logger.debug(f"{request.method} {request.url.path}")
        try:
            response = await call_next(request)
            return response
        except Exception as e:
            logger.error(f"Request error: {str(e)}", exc_info=True)
            return JSONResponse(
                status_code=500,
                content={"error": "Internal server error"},
            )

    app.include_router(whatsapp_router)

    return app


def run() -> None:
    """Bootstrap the client, then serve HTTP until interrupted."""
    import uvicorn

    Config.validate()
    setup_logging()

    try:
        client = InfraBootstrap().start()
    except BootstrapError as e:
        logger.critical(str(e), exc_info=True)
        sys.exit(1)

    app = create_app(SendOrchestrator(client, timeout_s=Config.SEND_TIMEOUT_S))

    uvicorn.run(
        app,
        host=Config.HOST,
        port=Config.PORT,
        log_config=None,  # keep our basicConfig handlers
    )


if __name__ == "__main__":
    run()
