import logging
import sys

import anyio

from mcp_edit_service.config.settings import Settings
from mcp_edit_service.container import DependencyContainer
from mcp_edit_service.exceptions import ConfigurationError
from mcp_edit_service.server import build_server, run_stdio

logger = logging.getLogger("mcp_edit_service")


def configure_logging(level: str) -> None:
    # stdout carries the protocol, so logs go to stderr
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )


def main(argv: list[str] | None = None) -> int:
    try:
        settings = Settings.from_env()
    except ConfigurationError as e:
        configure_logging("INFO")
        logger.error(f"Failed to start server: {e}")
        return 1

    configure_logging(settings.log_level)
    container = DependencyContainer(settings, logger=logger)
    info = container.get_rewrite_adapter().get_model_info()
    logger.info(
        f"Using rewrite model {info.get('model')} at {info.get('base_url', 'default endpoint')}"
    )

    server = build_server(container.get_edit_tools_handler(), logger=logger)
    try:
        anyio.run(run_stdio, server)
    except KeyboardInterrupt:
        logger.info("Interrupted, shutting down")
    except Exception as e:
        logger.error(f"Server error: {e}")
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
