# __main__.py
import logging
import os
import sys

logging.basicConfig(
    level=os.getenv("NBA_QUERY_LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


def main() -> None:
    """Entry point for NBA Query."""
    try:
        from nba_query.nba_server import main as server_main
        server_main()
    except ModuleNotFoundError as e:
        logger.error("ModuleNotFoundError in __main__: %s", e)
        sys.exit(1)


if __name__ == "__main__":
    main()
