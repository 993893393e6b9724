import argparse
import logging
from pathlib import Path

import uvicorn
from pydantic import ValidationError

from flopapi.config import ConfigError, get_settings, load_config
from flopapi.main import create_app

logger = logging.getLogger(__name__)


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="flopapi random image server")
    parser.add_argument("--host", default=None, help="Interface to bind (default: HOST setting)")
    parser.add_argument("--port", type=int, default=None, help="Port to listen on (default: PORT setting)")
    parser.add_argument("--config", default=None, help="Config JSON tried before the default locations")
    return parser.parse_args()


def main() -> int:
    args = parse_args()
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        settings = get_settings()
    except ValidationError as exc:
        logger.critical("Invalid settings: %s", exc)
        return 1
    logging.getLogger().setLevel(settings.log_level)

    paths = settings.candidate_config_paths()
    if args.config:
        paths.insert(0, Path(args.config))
    try:
        config = load_config(paths)
    except ConfigError as exc:
        logger.critical("Failed to load configuration: %s", exc)
        return 1

    port = args.port or settings.port
    app = create_app(config, settings)
    logger.info("Server starting on :%d", port)
    uvicorn.run(app, host=args.host or settings.host, port=port, log_level=settings.log_level.lower())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
