"""
CLI Serve Command

Run the HTTP API under uvicorn.

    forge [--config FILE] serve [--host H] [--port P] [--reload]

The loaded configuration becomes the process default, so the served app
uses the same CORS origins, title and log level as the CLI.
"""

from __future__ import annotations

import logging
import os
from argparse import Namespace
from pathlib import Path

from core.config.runtime import set_default_config
from forge_cli.commands.output import EXIT_SUCCESS


logger = logging.getLogger(__name__)

APP_IMPORT_PATH = "api.app:app"
CONFIG_ENV_VAR = "FORGE_CONFIG"
LOG_LEVEL_ENV_VAR = "FORGE_LOG_LEVEL"


def serve_cmd(args: Namespace) -> int:
    import uvicorn

    config = args.runtime_config
    if args.log_level:
        config.log_level = args.log_level
    host = args.host or config.server.host
    port = args.port or config.server.port
    reload = args.reload or config.server.reload

    set_default_config(config)

    from api.app import create_app

    if reload:
        # the reloader imports the app in a fresh process
        if args.config is not None:
            os.environ[CONFIG_ENV_VAR] = str(Path(args.config).resolve())
        os.environ[LOG_LEVEL_ENV_VAR] = config.log_level
        app = APP_IMPORT_PATH
    else:
        app = create_app(config)

    logger.info(f"Listening on {host}:{port}")
    uvicorn.run(
        app,
        host=host,
        port=port,
        reload=reload,
        log_level=config.log_level_name,
    )
    return EXIT_SUCCESS
