import asyncio
import sys

import yaml
from dotenv import load_dotenv
from pydantic_settings import CliApp

from .logging import get_logger, setup_logging
from .pipeline import Pipeline
from .settings import Settings


def app() -> None:
    """CLI entrypoint.
    Uses pydantic-settings CLI source
    to parse and merge arguments from CLI, env, dotenv, and YAML config.
    """
    load_dotenv()
    settings = CliApp.run(Settings)

    setup_logging(settings.log_level)
    logger = get_logger("flashset.cli")

    logger.debug(
        "Settings loaded:\n%s",
        yaml.safe_dump(
            settings.model_dump(mode="json"),
            sort_keys=False,
            default_flow_style=False,
            allow_unicode=True,
        ),
    )

    ok = asyncio.run(Pipeline(settings).run())
    sys.exit(0 if ok else 1)


if __name__ == "__main__":
    app()
