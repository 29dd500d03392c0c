from __future__ import annotations
import logging
from github_rest.domain.exceptions import ConfigurationError
from github_rest.infrastructure.config import get_settings
from github_rest.interface.cli import app
from github_rest.interface.error_handlers import report_error

def main() -> None:
    """Configure logging and run the CLI."""
    try:
        settings = get_settings()
    except ConfigurationError as exc:
        raise SystemExit(report_error(exc)) from exc
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
    )
    app()


if __name__ == "__main__":
    main()
