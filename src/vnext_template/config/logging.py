"""structlog configuration for vnext-template.

Library modules log through stdlib ``logging.getLogger(__name__)``; once the
CLI calls :func:`configure_logging`, those records are rendered by structlog:

- Human (default): console renderer on stderr, colored on a TTY
- JSON (--log-json): one JSON object per line on stderr

Component load warnings therefore never reach stdout, where command
results are written.
"""

from __future__ import annotations

import logging
import sys

import structlog

PACKAGE_LOGGER = "vnext_template"


def _package_level(*, verbose: bool, quiet: bool) -> int:
    if verbose:
        return logging.DEBUG
    if quiet:
        return logging.ERROR
    return logging.WARNING


def _renderer(log_json: bool) -> structlog.types.Processor:
    if log_json:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def configure_logging(
    *,
    verbose: bool = False,
    quiet: bool = False,
    log_json: bool = False,
) -> None:
    """Route all logging to stderr through structlog.

    Safe to call repeatedly; the root handler is replaced, not stacked.

    Args:
        verbose: DEBUG output for ``vnext_template.*`` loggers.
        quiet: Only ERROR and above (load warnings are suppressed).
        log_json: Use the JSON renderer instead of the console renderer.
    """
    pre_chain: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    structlog.configure(
        processors=[*pre_chain, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=pre_chain,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(log_json),
            ],
        )
    )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(logging.WARNING)

    logging.getLogger(PACKAGE_LOGGER).setLevel(_package_level(verbose=verbose, quiet=quiet))
