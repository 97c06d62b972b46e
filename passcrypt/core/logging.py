"""structlog setup for the passcrypt entry points.

Library modules only call ``structlog.get_logger(__name__)``; the CLI and
:func:`passcrypt.core.cipher.create_cipher` decide where records go.
"""

import logging
import sys

import structlog


def configure_logging(level: str = "INFO", debug: bool = False) -> None:
    """Route structlog through stdlib logging on stderr at *level*.

    *debug* switches from JSON lines to the coloured console renderer.
    """
    log_level = logging.getLevelName(level.upper())
    if not isinstance(log_level, int):
        log_level = logging.INFO

    processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
    ]
    if debug:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))
    else:
        processors += [
            structlog.processors.dict_tracebacks,
            structlog.processors.JSONRenderer(),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # stdout carries ciphertext and plaintext in the CLI
    logging.basicConfig(format="%(message)s", stream=sys.stderr, level=log_level)
    logging.getLogger("passcrypt").setLevel(log_level)
