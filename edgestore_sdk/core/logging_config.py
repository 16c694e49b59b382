"""
Structlog logging for the SDK.

Modules only obtain loggers. ``configure_logging()`` is opt-in and installs
one handler on the ``edgestore_sdk`` logger; the host application's root
handlers are left alone.
"""
import json
import logging
from typing import Any, List, Optional

import structlog
from structlog.contextvars import merge_contextvars
from structlog.dev import ConsoleRenderer
from structlog.processors import JSONRenderer, TimeStamper, add_log_level
from structlog.stdlib import ProcessorFormatter

from edgestore_sdk.core.config import get_settings

SDK_LOGGER_NAME = "edgestore_sdk"


def get_renderer(debug: bool) -> Any:
    """Console in debug, JSON otherwise.
    structlog passes default/sort_keys to the serializer, so accept them.
    """
    if debug:
        return ConsoleRenderer(colors=True)

    def _dumps(obj, default=None, **kwargs):
        return json.dumps(obj, ensure_ascii=False, default=default, **kwargs)
    return JSONRenderer(serializer=_dumps)


def configure_logging(debug: Optional[bool] = None) -> logging.Logger:
    """Route structlog through stdlib logging and render SDK records.

    Calling it again replaces the handler it installed before.
    """
    if debug is None:
        debug = get_settings().DEBUG

    shared_pre_chain: List[Any] = [
        merge_contextvars,
        add_log_level,
        TimeStamper(fmt="iso"),
        structlog.processors.format_exc_info,
    ]

    structlog.configure(
        processors=[*shared_pre_chain, ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler()
    handler.setFormatter(ProcessorFormatter(
        foreign_pre_chain=shared_pre_chain,
        processors=[ProcessorFormatter.remove_processors_meta, get_renderer(debug)],
    ))

    sdk_logger = logging.getLogger(SDK_LOGGER_NAME)
    for old in [h for h in sdk_logger.handlers if getattr(h, "_edgestore_sdk", False)]:
        sdk_logger.removeHandler(old)
    handler._edgestore_sdk = True  # type: ignore[attr-defined]
    sdk_logger.addHandler(handler)
    sdk_logger.setLevel(logging.DEBUG if debug else logging.INFO)
    return sdk_logger


def get_logger(name: str = __name__) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)
