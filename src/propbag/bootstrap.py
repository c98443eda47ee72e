"""
Single entry-point that configures the process-wide accessor.
Call once, e.g. in FastAPI startup or Django AppConfig.ready().
"""

import logging
from typing import Any

from .core.accessor import PropertyAccessor
from .core.config import DEFAULT_ENV_PREFIX, AccessorConfig
from .runtime import Runtime

logger = logging.getLogger(__name__)


def configure(
    debug: bool, context_dump_depth: int = 2, *, diagnostic_stream: Any = None
) -> PropertyAccessor:
    """
    Build the default accessor used by the module-level shortcuts.
    Not safe to call while other threads are reading through it.
    """
    config = AccessorConfig(
        debug=debug,
        context_dump_depth=context_dump_depth,
        diagnostic_stream=diagnostic_stream,
    )
    logger.debug("propbag configured: debug=%s depth=%s", debug, context_dump_depth)
    return Runtime.install(config)


def configure_from_env(prefix: str = DEFAULT_ENV_PREFIX) -> PropertyAccessor:
    """Same as `configure`, reading `<prefix>DEBUG` / `<prefix>CONTEXT_DEPTH`."""
    config = AccessorConfig.from_env(prefix)
    logger.debug(
        "propbag configured from env: debug=%s depth=%s",
        config.debug,
        config.context_dump_depth,
    )
    return Runtime.install(config)
