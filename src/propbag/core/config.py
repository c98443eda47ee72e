"""
Accessor configuration – immutable, built once during start-up.

* `debug` turns on the diagnostic block printed before each failure.
* `context_dump_depth` bounds how deep a failure's context is rendered.
* `diagnostic_stream` receives the block (`sys.stderr` when unset).
"""

from __future__ import annotations

import os
import sys
from typing import Any

from dotenv import load_dotenv
from pydantic import BaseModel, Field

DEFAULT_ENV_PREFIX = "PROPBAG_"


class AccessorConfig(BaseModel):
    debug: bool = False
    context_dump_depth: int = Field(default=2, ge=0)
    diagnostic_stream: Any = None  # any object with .write()
    model_config = {"frozen": True, "arbitrary_types_allowed": True}

    def stream(self) -> Any:
        """Resolve the diagnostic stream at write time."""
        return self.diagnostic_stream if self.diagnostic_stream is not None else sys.stderr

    @classmethod
    def from_env(cls, prefix: str = DEFAULT_ENV_PREFIX) -> "AccessorConfig":
        """
        Read `<prefix>DEBUG` and `<prefix>CONTEXT_DEPTH` (a `.env` file is
        honoured). Unset variables keep the defaults; bad values raise
        pydantic's ValidationError.
        """
        load_dotenv()
        values: dict[str, Any] = {}
        debug = os.getenv(f"{prefix}DEBUG")
        if debug is not None:
            values["debug"] = debug.strip()
        depth = os.getenv(f"{prefix}CONTEXT_DEPTH")
        if depth is not None:
            values["context_dump_depth"] = depth.strip()
        return cls.model_validate(values)
