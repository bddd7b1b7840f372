"""
Explicit render configuration.

Debug tracing and the logger it writes to are passed into each render call
instead of living in process-wide state, so concurrent renders with different
settings never interfere.
"""

import os
from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, Field

DEBUG_ENV_VAR = "STACHETREE_DEBUG"
LOGGER_ENV_VAR = "STACHETREE_LOGGER"

_TRUTHY = {"1", "true", "yes", "on"}


class RenderConfig(BaseModel):
    """Settings for a single render or reconstruction call.

    Params:
        debug: Trace every sink write and the render timing on `logger_name`
        logger_name: Logger used for debug tracing
        initialize: Call `init()` on the root node before executing it
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    debug: bool = False
    logger_name: str = Field(default="stachetree", min_length=1)
    initialize: bool = True

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "RenderConfig":
        """Build a config from ``STACHETREE_DEBUG`` and ``STACHETREE_LOGGER``.

        Params:
            environ: Mapping to read from; defaults to ``os.environ``

        Returns:
            RenderConfig with values from the environment, defaults elsewhere
        """
        environ = os.environ if environ is None else environ
        values: dict[str, object] = {}
        if DEBUG_ENV_VAR in environ:
            values["debug"] = environ[DEBUG_ENV_VAR].strip().lower() in _TRUTHY
        if environ.get(LOGGER_ENV_VAR):
            values["logger_name"] = environ[LOGGER_ENV_VAR]
        return cls(**values)
