"""Runtime settings.

Configuration is loaded from:
- environment variables prefixed with ``STEPFLOW_``
- and a local `.env` file (if present)

Settings only feed callers that opt in (the demo CLI, for one); `run` itself
takes everything as explicit arguments.
"""

from __future__ import annotations

import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from stepflow.flow.engine import DEFAULT_MAX_STEPS


class FlowSettings(BaseSettings):
    """Settings for running flows.

    Environment variables:
    - STEPFLOW_LOG_LEVEL           (optional)
    - STEPFLOW_MAX_STEPS           (optional)
    - STEPFLOW_DEMO_DELAY_SECONDS  (optional)

    Notes:
        Pydantic-settings supports overriding the env file in tests via:
        `FlowSettings(_env_file=path_to_env)`.
    """

    log_level: str = Field(
        default="INFO",
        description="Root logging level",
    )
    max_steps: int = Field(
        default=DEFAULT_MAX_STEPS,
        gt=0,
        description="Step budget applied to each run",
    )
    demo_delay_seconds: float = Field(
        default=0.1,
        ge=0.0,
        description="Simulated latency of the demo's asynchronous steps",
    )

    model_config = SettingsConfigDict(
        env_prefix="STEPFLOW_",
        env_file=".env",
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level
