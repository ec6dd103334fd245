"""Session configuration for the window engine.

Centralizes the page size, jump width, highlight timing and simulated fetch
latency. Values can be overridden from environment variables.
"""

import os

from pydantic import BaseModel, Field, model_validator

ENV_PREFIX = "SCROLLBACK_"


class WindowConfig(BaseModel):
    """Constants for one windowed session."""

    page_size: int = Field(
        default=20,
        ge=1,
        description="Messages fetched by the initial load and each extension"
    )
    jump_half_width: int = Field(
        default=10,
        ge=1,
        description="Messages kept on each side of a jump target"
    )
    highlight_on_delay: float = Field(
        default=0.0,
        ge=0.0,
        description="Seconds before a highlight pulse turns on"
    )
    highlight_off_delay: float = Field(
        default=0.8,
        ge=0.0,
        description="Seconds before a highlight pulse turns off"
    )
    fetch_latency: float = Field(
        default=1.0,
        ge=0.0,
        description="Simulated latency of every log fetch, in seconds"
    )

    @model_validator(mode="after")
    def _check_highlight_order(self) -> "WindowConfig":
        # The off phase must run after the on phase or the flag is never cleared
        if self.highlight_off_delay <= self.highlight_on_delay:
            raise ValueError(
                f"highlight_off_delay ({self.highlight_off_delay}) must be greater than "
                f"highlight_on_delay ({self.highlight_on_delay})"
            )
        return self

    @classmethod
    def from_env(cls, **overrides: object) -> "WindowConfig":
        """Build a configuration from environment variables.

        Environment variables:
            SCROLLBACK_PAGE_SIZE: Page size (default: 20)
            SCROLLBACK_JUMP_HALF_WIDTH: Jump half width (default: 10)
            SCROLLBACK_HIGHLIGHT_ON_DELAY: Highlight on delay (default: 0)
            SCROLLBACK_HIGHLIGHT_OFF_DELAY: Highlight off delay (default: 0.8)
            SCROLLBACK_FETCH_LATENCY: Simulated fetch latency (default: 1.0)

        Args:
            **overrides: Explicit values that win over the environment

        Raises:
            pydantic.ValidationError: If a value is malformed or out of range
        """
        values: dict[str, object] = {}
        for name in cls.model_fields:
            raw = os.getenv(f"{ENV_PREFIX}{name.upper()}")
            if raw is not None and raw.strip():
                values[name] = raw.strip()
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls.model_validate(values)
