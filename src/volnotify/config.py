"""Runtime settings read from the environment.

There is no config file: every value comes from a ``VOLNOTIFY_*``
environment variable or falls back to its default.  Settings are read
once at startup by the CLI layer and passed down explicitly.
"""

from __future__ import annotations

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from volnotify.core.parsing import DEFAULT_STEP
from volnotify.exceptions import InvalidArgumentsError


class Settings(BaseSettings):
    """Environment-driven settings for one invocation."""

    model_config = SettingsConfigDict(
        env_prefix="VOLNOTIFY_",
        extra="ignore",
        case_sensitive=False,
    )

    pactl_binary: str = Field(
        default="pactl",
        min_length=1,
        description="Name or path of the pactl executable.",
    )
    notify_send_binary: str = Field(
        default="notify-send",
        min_length=1,
        description="Name or path of the notify-send executable.",
    )
    notifier_command: str | None = Field(
        default=None,
        description="Custom OSD command; called as '<cmd> <icon> <progress>'.",
    )
    default_step: int = Field(
        default=DEFAULT_STEP,
        ge=0,
        description="Percent used when an action keyword has no magnitude.",
    )
    notification_timeout_ms: int = Field(
        default=1000,
        ge=0,
        description="How long the notify-send bubble stays up.",
    )


def load_settings() -> Settings:
    """Build :class:`Settings` from the environment.

    Raises
    ------
    InvalidArgumentsError
        When an environment variable holds an invalid value.
    """
    try:
        return Settings()
    except ValidationError as exc:
        fields = ", ".join(
            "VOLNOTIFY_" + str(err["loc"][0]).upper() for err in exc.errors() if err["loc"]
        )
        raise InvalidArgumentsError(
            f"invalid environment setting: {fields or exc}",
        ) from exc
