"""Configuration models.

Global settings for NLU models, sessions and logging.
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field

from actionbind.core.constants import NONE_INTENT

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]


class NLUModelConfig(BaseModel):
    """NLU model and intent selection configuration."""

    provider: str = Field(default="openai", description="Model provider (openai, anthropic, etc.)")
    model: str = Field(default="gpt-4o-mini", description="Model identifier")
    temperature: float = Field(default=0.0, description="Temperature for generation")
    use_reasoning: bool = Field(default=False, description="Use ChainOfThought for reasoning")
    min_score: float = Field(
        default=0.0, ge=0.0, le=1.0, description="Minimum score for an intent to qualify"
    )
    none_intent: str = Field(
        default=NONE_INTENT, description="Intent name meaning nothing was recognized"
    )


class SessionConfig(BaseModel):
    """In-memory conversation session store configuration."""

    max_sessions: int = Field(default=1000, gt=0, description="Sessions kept before eviction")
    ttl_seconds: int = Field(default=3600, gt=0, description="Idle time before a session expires")


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: LogLevel = Field(default="INFO")
    file: str | None = Field(default=None, description="Rotating JSON log file, if any")


class SettingsConfig(BaseModel):
    """Global settings configuration."""

    nlu: NLUModelConfig = Field(default_factory=NLUModelConfig)
    nlu_services: list[str] = Field(
        default_factory=lambda: ["default"],
        min_length=1,
        description="Names of the NLU services queried for every utterance",
    )
    sessions: SessionConfig = Field(default_factory=SessionConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


class ActionBindConfig(BaseModel):
    """Main configuration model."""

    version: str = "1.0"
    settings: SettingsConfig = Field(default_factory=SettingsConfig)

    @classmethod
    def from_yaml(cls, path: str | Path) -> "ActionBindConfig":
        """Load configuration from YAML file."""
        from actionbind.config.loader import ConfigLoader

        return ConfigLoader.load(path)
