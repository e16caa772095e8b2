"""Configuration settings for wordgoal."""

from pathlib import Path

from pydantic import BaseModel, Field, model_validator

from wordgoal.domain import Rect


class CounterConfig(BaseModel):
    """Word goal bounds and default."""

    default_word_limit: int = Field(
        default=500,
        ge=1,
        le=10000,
        description="Word goal used when none has been stored",
    )
    min_word_limit: int = Field(
        default=1,
        ge=1,
        description="Smallest accepted word goal",
    )
    max_word_limit: int = Field(
        default=10000,
        ge=1,
        description="Largest accepted word goal",
    )

    @model_validator(mode="after")
    def _check_bounds(self) -> "CounterConfig":
        if self.min_word_limit > self.max_word_limit:
            raise ValueError("min_word_limit must not exceed max_word_limit")
        if not self.min_word_limit <= self.default_word_limit <= self.max_word_limit:
            raise ValueError("default_word_limit must lie within the word limit bounds")
        return self

    def clamp(self, value: int) -> int:
        """Clamp a word goal into the configured bounds."""
        return min(self.max_word_limit, max(self.min_word_limit, value))


class WindowConfig(BaseModel):
    """Window geometry persistence settings."""

    min_persisted_size: float = Field(
        default=300.0,
        ge=0.0,
        description="Minimum width and height worth persisting or restoring",
    )
    default_visible_width: float = Field(
        default=1200.0,
        gt=0.0,
        description="Width of the fallback display frame when none is reported",
    )
    default_visible_height: float = Field(
        default=800.0,
        gt=0.0,
        description="Height of the fallback display frame when none is reported",
    )

    @property
    def default_visible_rect(self) -> Rect:
        return Rect(0.0, 0.0, self.default_visible_width, self.default_visible_height)


class EditorConfig(BaseModel):
    """Editor font size settings."""

    default_font_size: float = Field(default=16.0, ge=8.0, le=72.0)
    min_font_size: float = Field(default=8.0, ge=1.0)
    max_font_size: float = Field(default=72.0, ge=1.0)
    font_size_step: float = Field(default=1.0, gt=0.0)

    def clamp(self, value: float) -> float:
        """Clamp a font size into the configured bounds."""
        return min(self.max_font_size, max(self.min_font_size, value))


class StoreConfig(BaseModel):
    """Preferences store location."""

    path: Path | None = Field(
        default=None,
        description="JSON preferences file (None = in-memory only)",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )
    quiet: bool = Field(
        default=False,
        description="Suppress console log output below ERROR",
    )


class WordgoalSettings(BaseModel):
    """Main application settings."""

    counter: CounterConfig = Field(default_factory=CounterConfig)
    window: WindowConfig = Field(default_factory=WindowConfig)
    editor: EditorConfig = Field(default_factory=EditorConfig)
    store: StoreConfig = Field(default_factory=StoreConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> WordgoalSettings:
    """Get default application settings."""
    return WordgoalSettings()
