"""
Configuration settings for the Meeting Join Bot.
Read once at process start and passed explicitly to the services.
"""

from typing import Optional
from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class GoogleSettings(BaseSettings):
    """Optional Google account used to sign in before joining Meet calls."""
    model_config = SettingsConfigDict(
        env_prefix="GOOGLE_", env_file=".env", extra="ignore", frozen=True, populate_by_name=True
    )

    # GMAIL / GPASSWORD are the names older deployments use
    email: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("GOOGLE_EMAIL", "GMAIL"),
        description="Google account email",
    )
    password: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("GOOGLE_PASSWORD", "GPASSWORD"),
        description="Google account password",
    )

    @property
    def has_credentials(self) -> bool:
        return bool(self.email and self.password)


class BrowserSettings(BaseSettings):
    """Chromium launch configuration."""
    model_config = SettingsConfigDict(env_prefix="BROWSER_", env_file=".env", extra="ignore", frozen=True)

    headless: bool = Field(default=True, description="Run Chromium headless")
    executable_path: Optional[str] = Field(default=None, description="Preinstalled Chromium/Chrome binary")
    auto_install: bool = Field(default=True, description="Install Playwright Chromium when missing")
    navigation_timeout: int = Field(default=60000, description="Page navigation timeout (ms)")
    viewport_width: int = Field(default=1280, description="Viewport width")
    viewport_height: int = Field(default=720, description="Viewport height")


class BotSettings(BaseSettings):
    """Join flow behavior."""
    model_config = SettingsConfigDict(env_prefix="BOT_", env_file=".env", extra="ignore", frozen=True)

    name: str = Field(default="Meeting Bot", description="Guest display name")
    step_timeout: int = Field(default=15000, description="Timeout for required join steps (ms)")
    optional_step_timeout: int = Field(default=5000, description="Timeout for best-effort steps (ms)")
    confirm_timeout: int = Field(default=20000, description="Wait for in-call confirmation (ms)")
    jitsi_settle: int = Field(default=2000, description="Fixed Jitsi settle delay (ms)")


class Settings(BaseSettings):
    """Main application settings."""
    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
        frozen=True,
    )

    # Nested settings
    google: GoogleSettings = Field(default_factory=GoogleSettings)
    browser: BrowserSettings = Field(default_factory=BrowserSettings)
    bot: BotSettings = Field(default_factory=BotSettings)

    # Application settings
    project_name: str = Field(default="Meeting Join Bot", description="API title")
    version: str = Field(default="1.0.0", description="API version")
    debug: bool = Field(default=False, description="Enable debug mode")
    log_level: str = Field(default="INFO", description="Logging level")
    log_to_file: bool = Field(default=True, description="Write rotating log files under logs/")

    # Server
    host: str = Field(default="0.0.0.0", description="Listen address")
    port: int = Field(default=10000, description="Listen port")

    # Join requests
    secret: Optional[str] = Field(default=None, description="Shared secret expected in the request token")
    stay_duration: int = Field(default=60000, ge=0, description="Time to stay in the meeting after joining (ms)")
    max_concurrent_sessions: int = Field(default=2, ge=1, description="Max browsers running at once")
    admission_timeout: float = Field(default=300.0, ge=0, description="Max wait for a free browser slot (s)")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Invalid log level: {v}")
        return v.upper()

    @property
    def stay_seconds(self) -> float:
        """Stay duration in seconds."""
        return self.stay_duration / 1000
