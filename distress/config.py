"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - get_settings() is cached (lru_cache): single instance per process
    - divider_packets always parse as packets (validated at load time)

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults provided for every setting: the CLI works with no environment at all
    - Logging defaults to WARNING/text: CLI stdout stays limited to the answers
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from distress.core.errors import MalformedPacketError
from distress.core.packet import Packet
from distress.core.parse_packet import parse_packet


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Puzzle
    divider_packets: list[str] = ["[[2]]", "[[6]]"]

    @field_validator("divider_packets")
    @classmethod
    def check_divider_packets(cls, v: list[str]) -> list[str]:
        """Reject dividers that are not valid packet text."""
        if not v:
            raise ValueError("at least one divider packet is required")
        for text in v:
            try:
                parse_packet(text)
            except MalformedPacketError as exc:
                raise ValueError(f"invalid divider {text!r}: {exc.message}") from exc
        return v

    # API
    api_host: str = "127.0.0.1"
    api_port: int = 8000
    cors_origins: list[str] = ["http://localhost:5173"]

    # Observability
    log_level: str = "WARNING"
    log_format: str = "text"

    def dividers(self) -> tuple[Packet, ...]:
        """Divider packets, parsed."""
        return tuple(parse_packet(text) for text in self.divider_packets)


@lru_cache
def get_settings() -> Settings:
    return Settings()
