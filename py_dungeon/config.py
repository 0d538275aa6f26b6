"""Configuration management."""

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings pulled from environment variables."""

    # API
    api_host: str = Field(default="0.0.0.0", description="API host")
    api_port: int = Field(default=8000, description="API port")

    # Logging
    log_level: str = Field(default="INFO", description="Log level")
    log_format: str = Field(default="json", description="Logging format (plain or json)")

    # Generation defaults
    default_level_width: int = Field(default=40, description="Default level width in cells")
    default_level_height: int = Field(default=40, description="Default level height in cells")
    default_room_count: int = Field(default=10, description="Default number of rooms")
    default_room_min_size: int = Field(default=2, description="Default minimum room side")
    default_room_max_size: int = Field(default=6, description="Default maximum room side")
    room_padding: int = Field(default=1, description="Free cells required around every room")
    hallway_retention_probability: float = Field(
        default=0.125, description="Chance of keeping a non-MST edge as a hallway"
    )

    # Limits
    max_level_size: int = Field(default=512, description="Maximum level width or height")
    max_room_count: int = Field(default=200, description="Maximum rooms per level")
    max_placement_attempts: int = Field(
        default=10000, description="Room candidates sampled before placement gives up"
    )

    class Config:
        env_file = ".env"
        env_prefix = "DUNGEON_"
        extra = "ignore"


settings = Settings()
