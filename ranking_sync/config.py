"""Application configuration."""

import os
from dataclasses import dataclass


@dataclass
class Config:
    """Application configuration loaded from environment variables."""

    # Companion server settings
    host: str = "0.0.0.0"
    port: int = 1337

    # Ranking endpoint used by the client
    ranking_url: str = "http://localhost:1337/ranking"

    # Board size kept by the companion server (0 for unbounded)
    ranking_capacity: int = 10

    # Logging level for the companion server
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables."""
        return cls(
            host=os.getenv("HOST", "0.0.0.0"),
            port=int(os.getenv("PORT", "1337")),
            ranking_url=os.getenv(
                "RANKING_URL",
                "http://localhost:1337/ranking"
            ),
            ranking_capacity=int(os.getenv("RANKING_CAPACITY", "10")),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
        )
