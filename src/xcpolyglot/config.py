"""Configuration management for the catalog audit."""

import os
from dataclasses import dataclass, field
from dotenv import load_dotenv

load_dotenv()


@dataclass
class Config:
    """Application configuration."""

    # Set to "true" by GitHub Actions runners
    github_actions: bool = field(
        default_factory=lambda: os.getenv("GITHUB_ACTIONS", "") == "true"
    )

    log_level: str = field(
        default_factory=lambda: os.getenv("XCPOLYGLOT_LOG_LEVEL", "WARNING").upper()
    )


# Global config instance
config = Config()
