"""
Configuration management for the podcast RSS generator.

Provides centralized configuration using Pydantic for validation and
environment variable support. Supports podcast.yaml for per-project feed
definitions.
"""

from pathlib import Path
from typing import Optional

import yaml
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


PACKAGE_VERSION = "0.1.0"

# Name of the per-project feed definition file
FEED_FILE_NAME = "podcast.yaml"


def find_podcast_yaml(
    search_dir: Optional[Path] = None,
    file_name: str = FEED_FILE_NAME,
) -> Optional[Path]:
    """
    Locate a feed definition file.

    Searches for file_name starting from search_dir (or the current
    working directory) and walking up to 3 parent directories.

    Returns:
        Path of the first match, or None if not found
    """
    start = Path(search_dir) if search_dir else Path.cwd()
    for parent in [start] + list(start.parents)[:3]:
        candidate = parent / file_name
        if candidate.exists():
            return candidate
    return None


def load_podcast_yaml(
    search_dir: Optional[Path] = None,
    file_name: str = FEED_FILE_NAME,
) -> dict:
    """
    Load podcast.yaml configuration file.

    Args:
        search_dir: Directory to start searching from
        file_name: Definition file name to look for

    Returns:
        Dictionary with the file contents, or empty dict if not found
    """
    path = find_podcast_yaml(search_dir, file_name)
    if path is None:
        return {}
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


class Config(BaseSettings):
    """
    Generator configuration with environment variable support.

    Configuration can be provided via:
    1. Environment variables (prefixed with PODCAST_RSS_)
    2. .env file
    3. Default values

    Example:
        export PODCAST_RSS_GENERATOR="my-station feed builder"
        export PODCAST_RSS_PRETTY_PRINT=false
    """

    model_config = SettingsConfigDict(
        env_prefix="PODCAST_RSS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Channel defaults
    generator: str = Field(
        default=f"podcast-rss v{PACKAGE_VERSION}",
        description="Value of the channel <generator> element"
    )
    docs: str = Field(
        default="https://www.rssboard.org/rss-specification",
        description="Value of the channel <docs> element"
    )

    # Output settings
    pretty_print: bool = Field(
        default=True,
        description="Indent the generated XML document"
    )
    xml_encoding: str = Field(
        default="UTF-8",
        description="Encoding declared in and used for the XML document"
    )

    # Feed definition
    feed_file: Path = Field(
        default=Path(FEED_FILE_NAME),
        description="Default feed definition file for the command line"
    )


def get_config() -> Config:
    """
    Get the generator configuration instance.

    Merges settings from environment variables and the .env file.

    Returns:
        Config: Generator configuration
    """
    return Config()
