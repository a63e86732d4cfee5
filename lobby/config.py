"""Configuration models for the Elder Sign lobby."""

import json
import logging
import random
from pathlib import Path
from typing import Literal, Optional

import yaml
from pydantic import BaseModel, Field, field_validator

from core.store import GameStore
from games.elder_sign.models import GameOptions
from games.elder_sign.setups import DEFAULT_OPTIONS
from lobby.facade import GameFacade
from lobby.storage import InMemoryGameStore, JsonFileGameStore


LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class LobbyConfig(BaseModel):
    """
    Main configuration for running a lobby.

    Example (YAML):
        store: json
        data_dir: ./game_data
        seed: 42
        default_options:
          special_card_count: 3
          cthulhu_count: 1
    """

    store: Literal["memory", "json"] = Field(
        default="memory",
        description="Where games are kept"
    )
    data_dir: str = Field(
        default="./game_data",
        description="Directory for the json store"
    )
    seed: Optional[int] = Field(
        default=None,
        description="Random seed for reproducible shuffles"
    )
    default_options: GameOptions = Field(
        default_factory=lambda: DEFAULT_OPTIONS.model_copy(),
        description="Options applied to games created without explicit options"
    )
    log_level: str = Field(
        default="WARNING",
        description="Logging level name"
    )
    verbose: bool = Field(
        default=False,
        description="Enable verbose logging (forces DEBUG)"
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate that log_level is a standard level name."""
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {v}")
        return level

    def effective_log_level(self) -> str:
        return "DEBUG" if self.verbose else self.log_level

    class Config:
        extra = "forbid"


def load_config(filepath: str) -> LobbyConfig:
    """
    Load configuration from YAML or JSON file.

    Args:
        filepath: Path to config file

    Returns:
        LobbyConfig instance
    """
    path = Path(filepath)
    content = path.read_text()

    if path.suffix in ['.yaml', '.yml']:
        data = yaml.safe_load(content)
    else:
        data = json.loads(content)

    return LobbyConfig(**(data or {}))


def create_config(**kwargs) -> LobbyConfig:
    """
    Create a LobbyConfig from simple parameters.

    Args:
        **kwargs: LobbyConfig fields

    Returns:
        LobbyConfig instance
    """
    return LobbyConfig(**kwargs)


def configure_logging(level: str = "WARNING") -> None:
    """Configure the root logger for console output."""
    logging.basicConfig(level=getattr(logging, level.upper()), format=LOG_FORMAT)


def create_store(config: LobbyConfig) -> GameStore:
    if config.store == "json":
        return JsonFileGameStore(config.data_dir)
    if config.store == "memory":
        return InMemoryGameStore()
    raise ValueError(f"Unknown store: {config.store}")


def create_facade(config: Optional[LobbyConfig] = None) -> GameFacade:
    """
    Build a store and facade from *config*.

    Configures logging and seeds a private ``random.Random`` when
    ``config.seed`` is set.
    """
    config = config or LobbyConfig()
    configure_logging(config.effective_log_level())

    rng = random.Random(config.seed) if config.seed is not None else None
    return GameFacade(create_store(config), rng=rng, default_options=config.default_options)
