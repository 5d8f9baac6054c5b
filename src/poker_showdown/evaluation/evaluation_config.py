"""Configuration loader for hand evaluation."""

import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

import jsonschema

from poker_showdown.errors import EvaluationConfigError
from poker_showdown.evaluation.constants import DEFAULT_SUIT_PRIORITY, HAND_SIZE, MAX_CARDS

logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).parents[1] / "data"
DEFAULT_CONFIG_PATH = DATA_DIR / "evaluation.json"
SCHEMA_PATH = DATA_DIR / "schemas" / "evaluation.json"
CONFIG_ENV_VAR = "POKER_SHOWDOWN_CONFIG"


@dataclass
class EvaluationConfig:
    """Settings for hand evaluation."""

    id: str = "high"
    name: str = "Standard High Hand"
    description: str = ""
    max_cards: int = MAX_CARDS
    hand_size: int = HAND_SIZE
    suit_priority: list[int] = field(default_factory=lambda: [int(s) for s in DEFAULT_SUIT_PRIORITY])
    max_workers: int = 1


class EvaluationConfigLoader:
    """Loads and caches the evaluation configuration."""

    def __init__(self, config_path: Path | None = None):
        """
        Initialize the loader.

        Args:
            config_path: JSON file to load. Defaults to the path named by
                         POKER_SHOWDOWN_CONFIG, then the packaged default.
        """
        if config_path is None:
            env_path = os.environ.get(CONFIG_ENV_VAR)
            config_path = Path(env_path) if env_path else DEFAULT_CONFIG_PATH

        self.config_path = Path(config_path)
        self._config: EvaluationConfig | None = None

    def load(self) -> EvaluationConfig:
        """
        Load and validate the configuration file.

        Raises:
            EvaluationConfigError: If the file is missing, unreadable or fails validation
        """
        logger.info(f"Loading evaluation configuration from {self.config_path}")

        if not self.config_path.exists():
            logger.error(f"Configuration file not found: {self.config_path}")
            raise EvaluationConfigError(f"Configuration file not found: {self.config_path}")

        try:
            with open(self.config_path) as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise EvaluationConfigError(f"Invalid JSON in {self.config_path}: {e}")

        try:
            jsonschema.validate(instance=data, schema=self._load_schema())
        except jsonschema.exceptions.ValidationError as e:
            raise EvaluationConfigError(f"Schema validation failed for {self.config_path}: {e.message}")

        defaults = EvaluationConfig()
        self._config = EvaluationConfig(
            id=data.get("id", defaults.id),
            name=data.get("name", defaults.name),
            description=data.get("description", defaults.description),
            max_cards=data.get("max_cards", defaults.max_cards),
            hand_size=data.get("hand_size", defaults.hand_size),
            suit_priority=data.get("suit_priority", defaults.suit_priority),
            max_workers=data.get("max_workers", defaults.max_workers),
        )
        logger.debug(f"Loaded evaluation configuration {self._config.id}: {self._config}")
        return self._config

    def get_config(self) -> EvaluationConfig:
        """Get the configuration, loading it on first use."""
        if self._config is None:
            self.load()
        return self._config

    @staticmethod
    def _load_schema() -> dict:
        with open(SCHEMA_PATH) as f:
            return json.load(f)


# Global instance
evaluation_config_loader = EvaluationConfigLoader()


def get_evaluation_config() -> EvaluationConfig:
    """Convenience function to get the active evaluation configuration."""
    return evaluation_config_loader.get_config()
