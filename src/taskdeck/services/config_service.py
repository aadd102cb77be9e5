"""Configuration service for loading taskdeck.yml."""

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from ..models import GrammarConfig, TaskDeckConfig

logger = logging.getLogger(__name__)


class ConfigService:
    """Service for loading and caching workspace configuration."""

    CONFIG_FILE = "taskdeck.yml"

    def __init__(self, workspace_root: Path) -> None:
        """Initialize the config service.

        Args:
            workspace_root: Path to the workspace directory
        """
        self.workspace_root = workspace_root
        self._config: TaskDeckConfig | None = None
        self._config_error: str | None = None

    @property
    def config_path(self) -> Path:
        return self.workspace_root / self.CONFIG_FILE

    @property
    def has_config_error(self) -> bool:
        """Check if there was an error loading config."""
        return self._config_error is not None

    @property
    def config_error(self) -> str | None:
        """Get the config error message if any."""
        return self._config_error

    @property
    def tasks_file(self) -> str:
        """Workspace-relative path of the task document."""
        return self.get_config().tasks_file

    def get_config(self) -> TaskDeckConfig:
        """Get configuration, loading from file if not cached."""
        if self._config is None:
            self._config = self._load_config()
        return self._config

    def get_grammar_config(self) -> GrammarConfig:
        """Convenience method to get the task list grammar."""
        return self.get_config().grammar

    def reload(self) -> None:
        """Clear cached configuration, forcing reload on next access."""
        self._config = None
        self._config_error = None

    def _load_config(self) -> TaskDeckConfig:
        """Load configuration from file or return default."""
        config_path = self.config_path
        self._config_error = None

        if not config_path.exists():
            logger.debug("No %s found, using defaults", self.CONFIG_FILE)
            return TaskDeckConfig.default()

        try:
            with open(config_path) as f:
                data = yaml.safe_load(f)

            if data is None:
                self._config_error = f"{self.CONFIG_FILE} is empty"
                logger.warning(self._config_error)
                return TaskDeckConfig.default()

            if not isinstance(data, dict):
                self._config_error = f"{self.CONFIG_FILE} must contain a mapping"
                logger.warning(self._config_error)
                return TaskDeckConfig.default()

            config = TaskDeckConfig(**data)
            logger.info(
                "Loaded %s (tasks_file=%s, grammar v%d)",
                self.CONFIG_FILE,
                config.tasks_file,
                config.grammar.version,
            )
            return config

        except yaml.YAMLError as e:
            self._config_error = f"Invalid YAML in {self.CONFIG_FILE}: {e}"
            logger.warning(self._config_error)
            return TaskDeckConfig.default()

        except ValidationError as e:
            self._config_error = f"Invalid {self.CONFIG_FILE}: {e}"
            logger.warning(self._config_error)
            return TaskDeckConfig.default()

        except OSError as e:
            self._config_error = f"Error loading {self.CONFIG_FILE}: {e}"
            logger.warning(self._config_error)
            return TaskDeckConfig.default()
