"""Configuration manager for componenthelper."""
import logging
import os
from typing import Any, Dict, Optional
import yaml

from componenthelper.core.errors import InvalidCapacityError
from componenthelper.utils.constants import DEFAULT_ROW_MAX, is_valid_row_max

_MISSING = object()


class ConfigManager:
    """
    Configuration manager for componenthelper.

    Reads a YAML mapping with a ``components`` section (row layout defaults)
    and a ``logging`` section (handler settings for ``setup_logger``).
    """

    def __init__(self, config_path: str = "config/config.yaml"):
        """
        Initialize the ConfigManager.

        Args:
            config_path: Path to the YAML configuration file

        Raises:
            FileNotFoundError: If the configuration file does not exist
            yaml.YAMLError: If the configuration file is not valid YAML
            ValueError: If the top level of the file is not a mapping
        """
        self.logger = logging.getLogger("componenthelper.config")
        self.config_path = config_path
        self.config: Dict[str, Any] = self._read_config_file()

    def _missing_file_hint(self) -> str:
        example_path = f"{self.config_path}.example"
        if os.path.exists(example_path):
            return f"copy {example_path} to {self.config_path} to get started"
        return "no example configuration found next to it"

    def _read_config_file(self) -> Dict[str, Any]:
        """
        Parse the configuration file into a dict.

        Returns:
            The parsed configuration; an empty file yields an empty dict
        """
        if not os.path.isfile(self.config_path):
            self.logger.error(f"Component configuration {self.config_path} is missing ({self._missing_file_hint()})")
            raise FileNotFoundError(f"Configuration file {self.config_path} not found")

        with open(self.config_path, 'r', encoding='utf-8') as config_file:
            try:
                data = yaml.safe_load(config_file)
            except yaml.YAMLError as e:
                self.logger.error(f"Cannot parse component configuration {self.config_path}: {e}")
                raise

        if data is None:
            data = {}
        if not isinstance(data, dict):
            self.logger.error(f"Component configuration {self.config_path} must be a mapping, got {type(data).__name__}")
            raise ValueError(f"Configuration file {self.config_path} must contain a mapping")

        self.logger.debug(f"Component configuration loaded from {self.config_path} (sections: {sorted(data)})")
        return data

    def get(self, key: str, default: Any = None) -> Any:
        """
        Look up a dot-separated key such as ``components.row_max``.

        Args:
            key: Dot-separated path into the configuration
            default: Value returned when any part of the path is absent

        Returns:
            The configured value, or ``default``
        """
        node: Any = self.config
        for part in key.split('.'):
            node = node.get(part, _MISSING) if isinstance(node, dict) else _MISSING
            if node is _MISSING:
                return default
        return node

    def get_default_row_max(self) -> int:
        """
        Get the default number of components per action row.

        Returns:
            The configured row capacity (1-5)

        Raises:
            InvalidCapacityError: If the configured value is outside 1-5
        """
        row_max = self.get('components.row_max', DEFAULT_ROW_MAX)
        if not is_valid_row_max(row_max):
            self.logger.error(f"Invalid components.row_max in configuration: {row_max!r}")
            raise InvalidCapacityError(row_max, source=self.config_path)
        return row_max

    def get_log_level(self) -> str:
        """
        Get the logging level.

        Returns:
            The logging level
        """
        return self.get('logging.level', 'INFO')

    def get_log_file(self) -> Optional[str]:
        """
        Get the log file path.

        Returns:
            The log file path or None if not set
        """
        return self.get('logging.file', None)

    def get_log_max_size(self) -> int:
        """
        Get the maximum log file size.

        Returns:
            The maximum log file size in bytes
        """
        return self.get('logging.max_size', 10485760)  # 10 MB

    def get_log_backup_count(self) -> int:
        """
        Get the number of backup log files to keep.

        Returns:
            The number of backup log files
        """
        return self.get('logging.backup_count', 5)
