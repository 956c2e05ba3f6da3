"""
Configuration loader for minigrep.

Two layers live here:

- SearchConfig, the per-invocation parameters (query, file path,
  case sensitivity) resolved from the raw command line by build().
- AppConfig, the ambient settings (logging, search defaults) loaded from
  an optional config.json with typed access via dataclasses. Supports a
  singleton for global access and runtime reload.
"""

import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping, Optional, Sequence

from .exceptions import ConfigurationError, InsufficientArgumentsError

DEFAULT_IGNORE_CASE_ENV = "IGNORE_CASE"
CONFIG_PATH_ENV = "MINIGREP_CONFIG"


@dataclass(frozen=True)
class SearchConfig:
    """
    Parameters for a single search run.

    Attributes:
        query: Literal text to look for.
        file_path: Path of the document to search, as given.
        ignore_case: Whether matching ignores letter case.
    """
    query: str
    file_path: str
    ignore_case: bool = False


def build(args: Sequence[str], ignore_case: bool = False) -> SearchConfig:
    """
    Resolve a SearchConfig from raw command line arguments.

    Args:
        args: Full argv list; element 0 is the program name, element 1
              the query and element 2 the file path. Extra elements are
              ignored.
        ignore_case: Case-insensitivity flag, usually the result of
                     ignore_case_from_env().

    Returns:
        Immutable SearchConfig.

    Raises:
        InsufficientArgumentsError: If fewer than 3 elements are given.
    """
    if len(args) < 3:
        raise InsufficientArgumentsError(details={"received": len(args)})

    return SearchConfig(query=args[1], file_path=args[2], ignore_case=ignore_case)


def ignore_case_from_env(
    environ: Optional[Mapping[str, str]] = None,
    variable: str = DEFAULT_IGNORE_CASE_ENV
) -> bool:
    """
    Report whether the case-insensitivity variable is set.

    Only presence counts; an empty value still enables it.
    """
    if environ is None:
        environ = os.environ
    return variable in environ


@dataclass
class LoggingConfig:
    """Configuration for logging behavior."""
    level: str
    format: str
    logs_directory: Optional[Path]
    max_file_size_mb: int
    backup_count: int


@dataclass
class SearchSettings:
    """Defaults applied to every search run."""
    ignore_case_env: str
    encoding: str


@dataclass
class AppConfig:
    """
    Main configuration container holding all config sections.

    Provides singleton access via get_config() function.
    """
    logging: LoggingConfig
    search: SearchSettings
    project_root: Path = field(default_factory=Path)

    @classmethod
    def from_file(cls, config_path: Path) -> "AppConfig":
        """
        Load configuration from a JSON file.

        Args:
            config_path: Path to the config.json file.

        Returns:
            Populated AppConfig instance.

        Raises:
            ConfigurationError: If file is missing or invalid.
        """
        config_path = Path(config_path)
        if not config_path.is_file():
            raise ConfigurationError(
                f"Configuration file not found: {config_path}",
                {"path": str(config_path)}
            )

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigurationError(
                f"Invalid JSON in config file: {e}",
                {"path": str(config_path)}
            )

        if not isinstance(data, dict):
            raise ConfigurationError(
                "Config file must contain a JSON object",
                {"path": str(config_path)}
            )

        project_root = config_path.resolve().parent.parent

        return cls._parse_config(data, project_root)

    @classmethod
    def default(cls) -> "AppConfig":
        """Build a configuration made only of defaults."""
        return cls._parse_config({}, Path.cwd())

    @classmethod
    def _parse_config(cls, data: dict, project_root: Path) -> "AppConfig":
        """Parse raw config dict into typed AppConfig object."""
        log_data = data.get("logging", {})
        logs_directory = log_data.get("logs_directory")
        logging_cfg = LoggingConfig(
            level=log_data.get("level", "WARNING"),
            format=log_data.get("format", "%(asctime)s - %(name)s - %(levelname)s - %(message)s"),
            logs_directory=cls._resolve_path(logs_directory, project_root) if logs_directory else None,
            max_file_size_mb=log_data.get("max_file_size_mb", 10),
            backup_count=log_data.get("backup_count", 5)
        )

        search_data = data.get("search", {})
        search = SearchSettings(
            ignore_case_env=search_data.get("ignore_case_env", DEFAULT_IGNORE_CASE_ENV),
            encoding=search_data.get("encoding", "utf-8")
        )

        return cls(logging=logging_cfg, search=search, project_root=project_root)

    @staticmethod
    def _resolve_path(path_str: str, project_root: Path) -> Path:
        """Resolve a path string, making relative paths absolute."""
        path = Path(path_str)
        if path.is_absolute():
            return path
        return project_root / path


_config_instance: Optional[AppConfig] = None


def get_config(config_path: Path = None) -> AppConfig:
    """
    Get the singleton AppConfig instance.

    Args:
        config_path: Optional path to config file. If not provided, the
                    MINIGREP_CONFIG variable is consulted, then
                    config/config.json is searched upward from the current
                    directory. Defaults are used when nothing is found.

    Returns:
        The global AppConfig instance.

    Raises:
        ConfigurationError: If an existing config cannot be loaded.
    """
    global _config_instance

    if _config_instance is None or config_path is not None:
        if config_path is None:
            env_path = os.environ.get(CONFIG_PATH_ENV)
            config_path = Path(env_path) if env_path else _find_config_file()

        if config_path is None:
            _config_instance = AppConfig.default()
        else:
            _config_instance = AppConfig.from_file(config_path)

    return _config_instance


def _find_config_file() -> Optional[Path]:
    """Search upward from current directory to find config/config.json."""
    current = Path.cwd()

    for _ in range(10):
        config_path = current / "config" / "config.json"
        if config_path.is_file():
            return config_path

        parent = current.parent
        if parent == current:
            break
        current = parent

    return None


def reload_config(config_path: Path = None) -> AppConfig:
    """
    Force reload of configuration.

    Args:
        config_path: Optional path to config file.

    Returns:
        Fresh AppConfig instance.
    """
    global _config_instance
    _config_instance = None
    return get_config(config_path)


if __name__ == "__main__":
    try:
        config = get_config()
        print(f"Project root: {config.project_root}")
        print(f"Log level: {config.logging.level}")
        print(f"Ignore-case variable: {config.search.ignore_case_env}")
        print(build(["minigrep", "to", "poem.txt"], ignore_case_from_env()))
    except ConfigurationError as e:
        print(f"Config error: {e.message}")
