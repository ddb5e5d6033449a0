"""
Config Manager

Main configuration manager with include system support.
Loads modular YAML files and maps them onto the typed AppConfig.
"""

import yaml
from pathlib import Path
from typing import Dict, List, Optional, Union

from models.config import AppConfig
from models.enums import LogCategory
from utils.logger import get_logger

log = get_logger().for_category(LogCategory.CONFIG)

SRC_DIR = Path(__file__).resolve().parent.parent


class ConfigManager:
    """
    Main configuration manager with include system support

    Loads config.yaml and processes the include: directive to load modular
    YAML files. Falls back to factory_defaults.yaml when the main config
    can't be read.

    Example:
        config = ConfigManager()
        config.load()

        config.app.animation.primitive_type   # "circle"
        config.app.canvas.width               # 500
    """

    def __init__(
        self,
        config_path: Union[str, Path] = "config/config.yaml",
        defaults_path: Union[str, Path] = "config/factory_defaults.yaml",
        base_dir: Optional[Path] = None,
    ):
        """
        Args:
            config_path: Path to main config.yaml (relative paths resolve against base_dir)
            defaults_path: Path to factory defaults fallback
            base_dir: Directory relative paths resolve against (defaults to src/)
        """
        self.base_dir = Path(base_dir) if base_dir is not None else SRC_DIR
        self.config_path = self._resolve(config_path)
        self.factory_defaults_path = self._resolve(defaults_path)
        self.data: Dict = {}
        self.app: AppConfig = AppConfig()

    def _resolve(self, path: Union[str, Path]) -> Path:
        path = Path(path)
        return path if path.is_absolute() else self.base_dir / path

    def load(self) -> AppConfig:
        """
        Load YAML configuration with include system support

        Process:
        1. Load main config.yaml
        2. If it has 'include:' list, load and merge those files
        3. Otherwise treat as monolithic config
        4. Fallback to factory defaults on failure
        5. Map the merged dict onto AppConfig

        Returns:
            Typed AppConfig
        """
        try:
            main_config = self._read_yaml(self.config_path)

            if 'include' in main_config:
                log.info("Using include-based configuration")
                self.data = self._load_with_includes(main_config['include'], self.config_path.parent)
            else:
                log.info("Using monolithic configuration", path=str(self.config_path))
                self.data = main_config

            self.app = AppConfig.from_dict(self.data)

        except Exception as ex:
            log.error("Failed to load config.yaml", error=str(ex), error_type=type(ex).__name__)
            log.warn("Falling back to factory defaults")

            self.data = self._read_yaml(self.factory_defaults_path)
            self.app = AppConfig.from_dict(self.data)

        log.info(
            "Configuration loaded",
            primitive=self.app.animation.primitive_type,
            canvas=f"{self.app.canvas.width}x{self.app.canvas.height}",
            interval_ms=self.app.animation.cycle_interval_ms,
        )
        return self.app

    @staticmethod
    def _read_yaml(path: Path) -> Dict:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ValueError(f"Top-level YAML in {path.name} must be a mapping")
        return data

    def _load_with_includes(self, include_list: List[str], config_dir: Path) -> Dict:
        """
        Load and merge multiple YAML files from include list

        Args:
            include_list: List of filenames to load (e.g., ["canvas.yaml", "animation.yaml"])
            config_dir: Directory containing config files

        Returns:
            Merged config dict
        """
        merged = {}

        for filename in include_list:
            filepath = config_dir / filename
            try:
                file_data = self._read_yaml(filepath)
                if file_data:
                    merged.update(file_data)
                    log.info(f"Loaded {filename}", keys=str(list(file_data.keys())))
            except FileNotFoundError:
                log.error(f"File not found: {filename}")
                raise
            except Exception as ex:
                log.error(f"Error loading {filename}", error=str(ex))
                raise

        log.info("Config merge complete", total_keys=len(merged), keys=str(list(merged.keys())[:10]))
        return merged
