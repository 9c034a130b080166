import json
import logging
import re
from dataclasses import fields
from typing import Dict, Any, Optional

from models.settings import AnalysisSettings, TableStyle

logger = logging.getLogger(__name__)

SUPPORTED_FORMATS = ("txt", "csv", "md", "org")
COLOR_PATTERN = re.compile(r"^#[0-9A-Fa-f]{6}$")
COLOR_KEYS = ("header_fill", "header_foreground", "body_foreground")

class ConfigLoader:
    """Handles loading and validation of configuration files."""

    @staticmethod
    def load_config(config_path: Optional[str]) -> Dict[str, Any]:
        """
        Load and validate configuration from JSON file.

        Args:
            config_path: Path to configuration file, or None for defaults

        Returns:
            Validated configuration dictionary

        Raises:
            json.JSONDecodeError: If config file is invalid JSON
            ValueError: If config validation fails
        """
        if config_path is None:
            return ConfigLoader._validate_config({})
        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                config = json.load(f)
            logger.info(f"Configuration loaded from {config_path}")
            return ConfigLoader._validate_config(config)
        except FileNotFoundError:
            logger.warning(f"Config file not found at {config_path}. Using default settings.")
            return ConfigLoader._validate_config({})
        except json.JSONDecodeError as e:
            logger.error(f"Error parsing config file: {e}")
            raise

    @staticmethod
    def load_settings(config_path: Optional[str]) -> AnalysisSettings:
        """Load a configuration file and build the immutable settings value."""
        return AnalysisSettings.from_config(ConfigLoader.load_config(config_path))

    @staticmethod
    def _validate_config(config: Dict[str, Any]) -> Dict[str, Any]:
        """
        Validate and set default configuration values.

        Args:
            config: Configuration dictionary to validate

        Returns:
            Validated configuration with defaults applied

        Raises:
            ValueError: If configuration is invalid
        """
        default_config = {
            "fallback_font_family": "Default",
            "fallback_font_size": 11,
            "chars_per_page": 1800,
            "output_format": ["txt"],
            "show_progress": False,
            "table": {},
        }

        merged_config = default_config.copy()
        if not isinstance(config, dict):
            raise ValueError("Configuration should be a JSON object.")
        for key in config:
            if key in default_config:
                merged_config[key] = config[key]
            else:
                logger.warning(f"Unknown key '{key}' in config. Ignoring it.")

        # Validate types
        family = merged_config["fallback_font_family"]
        if not isinstance(family, str) or not family.strip():
            raise ValueError("'fallback_font_family' should be a non-empty string.")
        size = merged_config["fallback_font_size"]
        if isinstance(size, bool) or not isinstance(size, int) or size <= 0:
            raise ValueError("'fallback_font_size' should be a positive integer.")
        chars = merged_config["chars_per_page"]
        if isinstance(chars, bool) or not isinstance(chars, int) or chars <= 0:
            raise ValueError("'chars_per_page' should be a positive integer.")
        if not isinstance(merged_config["output_format"], list):
            raise ValueError("'output_format' should be a list.")
        for fmt in merged_config["output_format"]:
            if fmt not in SUPPORTED_FORMATS:
                raise ValueError(f"Unsupported output format '{fmt}'.")
        if not isinstance(merged_config["show_progress"], bool):
            raise ValueError("'show_progress' should be a boolean.")
        if not isinstance(merged_config["table"], dict):
            raise ValueError("'table' should be a dictionary.")

        merged_config["table"] = ConfigLoader._validate_table(merged_config["table"])
        return merged_config

    @staticmethod
    def _validate_table(table: Dict[str, Any]) -> Dict[str, Any]:
        """
        Keep only known table style keys and check each value against the
        type of its TableStyle default.

        Raises:
            ValueError: If a table style value has the wrong type or format
        """
        defaults = TableStyle()
        known = {f.name for f in fields(TableStyle)}
        validated = {}
        for key, value in table.items():
            if key not in known:
                logger.warning(f"Unknown table style key '{key}'. Ignoring it.")
                continue
            default = getattr(defaults, key)
            if isinstance(default, tuple):
                if (not isinstance(value, list) or len(value) != 2
                        or not all(ConfigLoader._is_color(item) for item in value)):
                    raise ValueError(f"'table.{key}' should be a list of two '#RRGGBB' colors.")
            elif isinstance(default, str):
                if not isinstance(value, str):
                    raise ValueError(f"'table.{key}' should be a string.")
            elif isinstance(default, int):
                if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                    raise ValueError(f"'table.{key}' should be a positive integer.")
            elif isinstance(default, float):
                if isinstance(value, bool) or not isinstance(value, (int, float)) or value < 0:
                    raise ValueError(f"'table.{key}' should be a non-negative number.")
            validated[key] = value

        for key in COLOR_KEYS:
            if key in validated and not ConfigLoader._is_color(validated[key]):
                raise ValueError(f"'table.{key}' should be a '#RRGGBB' color.")
        if "page_label" in validated:
            try:
                validated["page_label"].format(number=1)
            except (KeyError, IndexError, ValueError):
                raise ValueError("'table.page_label' may only use the {number} placeholder.")
        for key in ("max_width", "row_height"):
            if key in validated and validated[key] == 0:
                raise ValueError(f"'table.{key}' should be greater than zero.")
        return validated

    @staticmethod
    def _is_color(value: Any) -> bool:
        return isinstance(value, str) and bool(COLOR_PATTERN.match(value))
