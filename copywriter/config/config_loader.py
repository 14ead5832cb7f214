# =============================================================================
# File: config_loader.py
# Date: 2026-10-12
# Copyright (c) 2024 Goutam Malakar. All rights reserved.
# =============================================================================

import json
import os

from pydantic import ValidationError

from copywriter.config.appsettings import AppSettings
from copywriter.exceptions.custom_exceptions import ConfigurationError
from copywriter.logger import get_logger

logger = get_logger("config_loader")


class ConfigLoader:
    __appsettings = None

    @staticmethod
    def get_app_settings(reload: bool = False) -> AppSettings:
        """
        Loads AppSettings from appsettings.json and environment-specific override in the same folder.
        Performs a deep merge for nested config sections, then applies environment variables.
        """
        if ConfigLoader.__appsettings is not None and not reload:
            return ConfigLoader.__appsettings

        data = ConfigLoader._load_config_data("appsettings.json", True)
        try:
            settings = AppSettings(**data)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid application settings: {e}") from e

        settings.app.debug = os.getenv("COPYWRITER_DEBUG_MODE", "0") == "1" or settings.app.debug
        max_size = os.getenv("COPYWRITER_MAX_FILE_SIZE")
        if max_size:
            try:
                size = int(max_size)
            except ValueError:
                raise ConfigurationError(
                    f"COPYWRITER_MAX_FILE_SIZE must be an integer, got {max_size!r}"
                )
            if size <= 0:
                raise ConfigurationError("COPYWRITER_MAX_FILE_SIZE must be a positive integer")
            settings.walker.max_file_size = size

        ConfigLoader.__appsettings = settings
        return settings

    @staticmethod
    def _load_config_data(config_file_name: str, check_env_file: bool = False) -> dict:
        """
        Loads a config file and merges with environment-specific override if present.
        Performs a deep merge for nested config sections.
        """
        base_dir = os.path.dirname(os.path.abspath(__file__))
        base_path = os.path.join(base_dir, config_file_name)

        logger.debug(f"Loading config from {base_path}")

        def deep_update(d, u):
            for k, v in u.items():
                if isinstance(v, dict) and isinstance(d.get(k), dict):
                    deep_update(d[k], v)
                else:
                    d[k] = v

        if not os.path.exists(base_path):
            raise ConfigurationError(f"Config file not found: {base_path}")

        with open(base_path, "r", encoding="utf-8") as f:
            data = json.load(f)

        # Merge environment-specific config if requested and it exists (deep merge)
        if check_env_file:
            env = os.getenv("COPYWRITER_ENV")
            if env:
                name, ext = os.path.splitext(config_file_name)
                env_path = os.path.join(base_dir, f"{name}.{env.lower()}{ext}")
                if os.path.exists(env_path):
                    logger.debug(f"Merging environment config from {env_path}")
                    with open(env_path, "r", encoding="utf-8") as f:
                        env_data = json.load(f)
                    deep_update(data, env_data)

        return data
