"""
Environment Configuration Validator

Reads environment variables with type coercion and masks sensitive
values when logging the active configuration.
"""

import os
import logging
from typing import Dict, List, Optional, Any

logger = logging.getLogger(__name__)

TRUE_VALUES = ('true', '1', 'yes', 'on')


class ConfigurationError(Exception):
    """Raised when required configuration is missing or unusable"""
    pass


class ConfigValidator:
    """Validates environment configuration"""

    @staticmethod
    def get_env_with_default(key: str, default: Any, description: str, env_type: type = str) -> Any:
        """
        Return an environment variable coerced to env_type (str, int, float, bool).

        Unset variables and values that fail coercion yield default.
        """
        value = os.getenv(key)

        if not value:
            logger.debug(f"Using default value for {key}: {default} ({description})")
            return default

        if env_type is bool:
            return value.lower() in TRUE_VALUES

        try:
            return env_type(value)
        except ValueError:
            logger.warning(
                f"Invalid value for {key}: {value}. "
                f"Expected {env_type.__name__}. Using default: {default}"
            )
            return default

    @staticmethod
    def mask_value(value: Any) -> Any:
        """Keep a short prefix and suffix of a sensitive value"""
        if not value:
            return value
        text = str(value)
        return f"{text[:4]}...{text[-4:]}" if len(text) > 8 else "***"

    @staticmethod
    def log_configuration(config_dict: Dict[str, Any], mask_keys: Optional[List[str]] = None) -> None:
        """Log each setting, masking keys that contain any of mask_keys"""
        mask_keys = mask_keys or ['key', 'password', 'secret', 'token']

        logger.info("=" * 80)
        logger.info("CURRENT CONFIGURATION")
        logger.info("=" * 80)

        for key, value in sorted(config_dict.items()):
            should_mask = any(mask_word in key.lower() for mask_word in mask_keys)
            display_value = ConfigValidator.mask_value(value) if should_mask else value
            logger.info(f"{key}: {display_value}")

        logger.info("=" * 80)


# Convenience functions
def get_env(key: str, default: Any, description: str = "", env_type: type = str) -> Any:
    """Shorthand for ConfigValidator.get_env_with_default"""
    return ConfigValidator.get_env_with_default(key, default, description, env_type)
