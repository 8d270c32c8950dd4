"""
Configuration Package for the Document Repository

This package provides configuration management with environment variable support.
Values are read from the process environment, with a .env file loaded first.
"""

import logging
from dotenv import load_dotenv
from .env_validator import ConfigValidator, ConfigurationError, get_env

# Load environment variables from .env file
load_dotenv()

logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


class Config:
    """
    Application configuration with environment variable support.

    All configuration values are loaded from environment variables when
    this module is first imported.
    """

    # MongoDB Configuration
    MONGODB_URI = get_env("MONGODB_URI", "mongodb://localhost:27017", "MongoDB connection URI")
    DATABASE_NAME = get_env("DATABASE_NAME", "docrepo", "MongoDB database name")
    MONGODB_APP_NAME = get_env("MONGODB_APP_NAME", "docrepo", "Application name reported to the server")
    MONGODB_SERVER_SELECTION_TIMEOUT_MS = get_env(
        "MONGODB_SERVER_SELECTION_TIMEOUT_MS",
        5000,
        "Server selection timeout in milliseconds",
        int
    )

    # Logging
    LOG_LEVEL = get_env("LOG_LEVEL", "INFO", "Logging level")

    @classmethod
    def configure_logging(cls, level: str | None = None) -> None:
        """Configure root logging with the application format"""
        logging.basicConfig(
            level=(level or cls.LOG_LEVEL).upper(),
            format=LOG_FORMAT
        )

    @classmethod
    def log_configuration(cls):
        """Log current configuration (masking sensitive values)"""
        config_dict = {
            "MONGODB_URI": cls.MONGODB_URI,
            "DATABASE_NAME": cls.DATABASE_NAME,
            "MONGODB_APP_NAME": cls.MONGODB_APP_NAME,
            "MONGODB_SERVER_SELECTION_TIMEOUT_MS": cls.MONGODB_SERVER_SELECTION_TIMEOUT_MS,
            "LOG_LEVEL": cls.LOG_LEVEL,
        }

        ConfigValidator.log_configuration(
            config_dict,
            mask_keys=['key', 'password', 'secret', 'token', 'uri']
        )


__all__ = [
    "Config",
    "ConfigValidator",
    "ConfigurationError",
    "get_env",
]
