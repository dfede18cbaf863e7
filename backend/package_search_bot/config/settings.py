"""Application configuration settings"""

import os
from dotenv import load_dotenv

load_dotenv()


class Config:
    # App settings
    TESTING = os.getenv("TESTING", "false").lower() in {"1", "true", "yes", "on"}
    DEBUG = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes", "on"}
    HOST = os.getenv("HOST", "0.0.0.0")
    PORT = int(os.getenv("PORT", "3978"))

    # Logging
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    LOG_PATH = os.getenv("LOG_PATH") or None
    LOG_FORMAT = os.getenv(
        "LOG_FORMAT",
        "%(asctime)s [%(levelname)s] [%(correlation_id)s] %(name)s: %(message)s",
    )

    # Bot Framework credentials (empty values disable auth for local emulator use)
    APP_ID = os.getenv("MICROSOFT_APP_ID", "")
    APP_PASSWORD = os.getenv("MICROSOFT_APP_PASSWORD", "")

    # =============================================================================
    # PACKAGE SEARCH CONFIGURATION
    # =============================================================================
    # NuGet search service endpoint queried by the messaging extension
    PACKAGE_SEARCH_URL: str = os.getenv(
        "PACKAGE_SEARCH_URL", "https://azuresearch-usnc.nuget.org/query"
    )

    # Teams expects an invoke response within ~5 seconds
    PACKAGE_SEARCH_TIMEOUT: float = float(os.getenv("PACKAGE_SEARCH_TIMEOUT", "5.0"))

    # Include pre-release versions in search results
    PACKAGE_SEARCH_PRERELEASE: bool = os.getenv(
        "PACKAGE_SEARCH_PRERELEASE", "true"
    ).lower() in {
        "1",
        "true",
        "yes",
        "on",
    }


class DevelopmentConfig(Config):
    """Development configuration"""

    DEBUG = True


class TestingConfig(Config):
    """Testing configuration"""

    TESTING = True
    APP_ID = ""
    APP_PASSWORD = ""


class ProductionConfig(Config):
    """Production configuration"""

    pass


# Configuration dictionary
config = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "production": ProductionConfig,
    "default": DevelopmentConfig,
}


def get_config(env=None):
    """Get configuration based on environment"""
    if env is None:
        env = os.getenv("APP_ENV", "development")
    return config.get(env, config["default"])
