from enum import Enum


class EnumEnvironment(str, Enum):
    DEVELOPMENT = "development"
    TESTING = "testing"
    STAGING = "staging"
    PRODUCTION = "production"


class EnumLogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


DEFAULT_API_BASE_URL = "https://aviator-api.spribe.io/s"
DEFAULT_RECENT_GAMES_PATH = "/recent-games"
DEFAULT_FALLBACK_ERROR_MESSAGE = "Failed to fetch game data. Using fallback prediction."
