from dataclasses import dataclass, field
import os
from dotenv import load_dotenv

load_dotenv()


class ConfigurationError(ValueError):
    """Raised when the server cannot start with the current environment."""


def _env_int(key: str, default: int) -> int:
    value = os.getenv(key)
    if value is None or value == '':
        return default
    try:
        return int(value)
    except ValueError:
        raise ConfigurationError(f"{key} must be an integer, got {value!r}")


@dataclass
class Settings:

    GITHUB_PERSONAL_ACCESS_TOKEN: str = field(
        default_factory=lambda: os.getenv('GITHUB_PERSONAL_ACCESS_TOKEN') or os.getenv('GITHUB_TOKEN', ''))
    GITHUB_API_URL: str = field(default_factory=lambda: os.getenv('GITHUB_API_URL', 'https://api.github.com'))
    GITHUB_TIMEOUT: int = field(default_factory=lambda: _env_int('GITHUB_TIMEOUT', 30))
    GITHUB_SERVER_NAME: str = field(default_factory=lambda: os.getenv('GITHUB_SERVER_NAME', 'github-server'))
    SERVER_VERSION: str = '0.1.0'
    MAX_CONCURRENT_BLOBS: int = field(default_factory=lambda: _env_int('MAX_CONCURRENT_BLOBS', 8))
    LOG_LEVEL: str = field(default_factory=lambda: os.getenv('LOG_LEVEL', 'INFO'))

    def validate(self) -> bool:

        if not self.GITHUB_PERSONAL_ACCESS_TOKEN:
            raise ConfigurationError(
                "GITHUB_PERSONAL_ACCESS_TOKEN environment variable is required. Please add it to your .env file")

        if self.GITHUB_TIMEOUT <= 0:
            raise ConfigurationError("GITHUB_TIMEOUT must be a positive number of seconds")

        if self.MAX_CONCURRENT_BLOBS <= 0:
            raise ConfigurationError("MAX_CONCURRENT_BLOBS must be at least 1")

        return True


settings = Settings()
