"""
Configuration settings for the visualizer.
Environment variables override defaults.
"""
import os
from dataclasses import dataclass


@dataclass
class Settings:
    """App Configuration"""

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 5000
    DEBUG: bool = False
    SECRET_KEY: str = ""
    LOG_LEVEL: str = "INFO"

    # Dataset
    DEFAULT_SIZE: int = 50
    MIN_SIZE: int = 5
    MAX_SIZE: int = 200
    VALUE_MIN: int = 1
    VALUE_MAX: int = 100

    # Playback
    DEFAULT_SPEED: int = 50
    DEFAULT_ALGORITHM: str = "bubble"

    def __post_init__(self):
        """Load from environment variables"""
        for key in self.__dataclass_fields__:
            env_value = os.getenv(key)
            if env_value is not None:
                field_type = self.__dataclass_fields__[key].type
                if field_type == bool:
                    setattr(self, key, env_value.lower() in ("true", "1", "yes"))
                elif field_type == int:
                    setattr(self, key, int(env_value))
                else:
                    setattr(self, key, env_value)


# Global settings instance
settings = Settings()
