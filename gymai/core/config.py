"""
Configuration and constants for the GymAI Microservice.
"""
import os
from dotenv import load_dotenv

load_dotenv()


def _env_flag(name: str, default: str = "true") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


class Settings:
    """Application settings loaded from environment variables."""

    # OpenAI Configuration
    OPENAI_API_KEY: str = os.getenv("OPENAI_API_KEY", "")
    OPENAI_MODEL: str = os.getenv("OPENAI_MODEL", "gpt-4o-mini")
    OPENAI_TIMEOUT: float = float(os.getenv("OPENAI_TIMEOUT", 60))
    OPENAI_MAX_ATTEMPTS: int = int(os.getenv("OPENAI_MAX_ATTEMPTS", 3))

    # Upper bound for one adaptation request, enforced by the route
    AI_REQUEST_TIMEOUT: float = float(os.getenv("AI_REQUEST_TIMEOUT", 90))

    # AI Temperature Settings
    TEMPERATURE_ADAPTATION: float = 0.3  # Conservative plan edits
    TEMPERATURE_ANALYSIS: float = 0.3    # Meal estimates

    # Server Configuration
    PORT: int = int(os.getenv("PORT", 10000))
    HOST: str = "0.0.0.0"

    # Rate limiting
    RATE_LIMIT_ENABLED: bool = _env_flag("RATE_LIMIT_ENABLED")

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # Nutrition
    DEFAULT_ACTIVITY_MULTIPLIER: float = 1.55  # Moderate exercise

    @classmethod
    def validate(cls) -> None:
        """Validate configuration needed by the AI features."""
        missing = []

        if not cls.OPENAI_API_KEY:
            missing.append("OPENAI_API_KEY")

        if missing:
            raise ValueError(
                f"Missing required environment variables: {', '.join(missing)}. "
                "Please check your .env file."
            )


settings = Settings()
