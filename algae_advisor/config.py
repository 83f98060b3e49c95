"""
Configuration module for the Algae Biofuel Advisor.

Loads environment variables and validates required settings.

The Gemini API key is NOT part of configuration: it is entered by the user
on the Settings tab and lives only in process memory (see AppState).
"""
import os
from typing import List
from dotenv import load_dotenv

# Load .env file
load_dotenv()


class Settings:
    """Application settings loaded from environment variables."""

    # Google Gemini REST endpoint
    GEMINI_API_BASE_URL: str = os.getenv(
        "GEMINI_API_BASE_URL", "https://generativelanguage.googleapis.com"
    )
    GEMINI_API_VERSION: str = os.getenv("GEMINI_API_VERSION", "v1")
    GEMINI_MODEL: str = os.getenv("GEMINI_MODEL", "gemini-1.5-flash")

    # Only the connect phase is bounded; the generation call itself has no timeout
    GEMINI_CONNECT_TIMEOUT: float = float(os.getenv("GEMINI_CONNECT_TIMEOUT", "10"))

    @property
    def GEMINI_GENERATE_CONTENT_URL(self) -> str:
        """Full URL of the generateContent method for the configured model."""
        base_url = self.GEMINI_API_BASE_URL.rstrip("/")
        return (
            f"{base_url}/{self.GEMINI_API_VERSION}/models/"
            f"{self.GEMINI_MODEL}:generateContent"
        )

    # Application Settings
    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "development")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # CORS Settings (production only, comma separated)
    CORS_ALLOWED_ORIGINS: List[str] = [
        origin.strip()
        for origin in os.getenv("CORS_ALLOWED_ORIGINS", "").split(",")
        if origin.strip()
    ]

    @classmethod
    def validate(cls) -> None:
        """
        Validate that all required settings are configured.

        Raises:
            ValueError: If any required setting is missing.
        """
        required_settings = {
            "GEMINI_API_BASE_URL": cls.GEMINI_API_BASE_URL,
            "GEMINI_API_VERSION": cls.GEMINI_API_VERSION,
            "GEMINI_MODEL": cls.GEMINI_MODEL,
        }

        missing = [key for key, value in required_settings.items() if not value]

        if missing:
            raise ValueError(
                f"Missing required environment variables: {', '.join(missing)}. "
                "Please check your .env file."
            )

    @classmethod
    def is_production(cls) -> bool:
        """Check if running in production environment."""
        return cls.ENVIRONMENT.lower() == "production"

    @classmethod
    def is_development(cls) -> bool:
        """Check if running in development environment."""
        return cls.ENVIRONMENT.lower() == "development"


# Create a singleton instance
settings = Settings()

# Validate settings on module import (fail fast if misconfigured).
# Tests set VALIDATE_CONFIG=false.
if os.getenv("VALIDATE_CONFIG", "true").lower() == "true":
    try:
        settings.validate()
    except ValueError as e:
        # In development, warn but don't crash
        if settings.is_development():
            print(f"⚠️  Warning: {e}")
            print("   The app may not work correctly until you configure your .env file.")
        else:
            raise
