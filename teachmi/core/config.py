from pydantic_settings import BaseSettings
import os
from pathlib import Path

# Load .env explicitly before creating Settings
try:
    from dotenv import load_dotenv
    import logging
    _logger = logging.getLogger(__name__)

    # Look for .env in the project root (parent of the teachmi package)
    project_dir = Path(__file__).parent.parent.parent
    env_path = project_dir / ".env"

    if env_path.exists():
        load_dotenv(env_path, override=False)
        _logger.info(f"Loaded .env file from: {env_path}")
    else:
        current_env = Path(".env")
        if current_env.exists():
            load_dotenv(current_env, override=False)
            _logger.info(f"Loaded .env file from: {current_env.absolute()}")
except Exception as e:
    import logging
    _logger = logging.getLogger(__name__)
    _logger.warning(f"Error loading .env file: {e}")


PROJECT_ROOT = Path(__file__).parent.parent.parent


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Database holding the progress slot
    database_url: str = "sqlite:///./teachmi.db"

    # API
    api_v1_prefix: str = "/api/v1"

    # CORS
    cors_origins: list[str] = ["*"]

    # Static deck asset (JSON array of cards)
    deck_path: str = ""

    # Key of the single storage slot holding serialized progress
    storage_key: str = "teachmi_progress"

    log_level: str = "INFO"
    environment: str = "production"

    class Config:
        env_file = ".env"
        case_sensitive = False

    def __init__(self, **kwargs):
        # Fall back to the bundled deck when DECK_PATH is not set
        if not kwargs.get("deck_path"):
            kwargs["deck_path"] = os.getenv("DECK_PATH", str(PROJECT_ROOT / "assets" / "cards.json"))
        super().__init__(**kwargs)

    @property
    def is_development(self) -> bool:
        return self.environment.lower() in ("development", "dev", "local")


# Create settings instance
settings = Settings()
