from pydantic_settings import BaseSettings
from typing import List
from pathlib import Path

# Resolve .env files relative to the project root (config/settings.py -> fasttruck/ -> root)
_root_dir = Path(__file__).parent.parent.parent
_env_local = _root_dir / '.env.local'
_env_file = _root_dir / '.env'


class Settings(BaseSettings):
    """Application settings"""

    # JWT Configuration
    SECRET_KEY: str  # Required - load from .env
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 1440  # 24 hours

    # Password hashing (PBKDF2-SHA256 rounds; stored with each hash)
    PASSWORD_HASH_ITERATIONS: int = 260000

    # CORS - Will be parsed from environment variable string
    ALLOWED_ORIGINS: str = "http://localhost:3000,http://localhost:5173"

    # Database Configuration
    DATABASE_URL: str = "sqlite:///./fasttruck.db"

    # Postal lookup service (India Post pincode API)
    PINCODE_API_URL: str = "https://api.postalpincode.in/pincode"
    PINCODE_TIMEOUT_SECONDS: float = 10.0

    # Persisted UI preferences (theme)
    PREFERENCES_PATH: str = ".fasttruck-preferences.json"

    class Config:
        # Prioritize .env.local for local development, fallback to .env
        env_file = str(_env_local) if _env_local.exists() else str(_env_file)
        case_sensitive = True
        extra = "ignore"  # Ignore extra fields from environment file

    def get_allowed_origins(self) -> List[str]:
        """Parse and return CORS origins as a list"""
        return [origin.strip() for origin in self.ALLOWED_ORIGINS.split(",")]


settings = Settings()  # type: ignore[call-arg]  # Pydantic loads from .env
