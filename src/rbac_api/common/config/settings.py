"""
Application settings and configuration management.

Values come from the environment and an optional ``.env`` file. Firebase
credentials keep the variable names used by the existing deployment
(``APP_PROJECT_ID``, ``APP_PRIVATE_KEY``, ``APP_CLIENT_EMAIL``, ``APP_DATABASE_URL``).
"""
from typing import Optional, List, Dict, Any, Literal
from functools import lru_cache
from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from ...__version__ import __version__
from ..exceptions import ConfigurationError


FIREBASE_REQUIRED_VARS = (
    "APP_PROJECT_ID",
    "APP_PRIVATE_KEY",
    "APP_CLIENT_EMAIL",
    "APP_DATABASE_URL",
)


class Settings(BaseSettings):
    """Settings for the RBAC store API."""
    
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )
    
    # Core Application Settings
    app_name: str = Field(default="RBAC Store API")
    app_version: str = Field(default=__version__)
    environment: str = Field(default="development")
    debug: bool = Field(default=False)
    
    # Server Configuration
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8080)
    reload: bool = Field(default=False)
    api_prefix: str = Field(default="")
    
    # Store Configuration
    store_backend: Literal["memory", "firebase"] = Field(default="memory")
    app_project_id: Optional[str] = Field(default=None)
    app_private_key: Optional[SecretStr] = Field(default=None)
    app_client_email: Optional[str] = Field(default=None)
    app_database_url: Optional[str] = Field(default=None)
    firebase_app_name: str = Field(default="rbac-store-api")
    
    # CORS Configuration
    cors_origins: List[str] = Field(default=["*"])
    cors_allow_credentials: bool = Field(default=False)
    
    # Pagination Configuration
    default_page_size: int = Field(default=10, ge=1)
    max_page_size: int = Field(default=100, ge=1)
    
    # Logging Configuration
    log_level: str = Field(default="INFO")
    log_format: str = Field(
        default="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
    )
    log_file: Optional[str] = Field(default=None)
    log_rotation: str = Field(default="10 MB")
    log_retention: str = Field(default="7 days")
    log_requests: bool = Field(default=True)
    
    @property
    def is_production(self) -> bool:
        """Check if running in production."""
        return self.environment.lower() == "production"
    
    @property
    def firebase_private_key(self) -> Optional[str]:
        """Private key with escaped ``\\n`` sequences turned into newlines."""
        if self.app_private_key is None:
            return None
        return self.app_private_key.get_secret_value().replace("\\n", "\n")
    
    def missing_store_vars(self) -> List[str]:
        """Names of required store variables that are unset for the configured backend."""
        if self.store_backend != "firebase":
            return []
        values = {
            "APP_PROJECT_ID": self.app_project_id,
            "APP_PRIVATE_KEY": self.app_private_key,
            "APP_CLIENT_EMAIL": self.app_client_email,
            "APP_DATABASE_URL": self.app_database_url,
        }
        return [name for name in FIREBASE_REQUIRED_VARS if not values[name]]
    
    def validate_store_config(self) -> None:
        """
        Fail fast when the configured store cannot be reached.
        
        Raises:
            ConfigurationError: If Firebase credentials are missing
        """
        missing = self.missing_store_vars()
        if missing:
            raise ConfigurationError(
                f"Missing required environment variables: {', '.join(missing)}"
            )
    
    def get_firebase_credentials(self) -> Dict[str, Any]:
        """Service account mapping accepted by ``firebase_admin.credentials.Certificate``."""
        self.validate_store_config()
        return {
            "type": "service_account",
            "project_id": self.app_project_id,
            "private_key": self.firebase_private_key,
            "client_email": self.app_client_email,
            "token_uri": "https://oauth2.googleapis.com/token",
        }


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
