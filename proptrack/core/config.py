"""Configuration de l'application PropTrack"""
from pydantic_settings import BaseSettings
from typing import List


class Settings(BaseSettings):
    """Paramètres de configuration"""

    # Application
    APP_NAME: str = "PropTrack"
    VERSION: str = "1.0.0"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 8000

    # CORS - URLs autorisées
    CORS_ORIGINS: str = "http://localhost:8081,http://localhost:3000,http://127.0.0.1:3000"

    # Supabase
    SUPABASE_URL: str
    SUPABASE_KEY: str

    # Client API (assistant de création)
    API_BASE_URL: str = "http://localhost:8000/api/v1"
    API_TIMEOUT: float = 15.0

    @property
    def cors_origins_list(self) -> List[str]:
        """Transforme CORS_ORIGINS en liste"""
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",")]

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"


# Instance globale
settings = Settings()
