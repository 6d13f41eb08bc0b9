from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    # Database Connection
    # The constraint translator understands SQLite's error vocabulary only
    DATABASE_URL: str = "sqlite:///./customers.db"

    # Logging
    LOG_LEVEL: str = "INFO"

    # API Metadata
    API_TITLE: str = "Customer Registry API"

    class Config:
        env_file = ".env"

settings = Settings()
