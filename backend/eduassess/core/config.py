from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    database_url: str = "sqlite:///./eduassess.db"
    jwt_secret: str = "your-super-secret-jwt-key-change-in-production"
    jwt_algorithm: str = "HS256"
    jwt_expires_minutes: int = 24 * 60
    bcrypt_rounds: int = 10
    cors_origins: list[str] = ["*"]
    log_level: str = "INFO"

settings = Settings()
