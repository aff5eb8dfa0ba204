from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    host: str = "0.0.0.0"
    port: int = 3000

    # Directory holding the uploaded files, served under /uploads.
    uploads_directory: str = "uploads"

    # SQLAlchemy URL of the database holding the image metadata.
    database_url: str = "sqlite:///imagehosting.db"

    log_level: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")


settings = Settings()
