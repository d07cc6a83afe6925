from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    database_url: str = "sqlite+aiosqlite:///./data/authapi.sqlite3"
    host: str = "0.0.0.0"
    port: int = 8080
    cors_origins: list[str] = ["*"]
    min_password_length: int = 5
    access_token_bytes: int = 128  # 256 hex chars
    bcrypt_rounds: int = 12
    log_level: str = "INFO"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
