from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    STORE_LATENCY_MS: int = 500
    NOTIFICATION_TTL_SECONDS: float = 5.0
    UNKNOWN_DEPARTMENT_LABEL: str = "Unknown"
    SEED_DEMO_DATA: bool = True
    PASSWORD_HASH_ROUNDS: int = 29000
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


settings = Settings()
