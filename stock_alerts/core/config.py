from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    DB_URL: str = "sqlite+aiosqlite:///./stock_alerts.db"
    DB_ECHO: bool = False

    # "recent" sales window, in days
    ALERT_LOOKBACK_DAYS: int = 30

    class Config:
        env_file = ".env"

settings = Settings()
