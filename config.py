from pydantic_settings import BaseSettings
from functools import lru_cache
from typing import List, Optional


class Settings(BaseSettings):
    app_title: str = "Doubles Draw API"
    log_level: str = "INFO"
    cors_origins: List[str] = ["*"]
    max_sessions: int = 1000
    # 設定後每個新 session 的亂數產生器都用同一個 seed（方便重現抽籤結果）
    random_seed: Optional[int] = None

    class Config:
        env_file = ".env"
        env_prefix = "DOUBLES_"


@lru_cache()
def get_settings():
    return Settings()
