from pydantic_settings import BaseSettings
from functools import lru_cache
from dotenv import load_dotenv

load_dotenv()

class Settings(BaseSettings):
    API_PREFIX: str = "/api"
    LOG_LEVEL: str = "INFO"

    class Config:
        case_sensitive = True

@lru_cache()
def get_settings():
    return Settings()
