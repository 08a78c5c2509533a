import os
from typing import List, Optional
from pydantic import Field
from pydantic_settings import BaseSettings
from dotenv import load_dotenv

# ENV selects which .env file is loaded (local or prod)
env = os.getenv("ENV", "local")

if env == "prod":
    env_file_path = ".env.prod"
else:
    env_file_path = ".env"

load_dotenv(dotenv_path=env_file_path)


class Settings(BaseSettings):
    # Logging
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # API
    api_title: str = "Itinerary Planner API"
    cors_origins: List[str] = Field(
        default=["http://localhost:5173", "http://localhost:3000"],
        description="Origins allowed to call the API from a browser"
    )

    # Defaults for activities created by the user
    default_activity_time: str = Field(
        default="12:00",
        description="Placeholder start time for a newly added activity"
    )
    default_activity_duration: Optional[float] = Field(
        default=None,
        description="Duration in hours for a newly added activity (None = absent)"
    )
    default_activity_description: str = "New awesome activity"
    default_activity_category: str = "Custom"

    # Defaults for days appended to the trip
    default_day_theme: str = "Another Awesome Day"

    class Config:
        env_file = ".env"


settings = Settings()
