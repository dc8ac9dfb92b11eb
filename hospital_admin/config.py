from typing import List
from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    # Upstream admin API (serves /api/admin/hospitals)
    HOSPITAL_API_BASE: str = "http://localhost:8000"

    HTTP_TIMEOUT: int = 10  # seconds

    DEFAULT_COUNTRY_CODE: str = "+91"
    COUNTRY_CODES: List[str] = [
        "+91", "+1", "+44", "+971", "+92", "+880", "+977", "+94", "+61", "+81",
    ]

    HOSPITAL_TYPES: List[str] = ["General", "Specialty", "Private", "Government", "Other"]
    DEFAULT_HOSPITAL_TYPE: str = "General"

    # open console sessions kept in memory; the least recently used is closed first
    MAX_SESSIONS: int = 256

    LOG_LEVEL: str = "INFO"

settings = Settings()
