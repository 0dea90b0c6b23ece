from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field
from typing import Optional

class Settings(BaseSettings):
    app_env: str = Field("dev", alias="APP_ENV")
    app_host: str = Field("0.0.0.0", alias="APP_HOST")
    app_port: int = Field(8000, alias="APP_PORT")
    log_level: str = Field("INFO", alias="LOG_LEVEL")

    # Optional on purpose: a missing key is reported to the caller per request,
    # the process still starts.
    openai_api_key: Optional[str] = Field(None, alias="OPENAI_API_KEY")
    openai_api_base: str = Field("https://api.openai.com", alias="OPENAI_API_BASE")
    openai_model_stt: Optional[str] = Field(None, alias="OPENAI_MODEL_STT")

    translate_api_base: str = Field("https://translate.googleapis.com", alias="TRANSLATE_API_BASE")

    request_timeout_seconds: int = Field(120, alias="REQUEST_TIMEOUT_SECONDS")

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")

settings = Settings()
