from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    base_url: str = Field(..., validation_alias="NETWORKING_BASE_URL")
    api: str | None = Field(None, validation_alias="NETWORKING_API")
    # JSON object, e.g. NETWORKING_HEADERS='{"Accept": "application/json"}'
    headers: dict[str, str] = Field(default_factory=dict, validation_alias="NETWORKING_HEADERS")

    connect_timeout_seconds: float = Field(5.0, validation_alias="NETWORKING_CONNECT_TIMEOUT_SECONDS")
    read_timeout_seconds: float = Field(15.0, validation_alias="NETWORKING_READ_TIMEOUT_SECONDS")
    follow_redirects: bool = Field(True, validation_alias="NETWORKING_FOLLOW_REDIRECTS")
    user_agent: str = Field("", validation_alias="NETWORKING_USER_AGENT")
