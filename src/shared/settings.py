from pydantic_settings import BaseSettings, SettingsConfigDict

PLACEHOLDER_SCRIPT_URL = "https://script.google.com/macros/s/YOUR_DEPLOYMENT_ID/exec"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="allow")

    # Apps Script web app URL; the placeholder keeps the client in mock mode
    google_script_url: str = PLACEHOLDER_SCRIPT_URL
    sheets_mock_mode: bool = False

    simulated_delay_seconds: float = 1.5
    success_redirect_seconds: float = 2.0
    request_timeout_seconds: float = 10.0

    mock_sheets_host: str = "127.0.0.1"
    mock_sheets_port: int = 9001

    log_level: str = "INFO"


settings = Settings()
