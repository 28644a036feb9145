from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    app_name: str = "Lender Lead Intake API"
    debug: bool = False
    log_level: str = "INFO"

    cors_origins: str = "http://localhost:3000,http://127.0.0.1:3000"

    # External collector receiving completed applications
    webhook_url: str = "https://primary-production-56087.up.railway.app/webhook/i-am-lender"
    submission_timeout: float = 30.0

    max_sessions: int = 1000
    echo_max_submissions: int = 500

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    @property
    def cors_origin_list(self) -> list[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]


settings = Settings()
