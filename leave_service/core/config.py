from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # 파일 기반 SQLite가 기본값 (재시작 후에도 데이터 유지)
    DATABASE_URL: str = "sqlite:///./leave.db"
    SQL_ECHO: bool = False

    # 신규 직원에게 leave type마다 지급하는 기본 잔여 일수
    DEFAULT_LEAVE_BALANCE: int = 20
    EMAIL_DOMAIN: str = "company.com"

    LOG_LEVEL: str = "INFO"


settings = Settings()
