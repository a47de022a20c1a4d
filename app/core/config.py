from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    PROJECT_NAME: str = "URL Shortener"

    # local | dev | prod, selects log format and level
    ENV: str = "local"

    STORAGE_PATH: str = "./storage/storage.db"

    HTTP_SERVER_ADDRESS: str = "localhost:8082"
    HTTP_SERVER_TIMEOUT: int = 4
    HTTP_SERVER_IDLE_TIMEOUT: int = 60

    # Basic auth for write endpoints (required to start app)
    HTTP_SERVER_USER: str
    HTTP_SERVER_PASSWORD: str

    ALIAS_LENGTH: int = 8
    ALIAS_MAX_ATTEMPTS: int = 5

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
    )

    @property
    def DATABASE_URL(self) -> str:
        return f"sqlite:///{self.STORAGE_PATH}"

    @property
    def host(self) -> str:
        return self.HTTP_SERVER_ADDRESS.rsplit(":", 1)[0]

    @property
    def port(self) -> int:
        return int(self.HTTP_SERVER_ADDRESS.rsplit(":", 1)[1])


settings = Settings()
