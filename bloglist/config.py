from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    MONGODB_URL: str = "mongodb://localhost:27017/bloglist"
    TEST_MONGODB_URL: str = "mongodb://localhost:27017/bloglist-test"
    ENVIRONMENT: str = "development"
    DATABASE_NAME: str = "bloglist"
    PORT: int = 3003
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: str = "*"


    class Config:
        env_file = ".env"
        extra = "ignore"

    @property
    def database_url(self) -> str:
        # test runs never touch the normal database
        if self.ENVIRONMENT == "test":
            return self.TEST_MONGODB_URL
        return self.MONGODB_URL

    @property
    def allowed_origins(self) -> list[str]:
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]


settings = Settings()
