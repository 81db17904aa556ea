# movies_api/core/config.py
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    app_name: str = "movies_service"
    env: str = Field(default="local")
    host: str = "0.0.0.0"
    port: int = 8080

    mongo_dsn: str = Field(
        default="mongodb://mongo:27017/movies",
        alias="MONGO_DSN"
    )
    mongo_db: str = "movies"

    # upstreams of the aggregator
    movie_info_url: str = Field(
        default="http://localhost:8080/v1/movieinfos",
        alias="MOVIE_INFO_URL"
    )
    reviews_url: str = Field(
        default="http://localhost:8081/v1/reviews",
        alias="REVIEWS_URL"
    )
    upstream_timeout: float = Field(default=5.0, alias="UPSTREAM_TIMEOUT")
    retry_max_attempts: int = Field(default=4, ge=1,
                                    alias="RETRY_MAX_ATTEMPTS")
    retry_delay: float = Field(default=1.0, ge=0, alias="RETRY_DELAY")
    aggregate_concurrently: bool = Field(default=True,
                                         alias="AGGREGATE_CONCURRENTLY")

    sentry_dsn: str = Field(default="", alias="SENTRY_DSN")
    sentry_test_enabled: bool = Field(default=False,
                                      alias="SENTRY_TEST_ENABLED")
    model_config = SettingsConfigDict(env_file="infra/.env",
                                      extra="ignore",
                                      populate_by_name=True)


settings = Settings()
