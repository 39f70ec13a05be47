from pydantic_settings import BaseSettings

GRAPHQL_URL = "https://play.instruqt.com/graphql"


class Settings(BaseSettings):
    api_token: str = ""
    team_slug: str = ""
    webhook_secret: str = ""
    graphql_url: str = GRAPHQL_URL

    # Per-request timeout, seconds
    timeout_seconds: float = 30.0

    # Receiver settings
    webhook_path: str = "/webhook"

    class Config:
        env_file = ".env"
        env_prefix = "INSTRUQT_"


settings = Settings()
