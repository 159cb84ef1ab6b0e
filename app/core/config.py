from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Banco de dados
    DATABASE_URL: str = "sqlite:///./accessmatch.db"
    SQL_ECHO: bool = False
    AUTO_CREATE_TABLES: bool = True

    # logging
    LOG_LEVEL: str = "INFO"

    # single demo account used in place of a login flow
    DEMO_USER_ID: int = 1

    # reject likes and messages between users with a block in either direction
    ENFORCE_BLOCKS: bool = False

    class Config:
        env_file = ".env"


settings = Settings()
