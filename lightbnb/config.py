import os
from dotenv import load_dotenv

load_dotenv()


def _database_url() -> str:
    url = os.getenv("DATABASE_URL", "")
    if url:
        return url
    user = os.getenv("DB_USER", "labber")
    password = os.getenv("DB_PASSWORD", "labber")
    host = os.getenv("DB_HOST", "localhost")
    name = os.getenv("DB_NAME", "lightbnb")
    return f"postgresql+psycopg2://{user}:{password}@{host}/{name}"


class Settings:
    APP_NAME: str = "LightBnB"

    def __init__(self):
        self.DEBUG: bool = os.getenv("DEBUG", "false").lower() == "true"

        # Database
        self.DB_HOST: str = os.getenv("DB_HOST", "localhost")
        self.DB_USER: str = os.getenv("DB_USER", "labber")
        self.DB_PASSWORD: str = os.getenv("DB_PASSWORD", "labber")
        self.DB_NAME: str = os.getenv("DB_NAME", "lightbnb")
        self.DATABASE_URL: str = _database_url()

        # Listing queries
        self.DEFAULT_LIMIT: int = int(os.getenv("DEFAULT_LIMIT", "10"))

settings = Settings()
