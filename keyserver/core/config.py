import os
from dotenv import load_dotenv

load_dotenv()

class Settings:
    APP_NAME: str = os.getenv("APP_NAME", "HWID Key Server")
    KEYS_FILE: str = os.getenv("KEYS_FILE", "./keys.json")

    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", "3000"))

    # Length of generated API keys (lowercase letters and digits)
    KEY_LENGTH: int = int(os.getenv("KEY_LENGTH", "16"))

    CORS_ORIGINS: str = os.getenv("CORS_ORIGINS", "*")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

settings = Settings()
