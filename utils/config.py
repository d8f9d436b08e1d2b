import os
import datetime

from dotenv import load_dotenv

# Load env vars
load_dotenv()

DEFAULT_JWT_SECRET = "your-super-secret-jwt-key-change-in-production"


class Config:
    MONGO_URI = os.getenv("MONGO_URI", "mongodb://localhost:27017")
    DB_NAME = os.getenv("DB_NAME", "news")
    # extra MongoClient kwargs, e.g. mongo_client_class for tests
    MONGO_CLIENT_OPTIONS = {}

    PORT = int(os.getenv("PORT", 5001))
    CLIENT_URL = os.getenv("CLIENT_URL", "http://localhost:3000")
    APP_ENV = os.getenv("APP_ENV", "development")
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    JWT_SECRET = os.getenv("JWT_SECRET", DEFAULT_JWT_SECRET)
    TOKEN_TTL = datetime.timedelta(hours=24)


def jwt_settings(config) -> dict:
    """
    Flask-JWT-Extended settings derived from the app config.
    Token is read from the `token` cookie first, then `Authorization: Bearer`.
    """
    return {
        "JWT_SECRET_KEY": config["JWT_SECRET"],
        "JWT_ACCESS_TOKEN_EXPIRES": config["TOKEN_TTL"],
        "JWT_TOKEN_LOCATION": ["cookies", "headers"],
        "JWT_ACCESS_COOKIE_NAME": "token",
        "JWT_COOKIE_SECURE": config["APP_ENV"] == "production",
        "JWT_COOKIE_SAMESITE": "Lax",
        "JWT_SESSION_COOKIE": False,
        "JWT_COOKIE_CSRF_PROTECT": False,
    }
