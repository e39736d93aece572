import os

from dotenv import load_dotenv

load_dotenv()


class Config:
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret")
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
    LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"

    # Empty means images are served from Flask's own static route.
    IMAGE_BASE_URL = os.getenv("IMAGE_BASE_URL", "").rstrip("/")

    EXPORT_DIR = os.getenv("EXPORT_DIR", "build")

    # Utility-class stylesheet; empty serves the pages unstyled.
    TAILWIND_CDN_URL = os.getenv("TAILWIND_CDN_URL", "https://cdn.tailwindcss.com")

    APP_HOST = os.getenv("APP_HOST", "0.0.0.0")
    APP_PORT = int(os.getenv("APP_PORT", "8080"))


class TestConfig(Config):
    TESTING = True
    IMAGE_BASE_URL = ""
