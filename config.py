import os
import yaml

ROOT_PATH = os.path.dirname(__file__)
CONFIG_FILE_PATH = os.path.join(ROOT_PATH, "env.yaml")

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file) or dict()
else:
    data = dict()


class ApplicationConfig:
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./inventory.db")
    API_PORT = data.get("API_PORT", 8000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = data.get("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    ENABLE_LOGGING_MIDDLEWARE = bool(data.get("ENABLE_LOGGING_MIDDLEWARE", 1))
    SESSION_TTL_HOURS = int(data.get("SESSION_TTL_HOURS", 24))
    BCRYPT_ROUNDS = int(data.get("BCRYPT_ROUNDS", 12))
    SEED_ADMIN_NAME = data.get("SEED_ADMIN_NAME", "Super Admin")
    SEED_ADMIN_EMAIL = data.get("SEED_ADMIN_EMAIL", "superadmin@example.com")
    SEED_ADMIN_PASSWORD = data.get("SEED_ADMIN_PASSWORD", "password123")
