import os
import yaml

ROOT_PATH = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
CONFIG_FILE_PATH = os.environ.get("TASKDESK_CONFIG", os.path.join(ROOT_PATH, "env.yaml"))

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file) or dict()
else:
    data = dict()


class ApplicationConfig:
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./taskdesk.db")
    DB_CONNECT_TIMEOUT = float(data.get("DB_CONNECT_TIMEOUT", 5))
    API_PORT = data.get("API_PORT", 8000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = data.get("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    ENABLE_LOGGING_MIDDLEWARE = bool(data.get("ENABLE_LOGGING_MIDDLEWARE", 1))
    CREATE_TABLES_ON_STARTUP = bool(data.get("CREATE_TABLES_ON_STARTUP", 1))

    # Credentials & sessions
    BCRYPT_ROUNDS = int(data.get("BCRYPT_ROUNDS", 10))
    SESSION_TTL_DAYS = int(data.get("SESSION_TTL_DAYS", 7))
    SESSION_COOKIE_NAME = data.get("SESSION_COOKIE_NAME", "taskdesk_session")
    SESSION_COOKIE_SAMESITE = data.get("SESSION_COOKIE_SAMESITE", "lax")

    # Evidence blobs
    STORAGE_DIR = data.get("STORAGE_DIR", os.path.join(ROOT_PATH, "data", "evidences"))
    STORAGE_PUBLIC_URL = data.get("STORAGE_PUBLIC_URL", "/files")
    MAX_EVIDENCE_BYTES = int(data.get("MAX_EVIDENCE_BYTES", 10 * 1024 * 1024))
