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
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./authgate.db")
    API_PORT = data.get("API_PORT", 8000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = data.get("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    ENABLE_LOGGING_MIDDLEWARE = bool(data.get("ENABLE_LOGGING_MIDDLEWARE", 1))
    JWT_SECRET = data.get("JWT_SECRET", "dev-secret-key-change-in-production")

    # Token transport and lifetime
    TOKEN_HEADER = data.get("TOKEN_HEADER", "X-Auth-Token")
    TOKEN_TIMEOUT_SECONDS = int(data.get("TOKEN_TIMEOUT_SECONDS", 2592000))
    ALLOW_CONCURRENT_LOGIN = bool(data.get("ALLOW_CONCURRENT_LOGIN", True))
    # "destroy" or "retain": Account-Session fate when its last token ends
    ACCOUNT_SESSION_LOGOUT_POLICY = data.get("ACCOUNT_SESSION_LOGOUT_POLICY", "destroy")

    BCRYPT_ROUNDS = int(data.get("BCRYPT_ROUNDS", 12))
    AUTO_CREATE_SCHEMA = bool(data.get("AUTO_CREATE_SCHEMA", True))
    SEED_DEMO_ACCOUNTS = bool(data.get("SEED_DEMO_ACCOUNTS", True))
    DEMO_ACCOUNTS = data.get("DEMO_ACCOUNTS")  # None -> built-in demo accounts
    ROUTE_RULES = data.get("ROUTE_RULES")  # None -> built-in route table
    CUSTOM_SESSION_DEFAULTS = data.get(
        "CUSTOM_SESSION_DEFAULTS",
        {
            "system-config": {
                "theme": "dark",
                "language": "zh-CN",
                "timezone": "Asia/Shanghai",
            }
        },
    )
