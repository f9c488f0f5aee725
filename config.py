import os
import yaml
from sqlalchemy.engine import make_url

ROOT_PATH = os.path.dirname(__file__)
CONFIG_FILE_PATH = os.path.join(ROOT_PATH, "env.yaml")

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file) or dict()
else:
    data = dict()


def _setting(name, default=None):
    """Environment variable first, then env.yaml, then default"""
    value = os.environ.get(name)
    if value is not None:
        return value
    return data.get(name, default)


def _list_setting(name, default):
    value = _setting(name, default)
    if isinstance(value, str):
        return [item.strip() for item in value.split(",") if item.strip()]
    return list(value)


def _bool_setting(name, default):
    value = _setting(name, default)
    if isinstance(value, str):
        return value.strip().lower() in ("1", "true", "yes", "on")
    return bool(value)


class ConfigurationError(RuntimeError):
    pass


class ApplicationConfig:
    # Required: the process refuses to start without these
    DB_URI = _setting("DB_URI")
    DB_NAME = _setting("DB_NAME")
    SESSION_PEPPER = _setting("SESSION_PEPPER")

    API_PORT = int(_setting("API_PORT", 3000))
    API_HOST = _setting("API_HOST", "0.0.0.0")
    ENVIRONMENT = _setting("ENVIRONMENT", "development")
    LOG_LEVEL = _setting("LOG_LEVEL", "INFO")
    DB_ECHO = _bool_setting("DB_ECHO", False)
    CORS_ORIGINS = _list_setting(
        "CORS_ORIGINS",
        [
            "http://localhost",
            "http://localhost:3000",
            "https://andrewzc.net",
            "https://api.andrewzc.net",
        ],
    )
    CORS_ALLOW_CREDENTIALS = _bool_setting("CORS_ALLOW_CREDENTIALS", True)

    REQUIRED_SETTINGS = ("DB_URI", "DB_NAME", "SESSION_PEPPER")

    @classmethod
    def validate(cls, required=REQUIRED_SETTINGS):
        missing = [name for name in required if not getattr(cls, name, None)]
        if missing:
            raise ConfigurationError(
                f"Missing required configuration: {', '.join(missing)}"
            )

    @classmethod
    def database_url(cls) -> str:
        """DB_URI with DB_NAME as its database component"""
        url = make_url(cls.DB_URI).set(database=cls.DB_NAME)
        return url.render_as_string(hide_password=False)

    @classmethod
    def is_production(cls) -> bool:
        return str(cls.ENVIRONMENT).lower() == "production"
