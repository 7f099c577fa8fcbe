# backend/config.py
import os
from dotenv import load_dotenv
from pathlib import Path
from typing import Optional

# ============================================================
# 🌍 DETECTAR ENTORNO Y CARGAR .env CORRESPONDIENTE
# ============================================================
ENV = os.getenv("ENV", "development")

env_file = ".env.production" if ENV == "production" else ".env.development"
dotenv_path = Path(__file__).resolve().parent / env_file
load_dotenv(dotenv_path)

REQUIRED_VARS = ("MONGO_URI", "JWT_SECRET")


def _as_bool(value: Optional[str], default: bool) -> bool:
    if value is None or value == "":
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


# ============================================================
# ⚙️ CONFIGURACIÓN GENERAL
# ============================================================
class Settings:
    """
    Configuración leída del entorno.
    Los valores pasados como argumentos tienen prioridad (útil en tests).
    """

    def __init__(self, **overrides):
        def env(key, default=None):
            return overrides.get(key, os.getenv(key, default))

        self.ENV: str = env("ENV", ENV)
        self.PROJECT_NAME: str = env("PROJECT_NAME", "TaskManager")
        self.VERSION: str = env("VERSION", "1.0")

        # 🔹 Mongo
        self.MONGO_URI: Optional[str] = env("MONGO_URI")
        self.MONGO_DB: str = env("MONGO_DB", "taskmanager")

        # 🔹 Sesión (JWT en cookie)
        self.JWT_SECRET: Optional[str] = env("JWT_SECRET")
        self.JWT_ALGORITHM: str = "HS256"
        self.SESSION_TTL_DAYS: int = int(env("SESSION_TTL_DAYS", 7))
        self.COOKIE_NAME: str = env("COOKIE_NAME", "token")
        self.COOKIE_SECURE: bool = _as_bool(env("COOKIE_SECURE"), self.ENV != "development")

        # 🔹 Otros
        origins = env("ALLOWED_ORIGINS", "*")
        self.ALLOWED_ORIGINS: list = origins if isinstance(origins, list) else origins.split(",")
        self.LOG_LEVEL: str = env("LOG_LEVEL", "INFO").upper()
        self.DEBUG: bool = self.ENV == "development"

    @property
    def session_ttl_seconds(self) -> int:
        return self.SESSION_TTL_DAYS * 24 * 3600

    def validate(self) -> "Settings":
        missing = [key for key in REQUIRED_VARS if not getattr(self, key)]
        if missing:
            raise RuntimeError(f"Variables de entorno requeridas no definidas: {', '.join(missing)}")
        return self
