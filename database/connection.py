# backend/database/connection.py
import logging
from fastapi import Request
from pymongo import MongoClient, ASCENDING, DESCENDING
from pymongo.database import Database
from config import Settings

logger = logging.getLogger("database.connection")

USERS = "users"
TASKS = "tasks"

# ============================================================
# 🔧 CLIENTE MONGO (pool compartido por el proceso)
# ============================================================
def build_client(settings: Settings) -> MongoClient:
    """Crea el cliente; pymongo mantiene su propio pool y conecta de forma diferida."""
    try:
        client = MongoClient(settings.MONGO_URI)
        logger.info(f"✅ Cliente MongoDB creado para la base: {settings.MONGO_DB}")
        return client
    except Exception as e:
        logger.error(f"❌ Error creando cliente MongoDB: {e}")
        raise e


def get_database(client: MongoClient, settings: Settings) -> Database:
    return client[settings.MONGO_DB]

# ============================================================
# 🗂️ ÍNDICES
# ============================================================
def ensure_indexes(db: Database) -> None:
    db[USERS].create_index("email", unique=True)
    db[TASKS].create_index([("user_id", ASCENDING), ("created_at", DESCENDING)])
    logger.info("🗂️ Índices de users/tasks verificados.")

# ============================================================
# 🔌 DEPENDENCIA FASTAPI
# ============================================================
def get_db(request: Request) -> Database:
    return request.app.state.db
