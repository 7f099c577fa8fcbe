# backend/dependencies.py
import logging
from typing import Optional
from fastapi import Depends, Request
from pymongo.database import Database
from config import Settings
from database.connection import get_db
from repositories.task_repository import TaskRepository
from repositories.user_repository import UserRepository
from auth.utils import decode_access_token
from errors import AuthenticationError

logger = logging.getLogger("dependencies")

# =====================================================
# 🔹 Configuración y repositorios (inyectados por request)
# =====================================================
def get_settings(request: Request) -> Settings:
    return request.app.state.settings

def get_user_repository(db: Database = Depends(get_db)) -> UserRepository:
    return UserRepository(db)

def get_task_repository(db: Database = Depends(get_db)) -> TaskRepository:
    return TaskRepository(db)

# =====================================================
# 🔹 Usuario autenticado
# =====================================================
def extract_token(request: Request, settings: Settings) -> Optional[str]:
    """Token de la cookie de sesión; si no hay, del header Authorization: Bearer."""
    token = request.cookies.get(settings.COOKIE_NAME)
    if token:
        return token
    scheme, _, credentials = request.headers.get("Authorization", "").partition(" ")
    if scheme.lower() == "bearer" and credentials.strip():
        return credentials.strip()
    return None

def get_current_user(
    request: Request,
    settings: Settings = Depends(get_settings),
    users: UserRepository = Depends(get_user_repository),
) -> dict:
    claims = decode_access_token(extract_token(request, settings), settings.JWT_SECRET)
    user = users.get_by_id(claims.get("sub"))
    if not user:
        logger.warning(f"⚠️ Token válido para usuario inexistente: {claims.get('sub')}")
        raise AuthenticationError("No autenticado")
    return user
