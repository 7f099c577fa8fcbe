# backend/auth/controllers.py
import logging
from datetime import timedelta
from fastapi import Response
from config import Settings
from errors import AuthenticationError, NotFoundError
from repositories.user_repository import UserRepository, serialize_user
from .models import UserRegister, UserLogin, UserProfileUpdate
from .utils import hash_password, verify_password, create_access_token

logger = logging.getLogger("auth.controllers")

INVALID_CREDENTIALS = "Credenciales inválidas."

# =====================================================
# 🔹 Cookie de sesión
# =====================================================
def issue_session(response: Response, user: dict, settings: Settings) -> None:
    token = create_access_token(
        {"sub": user["id"], "email": user["email"]},
        settings.JWT_SECRET,
        timedelta(days=settings.SESSION_TTL_DAYS),
    )
    response.set_cookie(
        key=settings.COOKIE_NAME,
        value=token,
        max_age=settings.session_ttl_seconds,
        httponly=True,
        secure=settings.COOKIE_SECURE,
        samesite="strict",
        path="/",
    )

def clear_session(response: Response, settings: Settings) -> None:
    response.delete_cookie(
        key=settings.COOKIE_NAME,
        httponly=True,
        secure=settings.COOKIE_SECURE,
        samesite="strict",
        path="/",
    )

# =====================================================
# 🔹 Registrar usuario
# =====================================================
def register_user(data: UserRegister, users: UserRepository, response: Response, settings: Settings) -> dict:
    user = users.create(data.name, data.email, hash_password(data.password))
    issue_session(response, user, settings)
    logger.info(f"🧩 Usuario registrado: {user['email']}")
    return {"message": "Usuario registrado con éxito.", "data": user}

# =====================================================
# 🔹 Login con password
# =====================================================
def login_with_password(data: UserLogin, users: UserRepository, response: Response, settings: Settings) -> dict:
    user_doc = users.get_by_email(data.email)
    if not user_doc or not verify_password(data.password, user_doc["password"]):
        logger.warning(f"⚠️ Login fallido para {data.email}")
        raise AuthenticationError(INVALID_CREDENTIALS)

    user = serialize_user(user_doc)
    issue_session(response, user, settings)
    logger.info(f"🔐 Login exitoso -> {user['email']}")
    return {"message": "Sesión iniciada.", "data": user}

# =====================================================
# 🔹 Logout
# =====================================================
def logout_user(response: Response, settings: Settings) -> dict:
    clear_session(response, settings)
    return {"message": "Sesión cerrada."}

# =====================================================
# 🔹 Perfil
# =====================================================
def update_profile(user: dict, data: UserProfileUpdate, users: UserRepository) -> dict:
    updated = users.update_profile(user["id"], data.name)
    if not updated:
        raise NotFoundError("Usuario no encontrado.")
    return {"message": "Perfil actualizado.", "data": updated}
