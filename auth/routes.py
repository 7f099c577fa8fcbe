# backend/auth/routes.py
from fastapi import APIRouter, Depends, Response
from config import Settings
from dependencies import get_current_user, get_settings, get_user_repository
from repositories.user_repository import UserRepository
from .models import UserRegister, UserLogin, UserProfileUpdate
from .controllers import register_user, login_with_password, logout_user, update_profile

router = APIRouter()

# ------------------------------------------------------------
# 🔹 Registro
# ------------------------------------------------------------
@router.post("/register", status_code=201, summary="Registrar usuario")
def register(
    data: UserRegister,
    response: Response,
    users: UserRepository = Depends(get_user_repository),
    settings: Settings = Depends(get_settings),
):
    return register_user(data, users, response, settings)

# ------------------------------------------------------------
# 🔹 Login
# ------------------------------------------------------------
@router.post("/login", summary="Iniciar sesión")
def login(
    data: UserLogin,
    response: Response,
    users: UserRepository = Depends(get_user_repository),
    settings: Settings = Depends(get_settings),
):
    return login_with_password(data, users, response, settings)

# ------------------------------------------------------------
# 🔹 Logout
# ------------------------------------------------------------
@router.post("/logout", summary="Cerrar sesión")
def logout(response: Response, settings: Settings = Depends(get_settings)):
    return logout_user(response, settings)

# ------------------------------------------------------------
# 🔹 Usuario actual
# ------------------------------------------------------------
@router.get("/me", summary="Usuario autenticado")
def me(user: dict = Depends(get_current_user)):
    return {"data": user}

@router.put("/me", summary="Editar perfil")
def edit_me(
    data: UserProfileUpdate,
    user: dict = Depends(get_current_user),
    users: UserRepository = Depends(get_user_repository),
):
    return update_profile(user, data, users)
