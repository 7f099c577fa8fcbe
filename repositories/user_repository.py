# backend/repositories/user_repository.py
from bson import ObjectId
from bson.errors import InvalidId
from datetime import datetime, timezone
from typing import Optional
from pymongo.database import Database
from pymongo.errors import DuplicateKeyError
from database.connection import USERS
from errors import ValidationError
import logging

logger = logging.getLogger("repositories.users")

# ------------------------------------------------------------
# 🔹 Serialización segura de usuario
# ------------------------------------------------------------
def serialize_user(user: dict) -> Optional[dict]:
    """Convierte ObjectId a str y limpia campos no serializables."""
    if not user:
        return None
    user_copy = dict(user)
    user_copy["id"] = str(user_copy["_id"])
    user_copy.pop("_id", None)
    user_copy.pop("password", None)  # nunca exponer password
    return user_copy


class UserRepository:
    def __init__(self, db: Database):
        self.collection = db[USERS]

    # ------------------------------------------------------------
    # 🔹 Crear usuario
    # ------------------------------------------------------------
    def create(self, name: str, email: str, password_hash: str) -> dict:
        email = email.lower()
        if self.collection.find_one({"email": email}):
            raise ValidationError("El email ya está registrado.")

        now = datetime.now(timezone.utc).isoformat()
        user_doc = {
            "name": name,
            "email": email,
            "password": password_hash,
            "created_at": now,
            "updated_at": now,
        }
        try:
            result = self.collection.insert_one(user_doc)
        except DuplicateKeyError:
            # carrera entre dos registros con el mismo email
            raise ValidationError("El email ya está registrado.")
        user_doc["_id"] = result.inserted_id
        logger.info(f"✅ Usuario creado con ID {result.inserted_id}")
        return serialize_user(user_doc)

    # ------------------------------------------------------------
    # 🔹 Obtener usuario por email (incluye hash, sólo para login)
    # ------------------------------------------------------------
    def get_by_email(self, email: str) -> Optional[dict]:
        return self.collection.find_one({"email": email.lower()})

    # ------------------------------------------------------------
    # 🔹 Obtener usuario por ID
    # ------------------------------------------------------------
    def get_by_id(self, user_id: str) -> Optional[dict]:
        try:
            obj_id = ObjectId(user_id)
        except (InvalidId, TypeError):
            logger.warning(f"⚠️ ID de usuario inválido: {user_id}")
            return None
        return serialize_user(self.collection.find_one({"_id": obj_id}))

    # ------------------------------------------------------------
    # 🔹 Editar perfil
    # ------------------------------------------------------------
    def update_profile(self, user_id: str, name: str) -> Optional[dict]:
        try:
            obj_id = ObjectId(user_id)
        except (InvalidId, TypeError):
            return None
        result = self.collection.update_one(
            {"_id": obj_id},
            {"$set": {"name": name, "updated_at": datetime.now(timezone.utc).isoformat()}},
        )
        if result.matched_count == 0:
            logger.warning(f"⚠️ Usuario no encontrado para actualizar: {user_id}")
            return None
        logger.info(f"📝 Perfil actualizado: {user_id}")
        return self.get_by_id(user_id)
