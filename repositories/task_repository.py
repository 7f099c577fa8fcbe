# backend/repositories/task_repository.py
from bson import ObjectId
from bson.errors import InvalidId
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional
from pymongo import DESCENDING
from pymongo.database import Database
from database.connection import TASKS
from errors import NotFoundError
import logging

logger = logging.getLogger("repositories.tasks")

TASK_NOT_FOUND = "Tarea no encontrada"

# ============================================================
# 🔹 Serializador de tarea
# ============================================================
def serialize_task(doc: dict) -> Optional[Dict]:
    """Convierte un documento Mongo en un dict JSON serializable."""
    if not doc:
        return None
    task = dict(doc)
    task["id"] = str(task.get("_id"))
    task.pop("_id", None)
    return task


def _to_object_id(task_id: str) -> Optional[ObjectId]:
    try:
        return ObjectId(task_id)
    except (InvalidId, TypeError):
        logger.warning(f"⚠️ ID de tarea inválido: {task_id}")
        return None


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


class TaskRepository:
    """
    Acceso a la colección de tareas.
    Toda lectura y escritura por ID va acotada al dueño (user_id), así una tarea
    ajena se comporta exactamente igual que una inexistente.
    """

    def __init__(self, db: Database):
        self.collection = db[TASKS]

    # ============================================================
    # 🔹 Crear tarea
    # ============================================================
    def create(self, owner_id: str, data: Dict[str, Any]) -> Dict:
        now = _now()
        task_doc = dict(data)
        task_doc.update({"user_id": owner_id, "created_at": now, "updated_at": now})
        result = self.collection.insert_one(task_doc)
        task_doc["_id"] = result.inserted_id
        logger.info(f"✅ Tarea creada: {result.inserted_id} (usuario {owner_id})")
        return serialize_task(task_doc)

    # ============================================================
    # 🔹 Buscar tareas por filtro
    # ============================================================
    def find(self, owner_id: str, predicate: Optional[Dict[str, Any]] = None) -> List[Dict]:
        """Devuelve las tareas del dueño que cumplen el filtro, más recientes primero."""
        query = dict(predicate or {})
        query["user_id"] = owner_id
        cursor = self.collection.find(query).sort([("created_at", DESCENDING), ("_id", DESCENDING)])
        return [serialize_task(doc) for doc in cursor]

    # ============================================================
    # 🔹 Obtener tarea por ID
    # ============================================================
    def get(self, task_id: str, owner_id: str) -> Dict:
        obj_id = _to_object_id(task_id)
        doc = self.collection.find_one({"_id": obj_id, "user_id": owner_id}) if obj_id is not None else None
        if not doc:
            raise NotFoundError(TASK_NOT_FOUND)
        return serialize_task(doc)

    # ============================================================
    # 🔹 Actualizar tarea
    # ============================================================
    def update(self, task_id: str, owner_id: str, patch: Dict[str, Any]) -> Dict:
        obj_id = _to_object_id(task_id)
        if obj_id is None:
            raise NotFoundError(TASK_NOT_FOUND)

        changes = dict(patch)
        # campos controlados por el servidor
        for key in ("_id", "id", "user_id", "created_at"):
            changes.pop(key, None)
        changes["updated_at"] = _now()

        result = self.collection.update_one({"_id": obj_id, "user_id": owner_id}, {"$set": changes})
        if result.matched_count == 0:
            logger.warning(f"⚠️ Tarea no encontrada para actualizar: {task_id} (usuario {owner_id})")
            raise NotFoundError(TASK_NOT_FOUND)

        logger.info(f"📝 Tarea actualizada: {task_id}")
        return self.get(task_id, owner_id)

    # ============================================================
    # 🔹 Eliminar tarea
    # ============================================================
    def delete(self, task_id: str, owner_id: str) -> None:
        obj_id = _to_object_id(task_id)
        if obj_id is None:
            raise NotFoundError(TASK_NOT_FOUND)

        result = self.collection.delete_one({"_id": obj_id, "user_id": owner_id})
        if result.deleted_count == 0:
            logger.warning(f"⚠️ No se encontró tarea para eliminar: {task_id} (usuario {owner_id})")
            raise NotFoundError(TASK_NOT_FOUND)
        logger.info(f"🗑️ Tarea eliminada: {task_id}")
