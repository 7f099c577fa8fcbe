# backend/routes/task_routes.py
from fastapi import APIRouter, Depends, Query
from typing import Optional
from models.task import TaskCreate, TaskUpdate
from repositories.task_filters import build_task_filter
from repositories.task_repository import TaskRepository
from dependencies import get_current_user, get_task_repository
from errors import ValidationError
import logging

router = APIRouter()
LOG = logging.getLogger("routes.tasks")

# ------------------------------------------------------------
# 🔹 Listar / buscar tareas del usuario
# ------------------------------------------------------------
@router.get("", summary="Listar tareas del usuario")
def list_tasks(
    search: Optional[str] = Query(None, description="Texto a buscar en título o descripción"),
    category: Optional[str] = Query(None, description="Categoría o 'all'"),
    status: Optional[str] = Query(None, description="pending / completed"),
    priority: Optional[str] = Query(None, description="low / medium / high"),
    user: dict = Depends(get_current_user),
    tasks: TaskRepository = Depends(get_task_repository),
):
    predicate = build_task_filter(user["id"], search=search, category=category, status=status, priority=priority)
    found = tasks.find(user["id"], predicate)
    LOG.info(f"🔎 {len(found)} tareas para usuario {user['id']}")
    return {"data": {"tasks": found, "count": len(found)}}

# ------------------------------------------------------------
# 🔹 Crear tarea
# ------------------------------------------------------------
@router.post("", status_code=201, summary="Crear tarea")
def create_task(
    task: TaskCreate,
    user: dict = Depends(get_current_user),
    tasks: TaskRepository = Depends(get_task_repository),
):
    created = tasks.create(user["id"], task.to_document())
    return {"message": "Tarea creada correctamente", "data": created}

# ------------------------------------------------------------
# 🔹 Obtener tarea por ID
# ------------------------------------------------------------
@router.get("/{task_id}", summary="Obtener tarea por ID")
def get_task(
    task_id: str,
    user: dict = Depends(get_current_user),
    tasks: TaskRepository = Depends(get_task_repository),
):
    return {"data": tasks.get(task_id, user["id"])}

# ------------------------------------------------------------
# 🔹 Actualizar tarea
# ------------------------------------------------------------
@router.put("/{task_id}", summary="Actualizar tarea")
def edit_task(
    task_id: str,
    task: TaskUpdate,
    user: dict = Depends(get_current_user),
    tasks: TaskRepository = Depends(get_task_repository),
):
    patch = task.to_patch()
    if not patch:
        raise ValidationError("No hay campos para actualizar")
    updated = tasks.update(task_id, user["id"], patch)
    return {"message": "Tarea actualizada correctamente", "data": updated}

# ------------------------------------------------------------
# 🔹 Eliminar tarea
# ------------------------------------------------------------
@router.delete("/{task_id}", summary="Eliminar tarea")
def remove_task(
    task_id: str,
    user: dict = Depends(get_current_user),
    tasks: TaskRepository = Depends(get_task_repository),
):
    tasks.delete(task_id, user["id"])
    return {"message": "Tarea eliminada correctamente"}
