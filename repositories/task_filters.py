# backend/repositories/task_filters.py
import re
from typing import Any, Dict, Optional

# Valor que usa el frontend para "sin filtro"
ALL = "all"


def _present(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    if not value or value.lower() == ALL:
        return None
    return value


def build_task_filter(
    owner_id: str,
    search: Optional[str] = None,
    category: Optional[str] = None,
    status: Optional[str] = None,
    priority: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Construye el filtro Mongo para listar tareas de un usuario.

    - siempre restringe por dueño (user_id)
    - search: coincidencia parcial, sin distinguir mayúsculas, en título o descripción
    - category / status / priority: igualdad exacta; ausentes o "all" se omiten

    Nunca falla: parámetros vacíos simplemente no se agregan.
    """
    query: Dict[str, Any] = {"user_id": owner_id}

    text = (search or "").strip()
    if text:
        pattern = {"$regex": re.escape(text), "$options": "i"}
        query["$or"] = [{"title": pattern}, {"description": pattern}]

    for field, value in (("category", category), ("status", status), ("priority", priority)):
        value = _present(value)
        if value is not None:
            query[field] = value

    return query
