# backend/models/task.py
from pydantic import BaseModel, Field, field_validator, model_validator
from typing import Literal, Optional
from datetime import date

Category = Literal["work", "personal", "shopping", "health", "other"]
Priority = Literal["low", "medium", "high"]
Status = Literal["pending", "completed"]


def _clean_title(value: str) -> str:
    value = value.strip()
    if not value:
        raise ValueError("el título es obligatorio")
    return value


class TaskCreate(BaseModel):
    title: str = Field(..., max_length=200)
    description: Optional[str] = Field("", max_length=2000)
    category: Category = "other"
    priority: Priority = "medium"
    status: Status = "pending"
    due_date: Optional[date] = None

    @field_validator("title")
    @classmethod
    def check_title(cls, value: str) -> str:
        return _clean_title(value)

    @field_validator("description")
    @classmethod
    def strip_description(cls, value: Optional[str]) -> str:
        return (value or "").strip()

    def to_document(self) -> dict:
        """Campos listos para Mongo (fechas como string ISO)."""
        return self.model_dump(mode="json")


class TaskUpdate(BaseModel):
    """Actualización parcial: sólo se aplican los campos enviados."""

    title: Optional[str] = Field(None, max_length=200)
    description: Optional[str] = Field(None, max_length=2000)
    category: Optional[Category] = None
    priority: Optional[Priority] = None
    status: Optional[Status] = None
    due_date: Optional[date] = None

    @field_validator("title")
    @classmethod
    def check_title(cls, value: Optional[str]) -> Optional[str]:
        return None if value is None else _clean_title(value)

    @model_validator(mode="after")
    def reject_nulls(self):
        # due_date y description son los únicos campos que se pueden vaciar
        for name in ("title", "category", "priority", "status"):
            if name in self.model_fields_set and getattr(self, name) is None:
                raise ValueError(f"{name} no puede ser null")
        return self

    def to_patch(self) -> dict:
        patch = self.model_dump(mode="json", exclude_unset=True)
        if "description" in patch:
            patch["description"] = (patch["description"] or "").strip()
        return patch
