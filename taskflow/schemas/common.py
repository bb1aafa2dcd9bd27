"""Shared API schema pieces: id type and the response envelope."""

from typing import Annotated, Generic, TypeVar

from pydantic import BaseModel, StringConstraints

from taskflow.shared.utils.generators import ID_PATTERN

DataT = TypeVar("DataT")

# Id-shaped strings (task, user, status, label, comment ids).
IdStr = Annotated[str, StringConstraints(strip_whitespace=True, pattern=ID_PATTERN)]


class ApiResponse(BaseModel, Generic[DataT]):
    """Success envelope: {"success": true, "data": ...}."""

    success: bool = True
    data: DataT
