"""Response envelope shared by every API call."""

from dataclasses import dataclass
from typing import Any, Generic, Mapping, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class ApiResponse(Generic[T]):
    """
    API response wrapper.

    Attributes:
        success: Whether the API reports the operation as successful
        message: Human-readable message from the API
        data: Operation payload (plain JSON structures)

    Example:
        >>> resp = ApiResponse.from_dict({"success": True, "message": "ok", "data": {"id": "o_1"}})
        >>> resp.data["id"]
        'o_1'
    """

    success: bool
    message: str
    data: T

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "ApiResponse[Any]":
        return cls(
            success=bool(payload.get("success", False)),
            message=str(payload.get("message") or ""),
            data=payload.get("data"),
        )

    def to_dict(self) -> dict:
        return {"success": self.success, "message": self.message, "data": self.data}
