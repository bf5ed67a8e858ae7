"""Uniform response envelope: ``{success, message, data?, error?}``."""

from typing import Any

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from pydantic import BaseModel


class ApiResponse(BaseModel):
    success: bool
    message: str
    data: Any | None = None
    error: Any | None = None

    def to_response(self, status_code: int = 200) -> JSONResponse:
        content: dict[str, Any] = {"success": self.success, "message": self.message}
        if self.data is not None:
            content["data"] = jsonable_encoder(self.data)
        if self.error is not None:
            content["error"] = jsonable_encoder(self.error)
        return JSONResponse(status_code=status_code, content=content)


def success(message: str, data: Any = None, status_code: int = 200) -> JSONResponse:
    return ApiResponse(success=True, message=message, data=data).to_response(status_code)


def error(message: str, status_code: int = 500, detail: Any = None) -> JSONResponse:
    return ApiResponse(success=False, message=message, error=detail).to_response(status_code)
