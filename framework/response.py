from typing import Any, Optional
from pydantic import BaseModel

class ResponseModel(BaseModel):
    """Envelope for error responses that carry a body."""
    code: int
    message: str = "error"
    data: Optional[Any] = None

    @staticmethod
    def fail(code: int = 400, message: str = "error", data: Any = None):
        return ResponseModel(code=code, message=message, data=data).model_dump()
