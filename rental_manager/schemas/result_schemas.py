from pydantic import BaseModel


class OperationResult(BaseModel):
    """Success flag plus a message the caller can render inline"""

    success: bool
    message: str

    @classmethod
    def ok(cls, message: str) -> "OperationResult":
        return cls(success=True, message=message)

    @classmethod
    def fail(cls, message: str) -> "OperationResult":
        return cls(success=False, message=message)
