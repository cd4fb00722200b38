from pydantic import BaseModel, Field


class FieldError(BaseModel):
    field: str = Field(examples=["name"])
    message: str = Field(examples=["The name cannot be blank."])


class ErrorResponse(BaseModel):
    """Standard API error payload (documentation model for OpenAPI)."""

    status: int = Field(examples=[400])
    error: str = Field(examples=["Bad Request"])
    code: str = Field(examples=["VALIDATION"])
    message: str = Field(examples=["The name cannot be blank."])
    path: str = Field(examples=["/frameworks"])
    timestamp: str
    request_id: str | None = None
    errors: list[FieldError] | None = None
