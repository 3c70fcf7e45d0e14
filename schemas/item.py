from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Schema for validation and not-found error bodies"""
    error: str


class ProblemDetails(BaseModel):
    """Schema for unexpected handler failures (RFC 9457 problem details)"""
    type: str = "https://tools.ietf.org/html/rfc9110#section-15.6.1"
    title: str = "An error occurred while processing your request."
    status: int = 500
    detail: str
