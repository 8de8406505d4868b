from pydantic import BaseModel, Field


class RateLimitResponse(BaseModel):
    message: str = 'You are being rate limited.'
    retry_after: float
    global_rate_limit: bool = Field(False, alias='global')
    code: int | None = None
