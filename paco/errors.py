from __future__ import annotations

from typing import Any, TYPE_CHECKING

if TYPE_CHECKING:
    from paco.discord.models import RateLimitResponse
    from paco.discord.validation import Violation


class BasePacoException(Exception):
    def __init__(self, *args, **kwargs) -> None:  # noqa: ANN002, ANN003
        super().__init__(*args, **kwargs)


class ConfigurationError(BasePacoException):
    def __init__(self, missing: list[str], detail: str | None = None) -> None:
        self.missing = missing
        super().__init__(
            detail or f'missing required configuration: {', '.join(missing)}'
        )


class CatalogValidationError(BasePacoException):
    def __init__(self, violations: list[Violation]) -> None:
        self.violations = violations
        super().__init__('\n'.join([
            f'{len(violations)} catalog violation(s):',
            *(str(violation) for violation in violations)
        ]))


class HTTPException(BasePacoException):
    status_code: int = 0

    def __init__(
        self,
        detail: Any | None = None,  # noqa: ANN401
        status_code: int | None = None
    ) -> None:
        self.detail = detail
        if status_code is not None:
            self.status_code = status_code
        super().__init__(detail)

    def __str__(self) -> str:
        return f'{self.status_code}: {self.detail}'


class BadRequest(HTTPException):
    status_code: int = 400


class Unauthorized(HTTPException):
    status_code: int = 401


class Forbidden(HTTPException):
    status_code: int = 403


class NotFound(HTTPException):
    status_code: int = 404


class ServerError(HTTPException):
    status_code: int = 500


class RateLimited(HTTPException):
    status_code: int = 429

    def __init__(self, response: RateLimitResponse) -> None:
        self.retry_after = response.retry_after
        self.is_global = response.global_rate_limit
        super().__init__(response.message)

    def __str__(self) -> str:
        return (
            f'{self.status_code}: {self.detail} '
            f'(retry after {self.retry_after}s'
            f'{', global' if self.is_global else ''})'
        )
