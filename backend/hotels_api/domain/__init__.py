from hotels_api.domain.errors import (
    DomainError,
    ErrorCode,
    InvalidData,
    NotFound,
    Unauthorized,
)

__all__ = ["DomainError", "ErrorCode", "InvalidData", "NotFound", "Unauthorized"]
