from fastapi import HTTPException
from pydantic import BaseModel
from typing import Optional


class ProblemDetail(BaseModel):
    """RFC 7807 compliant error response."""

    type: str = "about:blank"
    title: str
    detail: Optional[str] = None
    status: int
    instance: Optional[str] = None
    code: str


class DomainException(Exception):
    """Base class for domain-specific exceptions."""

    def __init__(
        self,
        status_code: int,
        title: str,
        *,
        code: str,
        detail: str | None = None,
        type_: str = "about:blank",
    ) -> None:
        super().__init__(detail or title)
        self.status_code = status_code
        self.title = title
        self.detail = detail
        self.type = type_
        self.code = code


class BowlingError(DomainException):
    """A roll or declaration that breaks the rules of the current frame."""

    def __init__(self, title: str, *, code: str, detail: str) -> None:
        super().__init__(status_code=409, title=title, code=code, detail=detail)


class InvalidPinCount(BowlingError):
    def __init__(self, pins: object) -> None:
        super().__init__(
            "Invalid pin count",
            code="invalid_pin_count",
            detail=f"pin count must be an integer between 0 and 10, got {pins!r}",
        )
        self.pins = pins


class PinCountExceeded(BowlingError):
    def __init__(self, first: int, second: int) -> None:
        super().__init__(
            "Pin count exceeded",
            code="pin_count_exceeded",
            detail=(
                f"only 10 pins can be knocked down in a single frame "
                f"({first} + {second} > 10)"
            ),
        )
        self.first = first
        self.second = second


class FrameAlreadyComplete(BowlingError):
    def __init__(self, final: bool = False) -> None:
        detail = (
            "a completed final frame cannot have additional rolls"
            if final
            else "frame is already complete"
        )
        super().__init__(
            "Frame already complete", code="frame_already_complete", detail=detail
        )
        self.final = final


class InvalidSpareState(BowlingError):
    def __init__(self, rolls: int) -> None:
        super().__init__(
            "Invalid spare",
            code="invalid_spare",
            detail=f"a spare needs exactly one prior roll in the rack, found {rolls}",
        )


class InvalidStrikeState(BowlingError):
    def __init__(self, rolls: int) -> None:
        super().__init__(
            "Invalid strike",
            code="invalid_strike",
            detail=f"a strike needs a full rack of pins, found {rolls} prior roll(s)",
        )


class InvalidNotation(DomainException):
    def __init__(self, symbol: str, position: int) -> None:
        super().__init__(
            status_code=422,
            title="Invalid roll notation",
            code="invalid_notation",
            detail=f"unexpected symbol {symbol!r} at position {position}",
        )
        self.symbol = symbol
        self.position = position


def http_problem(
    status_code: int,
    detail: str,
    code: str,
    *,
    headers: Optional[dict[str, str]] = None,
) -> HTTPException:
    """Create an HTTPException with an attached problem code."""

    exc = HTTPException(status_code=status_code, detail=detail, headers=headers)
    setattr(exc, "code", code)
    return exc
