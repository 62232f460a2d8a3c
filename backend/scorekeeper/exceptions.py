from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from .scoring.common import ScoreFailure


class ProblemDetail(BaseModel):
    """RFC 7807 compliant error response."""

    type: str = "about:blank"
    title: str
    detail: Optional[str] = None
    status: int
    instance: Optional[str] = None
    code: str
    set_index: Optional[int] = Field(default=None, alias="setIndex")

    model_config = ConfigDict(populate_by_name=True)


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
        set_index: int | None = None,
    ) -> None:
        self.status_code = status_code
        self.title = title
        self.detail = detail
        self.type = type_
        self.code = code
        self.set_index = set_index


class ScoreRejected(DomainException):
    def __init__(
        self,
        failure: ScoreFailure,
        detail: str | None = None,
        *,
        set_index: int | None = None,
    ) -> None:
        super().__init__(
            status_code=422,
            title="Score rejected",
            detail=detail or failure.value.replace("_", " "),
            code=failure.value,
            set_index=set_index,
        )
        self.failure = failure


class UnsupportedSport(DomainException):
    def __init__(self, sport_id: str) -> None:
        super().__init__(
            status_code=400,
            title="Unsupported sport",
            detail=f"sport '{sport_id}' is not supported",
            code="unsupported_sport",
        )


class InvalidRules(DomainException):
    def __init__(self, detail: str) -> None:
        super().__init__(
            status_code=400,
            title="Invalid rules",
            detail=detail,
            code="invalid_rules",
        )

