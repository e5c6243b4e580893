"""
Result model for the fetch boundary.

FetchResult is the text-rendered outcome of one fetch: either the complete
content or a single descriptive error, never both and never neither.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from ..exceptions import ErrorKind, FetchError
from .resource import RouteKind


class FetchResult(BaseModel):
    """Outcome of fetching a single resource identifier."""

    identifier: str = Field(description="Resource identifier as supplied")
    route: Optional[RouteKind] = Field(
        default=None, description="Fetcher the identifier was dispatched to"
    )
    content: Optional[bytes] = Field(default=None, description="Full resource content")
    error: Optional[str] = Field(default=None, description="Error message if failed")
    error_kind: Optional[ErrorKind] = Field(
        default=None, description="Failure kind if failed"
    )
    elapsed: float = Field(default=0.0, ge=0, description="Fetch duration in seconds")
    timestamp: datetime = Field(default_factory=datetime.now)

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def check_exactly_one_outcome(self) -> "FetchResult":
        """Exactly one of content and error must be present."""
        if (self.content is None) == (self.error is None):
            raise ValueError("FetchResult requires exactly one of content or error")
        if self.error is None and self.error_kind is not None:
            raise ValueError("error_kind is only valid on failed results")
        return self

    @property
    def is_success(self) -> bool:
        """Check if the fetch produced content."""
        return self.content is not None

    @property
    def size(self) -> int:
        """Number of bytes fetched (0 on failure)."""
        return len(self.content) if self.content is not None else 0

    @classmethod
    def success(
        cls,
        identifier: str,
        content: bytes,
        route: Optional[RouteKind] = None,
        elapsed: float = 0.0,
    ) -> "FetchResult":
        return cls(identifier=identifier, route=route, content=content, elapsed=elapsed)

    @classmethod
    def failure(
        cls,
        identifier: str,
        error: FetchError,
        route: Optional[RouteKind] = None,
        elapsed: float = 0.0,
    ) -> "FetchResult":
        return cls(
            identifier=identifier,
            route=route,
            error=error.message,
            error_kind=error.kind,
            elapsed=elapsed,
        )
