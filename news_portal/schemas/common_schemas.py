"""
Common API schemas used across the service.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ErrorEnvelope(BaseModel):
    """Uniform error response body."""

    success: bool = Field(False, description="Always false for errors")
    error: str = Field(..., description="Human readable error message")


class PopulateOption(BaseModel):
    """Reference path to resolve against another collection."""

    path: str = Field(..., description="Dotted path holding the referenced id")
    collection: str = Field(..., description="Collection the reference points at")
    select: Optional[str] = Field(
        None, description="Space separated fields to keep on the referenced docs"
    )


class PaginateOptions(BaseModel):
    """Pagination parameters for a collection query."""

    page: int = Field(1, ge=1, description="Page number, 1-based")
    limit: int = Field(10, ge=1, description="Items per page")
    sort: Optional[str] = Field(
        "-createdAt", description="Space separated sort fields, '-' for descending"
    )
    populate: List[PopulateOption] = Field(default_factory=list)
    select: Optional[str] = Field(
        None, description="Space separated fields, '-' prefix excludes"
    )


class PaginationMeta(BaseModel):
    """Page bookkeeping derived from page, limit and total."""

    model_config = ConfigDict(populate_by_name=True)

    total_docs: int = Field(..., alias="totalDocs")
    limit: int
    page: int
    total_pages: int = Field(..., alias="totalPages")
    has_next_page: bool = Field(..., alias="hasNextPage")
    has_prev_page: bool = Field(..., alias="hasPrevPage")
    next_page: Optional[int] = Field(None, alias="nextPage")
    prev_page: Optional[int] = Field(None, alias="prevPage")
    paging_counter: int = Field(..., alias="pagingCounter")


class PaginationResult(PaginationMeta):
    """One page of documents with its bookkeeping."""

    docs: List[Dict[str, Any]] = Field(default_factory=list)

    def to_response(self) -> Dict[str, Any]:
        """Serialize with the camelCase keys clients expect"""
        return self.model_dump(by_alias=True)
