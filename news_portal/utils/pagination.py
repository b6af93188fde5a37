# utils/pagination.py

"""
Pagination over MongoDB collection queries.

paginate() runs a count and a skip/limit find against a Motor collection and
returns the page together with its bookkeeping (totalDocs, totalPages,
hasNextPage, ... pagingCounter). The arithmetic lives in
build_pagination_meta() so it can be reused for data that is not in MongoDB.
"""

import math
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Tuple, Union

from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo import ASCENDING, DESCENDING

from common.logger import LoggerFactory, LoggerType, LogLevel

from ..schemas.common_schemas import (
    PaginateOptions,
    PaginationMeta,
    PaginationResult,
    PopulateOption,
)

logger = LoggerFactory.get_logger(
    name="pagination",
    logger_type=LoggerType.STANDARD,
    level=LogLevel.INFO,
)


@dataclass
class MongoQuery:
    """Collection plus filter conditions, the handle paginate() works on"""

    collection: AsyncIOMotorCollection
    conditions: Dict[str, Any] = field(default_factory=dict)


def build_pagination_meta(page: int, limit: int, total: int) -> PaginationMeta:
    """
    Compute page bookkeeping.

    Args:
        page: 1-based page number
        limit: page size, must be positive
        total: number of matching documents

    Returns:
        PaginationMeta: totals, navigation flags and the paging counter
    """
    if page < 1:
        raise ValueError("page must be >= 1")
    if limit < 1:
        raise ValueError("limit must be >= 1")
    if total < 0:
        raise ValueError("total must be >= 0")

    skip = (page - 1) * limit
    total_pages = math.ceil(total / limit)
    has_next_page = page < total_pages
    has_prev_page = page > 1

    return PaginationMeta(
        total_docs=total,
        limit=limit,
        page=page,
        total_pages=total_pages,
        has_next_page=has_next_page,
        has_prev_page=has_prev_page,
        next_page=page + 1 if has_next_page else None,
        prev_page=page - 1 if has_prev_page else None,
        paging_counter=skip + 1,
    )


def parse_sort(sort: Optional[Union[str, Dict[str, int]]]) -> List[Tuple[str, int]]:
    """Turn "-publishedAt title" into [("publishedAt", -1), ("title", 1)]"""
    if not sort:
        return []
    if isinstance(sort, dict):
        return [(k, DESCENDING if v < 0 else ASCENDING) for k, v in sort.items()]

    spec = []
    for token in sort.split():
        if token.startswith("-"):
            spec.append((token[1:], DESCENDING))
        else:
            spec.append((token.lstrip("+"), ASCENDING))
    return spec


def parse_select(select: Optional[str]) -> Optional[Dict[str, int]]:
    """Turn "title slug -_id" into a MongoDB projection"""
    if not select:
        return None

    projection: Dict[str, int] = {}
    for token in select.split():
        if token.startswith("-"):
            projection[token[1:]] = 0
        else:
            projection[token.lstrip("+")] = 1

    modes = {v for k, v in projection.items() if k != "_id"}
    if len(modes) > 1:
        raise ValueError(
            "select cannot mix inclusion and exclusion (except for _id)"
        )
    return projection


def _get_path(doc: Dict[str, Any], path: str) -> Any:
    current: Any = doc
    for part in path.split("."):
        if not isinstance(current, dict):
            return None
        current = current.get(part)
    return current


def _set_path(doc: Dict[str, Any], path: str, value: Any) -> None:
    parts = path.split(".")
    current = doc
    for part in parts[:-1]:
        nxt = current.get(part)
        if not isinstance(nxt, dict):
            return
        current = nxt
    current[parts[-1]] = value


def _collect_ids(docs: Iterable[Dict[str, Any]], path: str) -> List[Any]:
    ids: List[Any] = []
    seen = set()
    for doc in docs:
        value = _get_path(doc, path)
        values = value if isinstance(value, list) else [value]
        for item in values:
            if item is None or isinstance(item, dict):
                continue
            if str(item) not in seen:
                seen.add(str(item))
                ids.append(item)
    return ids


async def _populate(
    collection: AsyncIOMotorCollection,
    docs: List[Dict[str, Any]],
    option: PopulateOption,
) -> None:
    ids = _collect_ids(docs, option.path)
    if not ids:
        return

    target = collection.database[option.collection]
    cursor = target.find({"_id": {"$in": ids}}, parse_select(option.select))
    referenced = await cursor.to_list(length=None)
    by_id = {str(ref["_id"]): ref for ref in referenced}

    for doc in docs:
        value = _get_path(doc, option.path)
        if isinstance(value, list):
            _set_path(
                doc,
                option.path,
                [by_id.get(str(v)) for v in value if str(v) in by_id],
            )
        elif value is not None and not isinstance(value, dict):
            _set_path(doc, option.path, by_id.get(str(value)))


async def paginate(
    query: MongoQuery, options: Optional[PaginateOptions] = None
) -> PaginationResult:
    """
    Fetch one page of documents for query.

    Args:
        query: collection and filter conditions
        options: page, limit, sort, populate and select

    Returns:
        PaginationResult: the page's docs plus pagination bookkeeping

    Raises:
        ValueError: invalid sort/select specification
        pymongo.errors.PyMongoError: propagated from the driver
    """
    options = options or PaginateOptions()
    page, limit = options.page, options.limit
    skip = (page - 1) * limit
    projection = parse_select(options.select)
    sort_spec = parse_sort(options.sort)

    total = await query.collection.count_documents(query.conditions)

    cursor = query.collection.find(query.conditions, projection)
    if sort_spec:
        cursor = cursor.sort(sort_spec)
    cursor = cursor.skip(skip).limit(limit)
    docs = await cursor.to_list(length=limit)

    for option in options.populate:
        await _populate(query.collection, docs, option)

    meta = build_pagination_meta(page, limit, total)
    logger.debug(
        f"Paginated {query.collection.name}: page {page}/{meta.total_pages}, "
        f"{len(docs)} docs of {total}"
    )
    return PaginationResult(docs=docs, **meta.model_dump())
