"""FastAPI router for the emoji lookup database.

Usage:
    from fastapi import FastAPI
    from emojipick.api import create_router
    from emojipick import EmojiPicker

    app = FastAPI()
    picker = EmojiPicker()

    # Mount with default prefix /emoji
    app.include_router(create_router(picker))
"""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel

from emojipick.models.annotation import EmojiRecord
from emojipick.picker import EmojiPicker
from emojipick.search.category import classify


# Response models
class EmojiResponse(BaseModel):
    glyph: str
    name: str
    category: str
    codepoints: str
    image_filename: str
    keywords: list[str]

    @classmethod
    def from_record(cls, record: EmojiRecord) -> "EmojiResponse":
        return cls(
            glyph=record.glyph,
            name=record.name,
            category=classify(record.glyph).value,
            codepoints=record.codepoints,
            image_filename=record.image_filename,
            keywords=list(record.keywords),
        )


class EmojiListResponse(BaseModel):
    emojis: list[EmojiResponse]
    total: int


class StatsResponse(BaseModel):
    categories: dict[str, int]
    locales: list[str]
    total: int


def create_router(
    picker: EmojiPicker,
    *,
    prefix: str = "/emoji",
    tags: list[str] | None = None,
) -> APIRouter:
    """Create a FastAPI router exposing list and search over the database.

    Args:
        picker: EmojiPicker whose database is served
        prefix: URL prefix for all routes (default: /emoji)
        tags: OpenAPI tags for the router
    """
    if tags is None:
        tags = ["emojipick"]

    router = APIRouter(prefix=prefix, tags=tags)

    def get_picker() -> EmojiPicker:
        return picker

    def _listing(records: list[EmojiRecord]) -> EmojiListResponse:
        emojis = [EmojiResponse.from_record(r) for r in records]
        return EmojiListResponse(emojis=emojis, total=len(emojis))

    @router.get("/all", response_model=EmojiListResponse)
    async def get_all(
        picker: Annotated[EmojiPicker, Depends(get_picker)],
        limit: int | None = Query(default=None, ge=1),
    ) -> EmojiListResponse:
        """All emoji in presentation order."""
        records = picker.get_all()
        if limit is not None:
            records = records[:limit]
        return _listing(records)

    @router.get("/search", response_model=EmojiListResponse)
    async def search(
        picker: Annotated[EmojiPicker, Depends(get_picker)],
        q: str = Query(default="", description="Substring to match against keywords"),
        limit: int = Query(default=50, ge=1, le=500),
    ) -> EmojiListResponse:
        """Search emoji by keyword substring in any loaded language."""
        return _listing(picker.search(q, limit))

    @router.get("/stats", response_model=StatsResponse)
    async def stats(picker: Annotated[EmojiPicker, Depends(get_picker)]) -> StatsResponse:
        counts = picker.database.stats()
        total = counts.pop("total")
        return StatsResponse(
            categories=counts,
            locales=list(picker.database.locales),
            total=total,
        )

    @router.get("/glyph/{glyph}", response_model=EmojiResponse)
    async def get_emoji(
        glyph: str,
        picker: Annotated[EmojiPicker, Depends(get_picker)],
    ) -> EmojiResponse:
        record = picker.get(glyph)
        if record is None:
            raise HTTPException(status_code=404, detail=f"Emoji not found: {glyph}")
        return EmojiResponse.from_record(record)

    return router
