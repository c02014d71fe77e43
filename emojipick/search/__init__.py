"""Emoji lookup for emojipick."""

from emojipick.search.category import Category, classify
from emojipick.search.database import EmojiDatabase

__all__ = ["EmojiDatabase", "Category", "classify"]
