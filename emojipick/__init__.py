"""emojipick - Emoji picker with a multilingual CLDR annotation index."""

from emojipick.models.annotation import EmojiRecord
from emojipick.picker import EmojiPicker
from emojipick.search.database import EmojiDatabase

__version__ = "0.1.0"
__all__ = ["EmojiPicker", "EmojiDatabase", "EmojiRecord"]
