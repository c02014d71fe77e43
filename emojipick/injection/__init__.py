"""Text injection into the previously focused window."""

from emojipick.injection.injector import TextInjector

__all__ = ["TextInjector"]
