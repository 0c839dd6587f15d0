"""Translation service adapters."""

from news_digest.adapters.translation.mymemory_client import MyMemoryTranslator

__all__ = ["MyMemoryTranslator"]
