from anystore.functools import weakref_cache as cache

from webform.settings import Settings


@cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
