# ABOUTME: Main configuration composition for the library.
# ABOUTME: Assembles all configuration classes into a single, accessible object.

from functools import lru_cache

from ._base import BaseCoreSettings


class CoreSettings(BaseCoreSettings):
    """Represents the complete, composed configuration for the library.

    This class is the aggregator for all configuration settings. It inherits
    from `BaseCoreSettings` and is meant to be extended through inheritance
    when an embedding application needs additional settings:

        class AppSettings(CoreSettings):
            FEATURE_FLAGS_URL: str = "http://localhost:8080"

    The `get_settings` function provides a singleton instance of this class.
    """

    pass


@lru_cache
def get_settings() -> CoreSettings:
    """Provides a singleton instance of the library settings.

    This function uses a cache (`lru_cache`) so that environment variables and
    the ``.env`` file are read once. Call ``get_settings.cache_clear()`` after
    changing the environment to pick up new values.

    Returns:
        A single, cached instance of the CoreSettings class.
    """
    return CoreSettings()
