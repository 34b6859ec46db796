from pydantic_settings import BaseSettings, SettingsConfigDict

from actiontracker.models.weapon import DifficultyMode


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(env_file=".env", env_prefix="ACTIONTRACKER_")

    app_name: str = "ActionTracker"
    debug: bool = False

    # Difficulty used when a deck collection is created without one
    default_difficulty: DifficultyMode = DifficultyMode.MEDIUM

    log_level: str = "INFO"


settings = Settings()


# =============================================================================
# DECK ENGINE LIMITS
# =============================================================================

# Permutations tried before accepting an order that still has two identical
# cards next to each other
MAX_SHUFFLE_ATTEMPTS = 10

# Number of most recent draws exposed for display
RECENT_DRAWS_LIMIT = 3
