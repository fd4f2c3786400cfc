"""
Game rule configuration.
"""

from pydantic import BaseModel, Field


class RuleConfig(BaseModel):
    """Configuration for room codes and player naming."""

    room_code_length: int = Field(
        default=5,
        ge=4,
        le=8,
        description="Number of characters in a generated room code"
    )
    player_name_prefix_length: int = Field(
        default=4,
        ge=1,
        le=8,
        description="How many leading characters of the player id make up the display name"
    )


# Default configuration instance
default_rules = RuleConfig()


def create_rules(**overrides) -> RuleConfig:
    """Create a RuleConfig with optional overrides."""
    config_dict = default_rules.model_dump()
    config_dict.update(overrides)
    return RuleConfig(**config_dict)
