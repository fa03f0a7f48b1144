"""Testing generators – property-based strategies for flag types."""
from flagmask.testing.generators.strategies import flag_definition_strategy, flag_set_strategy

__all__ = ["flag_definition_strategy", "flag_set_strategy"]
