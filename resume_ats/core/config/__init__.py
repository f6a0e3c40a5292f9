from .scoring import get_scoring_config, get_scoring_table, get_scoring_value, load_scoring_config

__all__ = ["get_scoring_config", "get_scoring_table", "get_scoring_value", "load_scoring_config"]
