from backend.models.clock import ClockConfig
from backend.models.result import SearchResult
from backend.models.water import WaterConfig, WaterStep

__all__ = ["ClockConfig", "SearchResult", "WaterConfig", "WaterStep"]
