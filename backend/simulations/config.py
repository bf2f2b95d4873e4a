from typing import Literal
from pydantic import BaseModel, ConfigDict, Field
from core import settings

class SimulationConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    asset_name: str = Field(default_factory=lambda: settings.DEFAULT_ASSET)
    anchor_price: float = Field(default_factory=lambda: settings.DEFAULT_ANCHOR_PRICE, gt=0) # USD
    micro_trade_amount: float = Field(default_factory=lambda: settings.DEFAULT_MICRO_TRADE_AMOUNT, gt=0) # USD per trade
    trade_interval: float = Field(default_factory=lambda: settings.DEFAULT_TRADE_INTERVAL, gt=0) # seconds between ticks
    price_model: Literal["linear", "exponential"] = Field(default_factory=lambda: settings.DEFAULT_PRICE_MODEL)
    growth_rate: float = Field(default_factory=lambda: settings.DEFAULT_GROWTH_RATE) # per tick, exponential model only
