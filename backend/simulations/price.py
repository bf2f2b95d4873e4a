import random
from typing import Optional
from .config import SimulationConfig

LINEAR_VOLATILITY = 0.01 # 1% of anchor
EXPONENTIAL_VOLATILITY = 0.015 # 1.5% of trend

class LinearPriceModel:
    """Random walk around the previous price, noise scaled by the anchor."""

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def next_price(self, prev_price: float, tick: int, config: SimulationConfig) -> float:
        random_change = self.rng.uniform(-1.0, 1.0)
        volatility = config.anchor_price * LINEAR_VOLATILITY
        return prev_price + random_change * volatility

class ExponentialPriceModel:
    """Noise around an exponential trend that starts at the anchor."""

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def trend(self, tick: int, config: SimulationConfig) -> float:
        return config.anchor_price * (1 + config.growth_rate) ** tick

    def next_price(self, prev_price: float, tick: int, config: SimulationConfig) -> float:
        # prev_price is unused: each tick is drawn fresh around the baseline
        trend = self.trend(tick, config)
        random_change = self.rng.uniform(-1.0, 1.0)
        return trend + random_change * (trend * EXPONENTIAL_VOLATILITY)

def create_price_model(config: SimulationConfig, rng: Optional[random.Random] = None):
    if config.price_model == "exponential":
        return ExponentialPriceModel(rng)
    return LinearPriceModel(rng)
