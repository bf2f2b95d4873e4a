from pydantic import BaseModel

# Trade status / balance log actions
IDLE = "IDLE"
BUYING = "BUYING"
SELLING = "SELLING"
PAUSED = "PAUSED"
INITIAL = "INITIAL" # balance log only

TRADE_ACTIONS = (IDLE, BUYING, SELLING)

class TradeDecision(BaseModel):
    action: str = IDLE # IDLE, BUYING, SELLING
    cash_delta: float = 0.0 # USD, negative on buy
    shares_delta: float = 0.0 # negative on sell
    price: float = 0.0 # execution price

    @property
    def is_trade(self) -> bool:
        return self.action != IDLE
