from .types import TradeDecision
from .anchor import AnchorTradeLogic
