import logging
from .types import TradeDecision, IDLE, BUYING, SELLING

class AnchorTradeLogic:
    """Buy a fixed notional below the anchor, sell the same notional above it.

    The logic is pure: it only computes the decision. The caller applies
    ``cash_delta`` / ``shares_delta`` so the balance log and the balance itself
    come from the same numbers.
    """

    def __init__(self, anchor_price: float, micro_trade_amount: float):
        self.anchor_price = float(anchor_price)
        self.micro_trade_amount = float(micro_trade_amount)

    def trade_zone(self, price: float) -> str:
        return "BUY" if price < self.anchor_price else "SELL"

    def decide(self, price: float, cash_balance: float, shares_held: float) -> TradeDecision:
        if price <= 0:
            logging.debug(f"Anchor Logic: Trade skipped at non-positive price {price:.4f}")
            return TradeDecision(action=IDLE, price=price)
        if price < self.anchor_price:
            return self._decide_buy(price, cash_balance)
        if price > self.anchor_price:
            return self._decide_sell(price, shares_held)
        return TradeDecision(action=IDLE, price=price)

    def _decide_buy(self, price: float, cash_balance: float) -> TradeDecision:
        amount = self.micro_trade_amount
        if cash_balance < amount:
            logging.debug(f"Anchor Logic: Buy skipped at {price:.4f}, cash {cash_balance:.2f} < {amount:.2f}")
            return TradeDecision(action=IDLE, price=price)

        shares_to_buy = amount / price
        return TradeDecision(action=BUYING, cash_delta=-amount, shares_delta=shares_to_buy, price=price)

    def _decide_sell(self, price: float, shares_held: float) -> TradeDecision:
        if shares_held <= 0:
            logging.debug(f"Anchor Logic: Sell skipped at {price:.4f}, no shares held")
            return TradeDecision(action=IDLE, price=price)

        shares_to_sell = min(shares_held, self.micro_trade_amount / price)
        return TradeDecision(
            action=SELLING,
            cash_delta=shares_to_sell * price,
            shares_delta=-shares_to_sell,
            price=price
        )
