from collections import deque
from typing import List, Optional
from pydantic import BaseModel
from strategies.types import INITIAL

class PricePoint(BaseModel):
    time: int # tick index
    price: float

class BalanceEvent(BaseModel):
    time: int
    balance: float
    change: float
    action: str # INITIAL, BUYING, SELLING, IDLE
    price: Optional[float] = None

class PriceSeries:
    """Sliding window of the most recent price points (oldest dropped first)."""

    def __init__(self, capacity: int = 50):
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self._points = deque(maxlen=capacity)

    def append(self, time: int, price: float):
        self._points.append(PricePoint(time=time, price=price))

    def reset(self, anchor_price: float):
        self._points.clear()
        self.append(0, anchor_price)

    def points(self) -> List[PricePoint]:
        return list(self._points)

    def __len__(self):
        return len(self._points)

class BalanceLog:
    """Append-only cash balance history, one entry per actual balance change."""

    def __init__(self):
        self._events: List[BalanceEvent] = []

    def reset(self, initial_cash: float):
        self._events = [BalanceEvent(time=0, balance=initial_cash, change=0.0, action=INITIAL)]

    @property
    def last_balance(self) -> Optional[float]:
        return self._events[-1].balance if self._events else None

    @property
    def has_activity(self) -> bool:
        return len(self._events) > 1

    def record(self, time: int, balance: float, action: str, price: Optional[float] = None) -> Optional[BalanceEvent]:
        """Append an event if ``balance`` differs from the last logged one.

        The change is measured against the last logged balance, not the
        previous tick, so tick indices in the log can skip.
        """
        last = self.last_balance
        if last is not None and balance == last:
            return None

        change = balance - last if last is not None else 0.0
        event = BalanceEvent(time=time, balance=balance, change=change, action=action, price=price)
        self._events.append(event)
        return event

    def events(self) -> List[BalanceEvent]:
        return list(self._events)

    def __len__(self):
        return len(self._events)
