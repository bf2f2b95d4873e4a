import logging
import random
import threading
from typing import Optional, Tuple

from core.engine import start_timer
from strategies import AnchorTradeLogic, TradeDecision
from strategies.types import IDLE, PAUSED
from utils.export import build_balance_csv, build_export_filename
from .config import SimulationConfig
from .history import PriceSeries, BalanceLog
from .price import create_price_model

# Control loop states
STOPPED = "STOPPED"
RUNNING = "RUNNING"

# Setters exposed to clients. growth_rate and price_model are fixed at creation.
CONFIG_SETTERS = ("asset_name", "anchor_price", "micro_trade_amount", "trade_interval")

class ConfigLockedError(RuntimeError):
    pass

class ExportUnavailableError(RuntimeError):
    pass

class SimulationSession:
    def __init__(self, session_id: int, config: Optional[SimulationConfig] = None,
                 initial_cash: float = 1000.0, price_window: int = 50,
                 price_model=None, rng: Optional[random.Random] = None,
                 timer_factory=start_timer):
        self.session_id = session_id
        self.config = config or SimulationConfig()
        self.initial_cash = float(initial_cash)
        self.lock = threading.RLock()
        self.run_state = STOPPED

        self.price_model = price_model or create_price_model(self.config, rng)
        self.trade_logic = AnchorTradeLogic(self.config.anchor_price, self.config.micro_trade_amount)

        # Timer
        self.timer_factory = timer_factory
        self._timer = None

        # History
        self.price_series = PriceSeries(capacity=price_window)
        self.balance_log = BalanceLog()

        self._reset_state()

    @property
    def is_running(self) -> bool:
        return self.run_state == RUNNING

    def _reset_state(self):
        self.current_price = self.config.anchor_price
        self.cash_balance = self.initial_cash
        self.shares_held = 0.0
        self.trade_status = IDLE
        self.tick_count = 0
        self.price_series.reset(self.config.anchor_price)
        self.balance_log.reset(self.initial_cash)

    def _cancel_timer(self):
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    # ---------- commands ----------

    def start(self) -> bool:
        with self.lock:
            if self.run_state == RUNNING:
                logging.info(f"Simulation {self.session_id} already running, start ignored")
                return False

            self._cancel_timer()
            self._timer = self.timer_factory(
                self.config.trade_interval,
                self._on_timer,
                name=f"simulation-{self.session_id}"
            )
            self.run_state = RUNNING
            logging.info(f"Simulation {self.session_id} ({self.config.asset_name}) started, interval={self.config.trade_interval}s")
            return True

    def pause(self) -> bool:
        with self.lock:
            if self.run_state != RUNNING:
                return False

            self._cancel_timer()
            self.run_state = PAUSED
            self.trade_status = PAUSED
            logging.info(f"Simulation {self.session_id} paused at tick {self.tick_count}")
            return True

    def reset(self):
        with self.lock:
            self._cancel_timer()
            self.run_state = STOPPED
            self._reset_state()
            logging.info(f"Simulation {self.session_id} reset (anchor={self.config.anchor_price}, cash={self.initial_cash})")

    def close(self):
        """Teardown: the timer must not outlive the session.

        A running session is left PAUSED so its config stays locked until reset.
        """
        with self.lock:
            self._cancel_timer()
            if self.run_state == RUNNING:
                self.run_state = PAUSED
                self.trade_status = PAUSED

    def update_config(self, **changes) -> SimulationConfig:
        with self.lock:
            if self.run_state != STOPPED:
                raise ConfigLockedError(f"Simulation {self.session_id} is {self.run_state}; reset it before changing config")

            unknown = set(changes) - set(CONFIG_SETTERS)
            if unknown:
                raise ValueError(f"Unsupported config fields: {', '.join(sorted(unknown))}")

            old = self.config
            new = SimulationConfig.model_validate({**old.model_dump(), **changes})
            self.config = new
            self.trade_logic = AnchorTradeLogic(new.anchor_price, new.micro_trade_amount)

            if new.anchor_price != old.anchor_price:
                # Re-baseline the chart around the new anchor
                self.current_price = new.anchor_price
                self.price_series.reset(new.anchor_price)

            logging.info(f"Simulation {self.session_id} config updated: {changes}")
            return new

    # ---------- loop ----------

    def _on_timer(self, timer):
        with self.lock:
            # A handle replaced or cancelled while this call waited for the lock
            if timer is not self._timer or self.run_state != RUNNING:
                return
            self.tick()

    def tick(self) -> TradeDecision:
        """Advance one step: new price, trade decision, atomic commit."""
        with self.lock:
            config = self.config
            prev_price = self.current_price
            cash = self.cash_balance
            shares = self.shares_held
            tick = self.tick_count + 1

            new_price = self.price_model.next_price(prev_price, tick, config)
            decision = self.trade_logic.decide(new_price, cash, shares)
            new_cash = cash + decision.cash_delta
            new_shares = shares + decision.shares_delta

            self.tick_count = tick
            self.current_price = new_price
            self.price_series.append(tick, new_price)

            self.cash_balance = new_cash
            self.shares_held = new_shares
            self.trade_status = decision.action
            self.balance_log.record(tick, new_cash, decision.action, price=new_price)

            if decision.is_trade:
                logging.debug(
                    f"Simulation {self.session_id} tick {tick}: {decision.action} at {new_price:.4f}, "
                    f"cash={new_cash:.2f} shares={new_shares:.6f}"
                )
            return decision

    # ---------- read side ----------

    def get_state(self) -> dict:
        with self.lock:
            shares_value = self.shares_held * self.current_price
            return {
                "id": self.session_id,
                "config": self.config.model_dump(),
                "run_state": self.run_state,
                "is_running": self.is_running,
                "trade_status": self.trade_status,
                "current_price": self.current_price,
                "cash_balance": self.cash_balance,
                "shares_held": self.shares_held,
                "shares_value": shares_value,
                "total_value": self.cash_balance + shares_value,
                "trade_zone": self.trade_logic.trade_zone(self.current_price),
                "tick_count": self.tick_count,
                "price_series": [p.model_dump() for p in self.price_series.points()],
                "balance_log": [e.model_dump() for e in self.balance_log.events()]
            }

    def export_csv(self) -> Tuple[str, str]:
        """Return (filename, csv_text) for the balance log."""
        with self.lock:
            if self.run_state == RUNNING:
                raise ExportUnavailableError("Pause or reset the simulation before exporting")
            if not self.balance_log.has_activity:
                raise ExportUnavailableError("No balance changes to export yet")
            events = self.balance_log.events()
            asset_name = self.config.asset_name

        return build_export_filename(asset_name), build_balance_csv(events)
