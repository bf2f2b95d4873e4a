import logging
import threading
from typing import Dict, List, Optional
from simulations import SimulationSession, SimulationConfig
from core.engine import start_timer

class SimulationService:
    def __init__(self, initial_cash: float = 1000.0, price_window: int = 50, timer_factory=start_timer):
        self.initial_cash = initial_cash
        self.price_window = price_window
        self.timer_factory = timer_factory
        self.sessions: Dict[int, SimulationSession] = {}
        self.next_session_id = 1
        self.lock = threading.RLock()

    def _require(self, session_id: int) -> SimulationSession:
        session = self.sessions.get(session_id)
        if session is None:
            raise ValueError("Simulation not found")
        return session

    def get_session(self, session_id: int) -> Optional[SimulationSession]:
        return self.sessions.get(session_id)

    def get_all_sessions(self) -> List[SimulationSession]:
        return list(self.sessions.values())

    def create_session(self, config: Optional[SimulationConfig] = None) -> int:
        with self.lock:
            session_id = self.next_session_id
            self.next_session_id += 1
            self.sessions[session_id] = SimulationSession(
                session_id,
                config=config,
                initial_cash=self.initial_cash,
                price_window=self.price_window,
                timer_factory=self.timer_factory
            )
        logging.info(f"Created simulation {session_id} ({self.sessions[session_id].config.asset_name})")
        return session_id

    def delete_session(self, session_id: int):
        with self.lock:
            session = self._require(session_id)
            session.close()
            del self.sessions[session_id]
        logging.info(f"Deleted simulation {session_id}")

    def start_session(self, session_id: int) -> bool:
        return self._require(session_id).start()

    def pause_session(self, session_id: int) -> bool:
        return self._require(session_id).pause()

    def reset_session(self, session_id: int):
        self._require(session_id).reset()

    def update_config(self, session_id: int, **changes) -> SimulationConfig:
        return self._require(session_id).update_config(**changes)

    def shutdown(self):
        """Cancel every running timer (application teardown)."""
        with self.lock:
            for session in self.sessions.values():
                try:
                    session.close()
                except Exception as e:
                    logging.error(f"Failed to close simulation {session.session_id}: {e}")
        logging.info("Simulation service shut down")
