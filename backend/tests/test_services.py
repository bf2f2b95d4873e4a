import sys
import os
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import unittest
from services.simulation_service import SimulationService
from simulations import SimulationConfig
from simulations.session import STOPPED, RUNNING
from strategies.types import PAUSED
from fakes import FakeTimerFactory

class TestSimulationService(unittest.TestCase):
    def setUp(self):
        self.timers = FakeTimerFactory()
        self.service = SimulationService(initial_cash=1000.0, price_window=50, timer_factory=self.timers)

    def test_lifecycle(self):
        # Create
        s_id = self.service.create_session(SimulationConfig(asset_name="ETH", anchor_price=50.0))
        self.assertEqual(s_id, 1)
        self.assertIn(1, self.service.sessions)

        # Get
        session = self.service.get_session(1)
        self.assertIsNotNone(session)
        self.assertEqual(session.config.asset_name, "ETH")
        self.assertEqual(session.current_price, 50.0)

        # Start
        self.assertTrue(self.service.start_session(1))
        self.assertEqual(session.run_state, RUNNING)

        # Pause
        self.assertTrue(self.service.pause_session(1))
        self.assertEqual(session.run_state, PAUSED)

        # Reset
        self.service.reset_session(1)
        self.assertEqual(session.run_state, STOPPED)

        # Config
        config = self.service.update_config(1, anchor_price=60.0)
        self.assertEqual(config.anchor_price, 60.0)

        # Delete
        self.service.delete_session(1)
        self.assertNotIn(1, self.service.sessions)

    def test_ids_are_not_reused(self):
        first = self.service.create_session()
        self.service.delete_session(first)
        second = self.service.create_session()
        self.assertNotEqual(first, second)

    def test_delete_cancels_timer(self):
        s_id = self.service.create_session()
        self.service.start_session(s_id)
        self.service.delete_session(s_id)
        self.assertEqual(self.timers.active, [])

    def test_unknown_session(self):
        for call in (self.service.start_session, self.service.pause_session,
                     self.service.reset_session, self.service.delete_session):
            with self.assertRaises(ValueError):
                call(99)
        with self.assertRaises(ValueError):
            self.service.update_config(99, anchor_price=1.0)
        self.assertIsNone(self.service.get_session(99))

    def test_shutdown_cancels_all_timers(self):
        ids = [self.service.create_session() for _ in range(3)]
        for s_id in ids:
            self.service.start_session(s_id)
        self.assertEqual(len(self.timers.active), 3)

        self.service.shutdown()

        self.assertEqual(self.timers.active, [])
        self.assertTrue(all(t.cancel_count == 1 for t in self.timers.timers))
        for s_id in ids:
            self.assertEqual(self.service.get_session(s_id).run_state, PAUSED)

if __name__ == '__main__':
    unittest.main()
