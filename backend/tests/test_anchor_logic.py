import sys
import os
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import unittest
from strategies import AnchorTradeLogic
from strategies.types import IDLE, BUYING, SELLING, TRADE_ACTIONS

class TestAnchorTradeLogic(unittest.TestCase):
    def setUp(self):
        self.logic = AnchorTradeLogic(anchor_price=100.0, micro_trade_amount=1.0)

    def test_buy_below_anchor(self):
        decision = self.logic.decide(90.0, cash_balance=1000.0, shares_held=0.0)

        self.assertEqual(decision.action, BUYING)
        self.assertAlmostEqual(decision.cash_delta, -1.0)
        self.assertAlmostEqual(decision.shares_delta, 1.0 / 90.0)

    def test_buy_skipped_without_cash(self):
        decision = self.logic.decide(90.0, cash_balance=0.5, shares_held=0.0)

        self.assertEqual(decision.action, IDLE)
        self.assertEqual(decision.cash_delta, 0.0)
        self.assertEqual(decision.shares_delta, 0.0)

    def test_buy_allowed_with_exact_cash(self):
        decision = self.logic.decide(90.0, cash_balance=1.0, shares_held=0.0)
        self.assertEqual(decision.action, BUYING)

    def test_sell_above_anchor_caps_at_micro_amount(self):
        decision = self.logic.decide(110.0, cash_balance=0.0, shares_held=5.0)

        self.assertEqual(decision.action, SELLING)
        self.assertAlmostEqual(decision.shares_delta, -1.0 / 110.0)
        self.assertAlmostEqual(decision.cash_delta, 1.0)

    def test_sell_caps_at_shares_held(self):
        decision = self.logic.decide(110.0, cash_balance=0.0, shares_held=0.001)

        self.assertEqual(decision.action, SELLING)
        self.assertAlmostEqual(decision.shares_delta, -0.001)
        self.assertAlmostEqual(decision.cash_delta, 0.001 * 110.0)

    def test_sell_skipped_without_shares(self):
        decision = self.logic.decide(110.0, cash_balance=1000.0, shares_held=0.0)
        self.assertEqual(decision.action, IDLE)

    def test_equal_price_is_idle(self):
        decision = self.logic.decide(100.0, cash_balance=1000.0, shares_held=3.0)
        self.assertEqual(decision.action, IDLE)
        self.assertFalse(decision.is_trade)

    def test_non_positive_price_is_idle(self):
        for price in (-5.0, 0.0):
            decision = self.logic.decide(price, cash_balance=1000.0, shares_held=2.0)
            self.assertEqual(decision.action, IDLE)
            self.assertEqual(decision.cash_delta, 0.0)
            self.assertEqual(decision.shares_delta, 0.0)

    def test_exactly_one_action(self):
        for price in (50.0, 99.99, 100.0, 100.01, 150.0):
            for cash, shares in ((0.0, 0.0), (1000.0, 0.0), (0.0, 2.0), (1000.0, 2.0)):
                decision = self.logic.decide(price, cash, shares)
                self.assertIn(decision.action, TRADE_ACTIONS)

    def test_buy_is_value_neutral(self):
        cash, shares, price = 1000.0, 0.25, 80.0
        before = cash + shares * price

        decision = self.logic.decide(price, cash, shares)
        after = (cash + decision.cash_delta) + (shares + decision.shares_delta) * price

        self.assertAlmostEqual(before, after)

    def test_trade_zone(self):
        self.assertEqual(self.logic.trade_zone(99.0), "BUY")
        self.assertEqual(self.logic.trade_zone(100.0), "SELL")
        self.assertEqual(self.logic.trade_zone(101.0), "SELL")

if __name__ == '__main__':
    unittest.main()
