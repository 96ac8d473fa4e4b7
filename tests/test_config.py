"""Unit tests for traversal configuration."""

import unittest

from ownedtreelib import TraversalConfig, TraversalStrategy, DepthConfig


class TestDepthConfig(unittest.TestCase):

    def test_defaults_allow_everything(self):
        config = DepthConfig()
        self.assertTrue(config.should_yield(0))
        self.assertTrue(config.should_yield(100))
        self.assertTrue(config.should_explore(100))

    def test_window(self):
        config = DepthConfig(min_depth=1, max_depth=2)
        self.assertFalse(config.should_yield(0))
        self.assertTrue(config.should_yield(1))
        self.assertTrue(config.should_yield(2))
        self.assertFalse(config.should_yield(3))
        self.assertTrue(config.should_explore(1))
        self.assertFalse(config.should_explore(2))


class TestTraversalConfig(unittest.TestCase):

    def test_default_is_pre_order(self):
        config = TraversalConfig()
        self.assertEqual(config.strategy, TraversalStrategy.DEPTH_FIRST_PRE)
        self.assertEqual(config.validate(), [])

    def test_convenience_constructors(self):
        self.assertEqual(TraversalConfig.pre_order().strategy, TraversalStrategy.DEPTH_FIRST_PRE)
        self.assertEqual(TraversalConfig.level_order(3).depth.max_depth, 3)

        shallow = TraversalConfig.shallow()
        self.assertEqual(shallow.strategy, TraversalStrategy.BREADTH_FIRST)
        self.assertEqual(shallow.depth.max_depth, 1)

    def test_validate_negative_depths(self):
        config = TraversalConfig(depth=DepthConfig(min_depth=-1, max_depth=-2))
        errors = config.validate()

        self.assertIn("min_depth cannot be negative", errors)
        self.assertIn("max_depth cannot be negative", errors)

    def test_validate_inverted_window(self):
        config = TraversalConfig(depth=DepthConfig(min_depth=3, max_depth=1))
        self.assertEqual(config.validate(), ["max_depth cannot be less than min_depth"])

    def test_validate_strategy_type(self):
        config = TraversalConfig(strategy="bfs")
        self.assertEqual(len(config.validate()), 1)

    def test_depth_configs_not_shared(self):
        first = TraversalConfig()
        second = TraversalConfig()
        first.depth.max_depth = 4

        self.assertIsNone(second.depth.max_depth)


if __name__ == "__main__":
    unittest.main()
