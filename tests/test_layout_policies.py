import unittest

from app.clusterlayout.layout.policies import (
    CardLayout,
    FixedByGridLayoutPolicy,
    MinWidthLayoutPolicy,
)


class TestFixedByGridLayoutPolicy(unittest.TestCase):
    def test_subtracts_content_padding(self):
        policy = FixedByGridLayoutPolicy(desired_child_width_px=100)
        self.assertEqual(policy.width_for_children(432), 400)
        # padding wider than the scroller
        self.assertEqual(policy.width_for_children(20), 0)

    def test_child_width(self):
        # 400/100 = 4, round(4 - 0.1) = 4 -> 4.1 cards, 400/4.1 = 97.56 -> 98
        policy = FixedByGridLayoutPolicy(desired_child_width_px=100)
        self.assertEqual(policy.calculate_child_width(432), 98)

    def test_multiplier(self):
        policy = FixedByGridLayoutPolicy(desired_child_width_px=100, child_width_multiplier=2)
        self.assertEqual(policy.calculate_child_width(432), 196)

    def test_no_padding_no_peeking(self):
        policy = FixedByGridLayoutPolicy(
            desired_child_width_px=100,
            child_peeking_fraction=0.0,
            content_start_padding_px=0,
            content_end_padding_px=0,
        )
        self.assertEqual(policy.calculate_child_width(1000), 100)

    def test_scroller_height(self):
        policy = FixedByGridLayoutPolicy(desired_child_width_px=100)
        self.assertIsNone(policy.calculate_scroller_height(160))

        policy = FixedByGridLayoutPolicy(desired_child_width_px=100, scroller_height_ratio=9 / 16)
        self.assertEqual(policy.calculate_scroller_height(160), 90)
        self.assertEqual(policy.calculate_scroller_height(0), 1)

    def test_invalid_inputs(self):
        with self.assertRaises(ValueError):
            FixedByGridLayoutPolicy(desired_child_width_px=0)
        with self.assertRaises(ValueError):
            FixedByGridLayoutPolicy(desired_child_width_px=100, child_width_multiplier=0)
        with self.assertRaises(ValueError):
            FixedByGridLayoutPolicy(desired_child_width_px=100, child_peeking_fraction=1.1)
        with self.assertRaises(ValueError):
            FixedByGridLayoutPolicy(desired_child_width_px=100, content_start_padding_px=-1)
        with self.assertRaises(ValueError):
            FixedByGridLayoutPolicy(desired_child_width_px=100, scroller_height_ratio=0)
        with self.assertRaises(ValueError):
            FixedByGridLayoutPolicy(desired_child_width_px=100).calculate_child_width(-1)


class TestMinWidthLayoutPolicy(unittest.TestCase):
    def test_calculate(self):
        # 462 - 32 = 430 -> (430+10)//110 = 4 cards, (430-30)//4 = 100
        policy = MinWidthLayoutPolicy(min_width_per_card_px=100, padding_px=10)
        self.assertEqual(policy.calculate(462), CardLayout(count=4, card_width_px=100, padding_px=10))

    def test_single_card_when_too_narrow(self):
        policy = MinWidthLayoutPolicy(
            min_width_per_card_px=300, content_start_padding_px=0, content_end_padding_px=0
        )
        self.assertEqual(policy.calculate(200), CardLayout(count=1, card_width_px=200, padding_px=0))

    def test_padding_wider_than_scroller_leaves_zero_width(self):
        # 20 - 32 would be -12; clamped to 0
        policy = MinWidthLayoutPolicy(min_width_per_card_px=100)
        self.assertEqual(policy.width_for_children(20), 0)
        self.assertEqual(policy.calculate(20), CardLayout(count=1, card_width_px=0, padding_px=0))

    def test_invalid_inputs(self):
        with self.assertRaises(ValueError):
            MinWidthLayoutPolicy(min_width_per_card_px=0)
        with self.assertRaises(ValueError):
            MinWidthLayoutPolicy(min_width_per_card_px=100, padding_px=-1)
        with self.assertRaises(ValueError):
            MinWidthLayoutPolicy(min_width_per_card_px=100, content_end_padding_px=-1)


if __name__ == "__main__":
    unittest.main()
