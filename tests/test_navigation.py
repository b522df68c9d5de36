"""Navigation state tests."""

import unittest

from rent.navigation import NavigationState


class TestNavigationState(unittest.TestCase):
    def test_starts_at_zero(self) -> None:
        state = NavigationState(3)
        self.assertEqual(state.index(), 0)
        self.assertEqual(state.total, 3)

    def test_retreat_at_start_is_noop(self) -> None:
        state = NavigationState(4)
        state.retreat()
        self.assertEqual(state.index(), 0)

    def test_advance_clamps_at_end(self) -> None:
        for total in (2, 3, 7):
            state = NavigationState(total)
            for _ in range(total - 1):
                state.advance()
            self.assertEqual(state.index(), total - 1)
            state.advance()
            self.assertEqual(state.index(), total - 1)

    def test_advance_then_retreat(self) -> None:
        state = NavigationState(3)
        state.advance()
        state.advance()
        state.retreat()
        self.assertEqual(state.index(), 1)

    def test_single_slide_never_moves(self) -> None:
        state = NavigationState(1)
        state.advance()
        state.retreat()
        self.assertEqual(state.index(), 0)

    def test_rejects_empty_total(self) -> None:
        with self.assertRaises(ValueError):
            NavigationState(0)


if __name__ == "__main__":
    unittest.main()
