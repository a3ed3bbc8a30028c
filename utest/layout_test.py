import unittest

from materialgraph.nodegraph import LayoutState
from materialgraph.settings import LayoutSettings


class LayoutStateTest(unittest.TestCase):
    def test_unused_column_starts_at_zero(self):
        layout = LayoutState()
        self.assertIsNone(layout.last_row(4))
        self.assertEqual(layout.next_row(4), 0)
        self.assertEqual(layout.last_row(4), 0)

    def test_rows_are_per_column(self):
        layout = LayoutState()
        rows = [layout.next_row(c) for c in (0, 0, 1, 0, 1)]
        self.assertEqual(rows, [0, 1, 0, 2, 1])

    def test_allocate_positions(self):
        """
        Колонки растут справа налево от base_x,
        строки сверху вниз с шагом row_spacing.
        """
        layout = LayoutState(LayoutSettings(base_x=1000.0, column_spacing=100.0, row_spacing=50.0))
        self.assertEqual(layout.allocate(0), (0, 1000.0, 0.0))
        self.assertEqual(layout.allocate(0), (1, 1000.0, 50.0))
        self.assertEqual(layout.allocate(2), (0, 800.0, 0.0))

    def test_default_grid(self):
        self.assertEqual(LayoutSettings().position(1, 2), (1300.0, 420.0))


if __name__ == "__main__":
    unittest.main()
