import unittest

from wordgrid.core.constants import Orientation, PolicyName
from wordgrid.core.exceptions import ConfigurationError
from wordgrid.core.models import Placement
from wordgrid.engine.generator import GeneratorConfig
from wordgrid.engine.grid import CharGrid
from wordgrid.engine.placer import (
    GreedyFirstFitPolicy,
    ProximityPolicy,
    RowStackPolicy,
    SequentialDiagonalPolicy,
    build_policy,
)


class GreedyFirstFitTests(unittest.TestCase):
    def test_first_word_lands_top_left_vertical(self) -> None:
        grid = CharGrid(5)
        report = GreedyFirstFitPolicy().place(grid, "ab")
        self.assertTrue(report.placed)
        self.assertEqual(report.placement, Placement(0, 0, Orientation.VERTICAL))
        self.assertEqual(grid.cell(0, 0), "a")
        self.assertEqual(grid.cell(1, 0), "b")
        self.assertTrue(grid.is_blank(0, 1))

    def test_conflicting_word_moves_to_next_column(self) -> None:
        grid = CharGrid(5)
        policy = GreedyFirstFitPolicy()
        policy.place(grid, "ab")
        report = policy.place(grid, "xy")
        self.assertEqual(report.placement, Placement(0, 1, Orientation.VERTICAL))

    def test_horizontal_used_when_vertical_blocked(self) -> None:
        grid = CharGrid(3)
        report = GreedyFirstFitPolicy().place(grid, "abc")
        self.assertEqual(report.placement, Placement(0, 0, Orientation.VERTICAL))
        # "axy" cannot go down column 0, but can run across row 0 from the shared 'a'.
        report = GreedyFirstFitPolicy().place(grid, "axy")
        self.assertEqual(report.placement, Placement(0, 0, Orientation.HORIZONTAL))

    def test_unplaceable_word_reports_no_placement(self) -> None:
        grid = CharGrid(4)
        before = grid.snapshot()
        report = GreedyFirstFitPolicy().place(grid, "abcde")
        self.assertFalse(report.placed)
        self.assertIsNone(report.placement)
        self.assertEqual(grid.snapshot(), before)


class SequentialDiagonalTests(unittest.TestCase):
    def test_cursor_steps_and_orientation_alternates(self) -> None:
        grid = CharGrid(20)
        reports = SequentialDiagonalPolicy(start=(5, 5), step=(2, 2)).place_all(grid, ["a", "bb", "ccc"])
        self.assertEqual(
            [r.placement for r in reports],
            [
                Placement(5, 5, Orientation.VERTICAL),
                Placement(7, 7, Orientation.HORIZONTAL),
                Placement(9, 9, Orientation.VERTICAL),
            ],
        )
        self.assertTrue(all(r.placed for r in reports))
        self.assertEqual(grid.cell(7, 8), "b")
        self.assertEqual(grid.cell(11, 9), "c")

    def test_cursor_advances_after_failures(self) -> None:
        grid = CharGrid(8)
        with self.assertLogs("wordgrid.engine.placer", level="WARNING"):
            reports = SequentialDiagonalPolicy().place_all(grid, ["a", "bb", "ccc"])
        self.assertEqual(
            [(r.placement, r.placed) for r in reports],
            [
                (Placement(5, 5, Orientation.VERTICAL), True),
                (Placement(7, 7, Orientation.HORIZONTAL), False),
                (Placement(9, 9, Orientation.VERTICAL), False),
            ],
        )
        self.assertEqual(grid.filled_count, 1)

    def test_start_orientation_and_reset(self) -> None:
        policy = SequentialDiagonalPolicy(start=(0, 0), step=(1, 3), start_orientation=Orientation.HORIZONTAL)
        first = policy.place(CharGrid(10), "ab")
        second = policy.place(CharGrid(10), "ab")
        self.assertEqual(first.placement, Placement(0, 0, Orientation.HORIZONTAL))
        self.assertEqual(second.placement, Placement(1, 3, Orientation.VERTICAL))
        policy.reset()
        self.assertEqual(policy.place(CharGrid(10), "ab").placement, first.placement)


class ProximityTests(unittest.TestCase):
    def test_empty_grid_falls_back_to_full_scan(self) -> None:
        grid = CharGrid(5)
        report = ProximityPolicy().place(grid, "ab")
        self.assertEqual(report.placement, Placement(0, 0, Orientation.VERTICAL))

    def test_prefers_positions_touching_letters(self) -> None:
        grid = CharGrid(10)
        grid.try_write("zz", 6, 6, Orientation.HORIZONTAL)
        report = ProximityPolicy(locality=True).place(grid, "ab")
        self.assertEqual(report.placement, Placement(4, 6, Orientation.VERTICAL))

    def test_without_locality_matches_greedy_scan(self) -> None:
        grid = CharGrid(10)
        grid.try_write("zz", 6, 6, Orientation.HORIZONTAL)
        report = ProximityPolicy(locality=False).place(grid, "ab")
        self.assertEqual(report.placement, Placement(0, 0, Orientation.VERTICAL))

    def test_second_word_lands_beside_first(self) -> None:
        grid = CharGrid(10)
        grid.try_write("cat", 5, 5, Orientation.HORIZONTAL)
        report = ProximityPolicy().place(grid, "tin")
        # Column 5 from row 2 ends directly above the 'c'.
        self.assertEqual(report.placement, Placement(2, 5, Orientation.VERTICAL))
        self.assertEqual(grid.filled_count, 6)


class RowStackTests(unittest.TestCase):
    def test_each_word_starts_its_own_row(self) -> None:
        grid = CharGrid(3)
        with self.assertLogs("wordgrid.engine.placer", level="WARNING") as logs:
            reports = RowStackPolicy().place_all(grid, ["ab", "cde", "f", "gh"])
        self.assertEqual(
            [r.placement for r in reports[:3]],
            [Placement(row, 0, Orientation.HORIZONTAL) for row in range(3)],
        )
        self.assertEqual([r.placed for r in reports], [True, True, True, False])
        self.assertIn("Could not place word: gh", logs.output[0])
        self.assertEqual(grid.cell(1, 2), "e")


class OversizedWordTests(unittest.TestCase):
    def test_word_longer_than_grid_fails_everywhere(self) -> None:
        policies = [
            SequentialDiagonalPolicy(start=(0, 0)),
            GreedyFirstFitPolicy(),
            ProximityPolicy(),
            ProximityPolicy(locality=False),
            RowStackPolicy(),
        ]
        for policy in policies:
            with self.subTest(policy=policy.name):
                grid = CharGrid(5)
                with self.assertLogs("wordgrid.engine.placer", level="WARNING") as logs:
                    reports = policy.place_all(grid, ["abcdefg"])
                self.assertFalse(reports[0].placed)
                self.assertTrue(grid.is_empty())
                self.assertIn("abcdefg", logs.output[0])


class BuildPolicyTests(unittest.TestCase):
    def test_builds_each_named_policy(self) -> None:
        expected = {
            PolicyName.SEQUENTIAL: SequentialDiagonalPolicy,
            PolicyName.GREEDY: GreedyFirstFitPolicy,
            PolicyName.PROXIMITY: ProximityPolicy,
            PolicyName.ROWS: RowStackPolicy,
        }
        for name, cls in expected.items():
            self.assertIsInstance(build_policy(GeneratorConfig(policy=name)), cls)

    def test_accepts_plain_string_names(self) -> None:
        policy = build_policy(GeneratorConfig(policy="sequential", start_row=1, start_col=2, step_rows=3, step_cols=4))
        self.assertIsInstance(policy, SequentialDiagonalPolicy)
        self.assertEqual(policy.start, (1, 2))
        self.assertEqual(policy.step, (3, 4))

    def test_unknown_policy_rejected(self) -> None:
        with self.assertRaises(ConfigurationError):
            build_policy(GeneratorConfig(policy="diagonal"))


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
