import unittest
from datetime import date, time
from types import SimpleNamespace as Obj

from scheduling.grid import build_grid


def cleaner(id, name):
    return Obj(id=id, full_name=name)


def job(id, cleaner_id, day, start, hours, status="assigned"):
    return Obj(
        id=id, cleaner_id=cleaner_id, scheduled_date=day, start_time=start,
        duration_hours=hours, status=status, reference_code=f"HMC-{id}",
    )


class GridTests(unittest.TestCase):
    def setUp(self):
        self.ana = cleaner(1, "Ana")
        self.ion = cleaner(2, "Ion")
        self.weekly = [
            Obj(cleaner_id=1, day_of_week=1, start_time=time(9, 0), end_time=time(18, 0), is_available=True),
        ]
        self.company = [
            Obj(day_of_week=2, start_time=time(8, 0), end_time=time(16, 0), is_work_day=True),
            Obj(day_of_week=6, start_time=time(8, 0), end_time=time(12, 0), is_work_day=False),
        ]
        self.overrides = [
            Obj(cleaner_id=2, date=date(2025, 6, 11), start_time=time(12, 0), end_time=time(15, 0), is_available=True),
            # outside the week, must not matter
            Obj(cleaner_id=2, date=date(2025, 6, 18), start_time=time(12, 0), end_time=time(15, 0), is_available=False),
        ]
        self.jobs = [
            job(10, 1, date(2025, 6, 9), time(11, 0), 1),
            job(11, 1, date(2025, 6, 9), time(10, 0), 2),
            job(12, 2, date(2025, 6, 9), time(10, 0), 1),
            job(13, 2, date(2025, 6, 9), time(11, 0), 1),
            job(14, None, date(2025, 6, 9), time(9, 0), 1),
        ]

    def _grid(self, week_of=date(2025, 6, 12)):
        return build_grid(week_of, [self.ana, self.ion], self.weekly, self.company, self.overrides, self.jobs)

    def test_week_normalised_to_monday(self):
        grid = self._grid()
        self.assertEqual(grid.week_start, date(2025, 6, 9))
        self.assertEqual(grid.week_end, date(2025, 6, 15))
        self.assertEqual(len(grid.dates), 7)

    def test_one_row_per_cleaner_seven_cells(self):
        grid = self._grid()
        self.assertEqual([r.cleaner_id for r in grid.rows], [1, 2])
        for row in grid.rows:
            self.assertEqual(len(row.cells), 7)
            self.assertEqual([c.grid_index for c in row.cells], list(range(7)))
            self.assertEqual([c.day_of_week for c in row.cells], [1, 2, 3, 4, 5, 6, 0])

    def test_sources_per_cell(self):
        ana, ion = self._grid().rows
        self.assertEqual([c.availability.source for c in ana.cells],
                         ["weekly", "company", "default", "default", "default", "company", "default"])
        self.assertEqual(ion.cells[2].availability.source, "override")
        self.assertEqual(ion.cells[2].availability.start_time, time(12, 0))
        self.assertFalse(ion.cells[5].availability.is_available)   # company off Saturday
        self.assertFalse(ion.cells[6].availability.is_available)   # default Sunday

    def test_assignments_and_conflicts(self):
        ana, ion = self._grid().rows
        monday_ana = ana.cells[0]
        self.assertEqual([a.id for a in monday_ana.assignments], [11, 10])
        self.assertTrue(monday_ana.has_conflict)
        # back-to-back jobs
        self.assertEqual(len(ion.cells[0].assignments), 2)
        self.assertFalse(ion.cells[0].has_conflict)
        self.assertFalse(ana.cells[1].has_conflict)
        self.assertEqual(ana.cells[1].assignments, [])

    def test_unassigned_jobs_ignored(self):
        grid = self._grid()
        ids = {a.id for row in grid.rows for cell in row.cells for a in cell.assignments}
        self.assertNotIn(14, ids)

    def test_empty_roster(self):
        grid = build_grid(date(2025, 6, 9), [], [], [], [], [])
        self.assertEqual(grid.rows, [])
        self.assertEqual(grid.week_start, date(2025, 6, 9))


if __name__ == "__main__":
    unittest.main()
