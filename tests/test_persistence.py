import tempfile
import unittest
from pathlib import Path

import pandas as pd

from persistence import Workbook, load_activity_report
from services import locate_section

REPORT_CSV = """Statement,Header,Field Name,Field Value
Statement,Data,Period,"January 1, 2033 - March 1, 2033"
Trades,Header,DataDiscriminator,Asset Category,Currency,Account,Symbol,Date/Time,Quantity,T. Price
Trades,Data,Order,Stocks,USD,U1,FB,"2033-01-01, 00:00:00","1,000",130
Trades,SubTotal,,Stocks,USD,U1,FB,,"1,000",
Open Positions,Header,DataDiscriminator
"""


class TestWorkbook(unittest.TestCase):
    def test_create_replaces_existing_sheet(self):
        workbook = Workbook()
        workbook.create_sheet("Summary", pd.DataFrame({"a": [1]}))
        workbook.hide_columns("Summary", ["a"])
        workbook.create_sheet("Summary", pd.DataFrame({"a": [2], "b": [3]}))
        self.assertEqual(workbook.get_sheet("Summary")["a"].tolist(), [2])
        self.assertEqual(workbook.hidden_columns("Summary"), set())

    def test_hidden_columns_and_delete(self):
        workbook = Workbook()
        workbook.create_sheet("Work", pd.DataFrame({"keep": [1], "helper": [2]}))
        workbook.hide_columns("Work", ["helper", "unknown"])
        self.assertEqual(list(workbook.visible_frame("Work").columns), ["keep"])
        self.assertEqual(workbook.hidden_columns("Work"), {"helper"})
        workbook.delete_sheet("Work")
        self.assertFalse(workbook.has_sheet("Work"))
        with self.assertRaises(KeyError):
            workbook.get_sheet("Work")

    def test_export_csv(self):
        workbook = Workbook()
        workbook.create_sheet("Trades Returns", pd.DataFrame({"symbol": ["FB"], "as_of": ["2033-03-01"]}))
        workbook.hide_columns("Trades Returns", ["as_of"])
        with tempfile.TemporaryDirectory() as tmp:
            paths = workbook.export_csv(tmp)
            self.assertEqual([p.name for p in paths], ["trades_returns.csv"])
            exported = pd.read_csv(paths[0])
            self.assertEqual(list(exported.columns), ["symbol"])


class TestReportLoader(unittest.TestCase):
    def test_loads_ragged_report(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "activity.csv"
            path.write_text(REPORT_CSV, encoding="utf-8")
            raw = load_activity_report(path)

        self.assertEqual(raw.shape, (6, 10))
        self.assertEqual(raw.iloc[0, 0], "Statement")
        self.assertEqual(raw.iloc[3, 6], "FB")
        self.assertEqual(raw.iloc[3, 7], "2033-01-01, 00:00:00")
        self.assertEqual(raw.iloc[4, 7], "")
        bounds = locate_section(raw)
        self.assertEqual((bounds.start, bounds.end), (2, 5))

    def test_wide_rows_are_truncated_not_dropped(self):
        wide_csv = (
            "Trades,Header,DataDiscriminator,Asset Category,Currency,Account,Symbol,Date/Time,Quantity,T. Price\n"
            'Trades,Data,Order,Stocks,USD,U1,FB,"2033-01-01, 00:00:00",50,130,-6500,O\n'
            "Trades,SubTotal,,Stocks,USD,U1,FB,,50,\n"
            "Open Positions,Header\n"
        )
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "wide.csv"
            path.write_text(wide_csv, encoding="utf-8")
            with self.assertLogs("persistence.report_loader", level="WARNING") as captured:
                raw = load_activity_report(path, max_columns=10)

        self.assertEqual(raw.shape, (4, 10))
        self.assertEqual(raw.iloc[1, 6], "FB")
        self.assertEqual(raw.iloc[1, 9], "130")
        self.assertEqual(len(captured.output), 1)


if __name__ == "__main__":
    unittest.main()
