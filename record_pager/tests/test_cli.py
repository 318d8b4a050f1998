import json
import os
import sqlite3
import tempfile
import unittest

from rich.console import Console

from ..cli import build_parser, main
from simple_logger import Slogger


class TestCli(unittest.TestCase):
    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self._log_settings = (Slogger.log_path, Slogger.min_level)
        self.db_path = os.path.join(self.tmp.name, "records.sqlite")
        self.config_path = os.path.join(self.tmp.name, "config.json")
        with open(self.config_path, "w", encoding="utf-8") as f:
            json.dump({"logging": {"path": os.path.join(self.tmp.name, "cli.log")}}, f)

        conn = sqlite3.connect(self.db_path)
        conn.execute("CREATE TABLE entries (id INTEGER PRIMARY KEY, title TEXT)")
        conn.executemany(
            "INSERT INTO entries (id, title) VALUES (?, ?)",
            [(i, f"Entry {i}") for i in range(1, 46)],
        )
        conn.commit()
        conn.close()

    def tearDown(self):
        Slogger.log_path, Slogger.min_level = self._log_settings
        self.tmp.cleanup()

    def run_cli(self, *argv):
        console = Console(record=True, width=200)
        code = main(["--config", self.config_path, *argv], console=console)
        return code, console.export_text()

    def test_links(self):
        code, output = self.run_cli("links", "--num-pages", "20", "--current", "10")
        self.assertEqual(code, 0)
        self.assertIn("1 2 … 7 8 9 10 11 12 … 19 20", output)

    def test_links_single_page(self):
        code, output = self.run_cli("links", "--num-pages", "1")
        self.assertEqual(code, 0)
        self.assertIn("no links", output)

    def test_page(self):
        code, output = self.run_cli(
            "page", "--db", self.db_path, "--table", "entries", "--page", "2", "--per-page", "10"
        )
        self.assertEqual(code, 0)
        self.assertIn("page 2 of 5 (45 records)", output)
        self.assertIn("Entry 11", output)
        self.assertNotIn("Entry 21", output)
        self.assertIn("1 2 3 4 5", output)

    def test_count(self):
        code, output = self.run_cli(
            "count", "--db", self.db_path, "--table", "entries", "--where", "id > 5"
        )
        self.assertEqual(code, 0)
        self.assertIn("40 records, 2 pages of 20", output)

    def test_bad_page_size_reported(self):
        code, output = self.run_cli(
            "count", "--db", self.db_path, "--table", "entries", "--per-page", "0"
        )
        self.assertEqual(code, 1)
        self.assertIn("Page size must be a positive integer", output)

    def test_missing_table_reported(self):
        code, output = self.run_cli("page", "--db", self.db_path, "--table", "nope")
        self.assertEqual(code, 1)
        self.assertIn("no such table", output)

    def test_parser_requires_command(self):
        with self.assertRaises(SystemExit):
            build_parser().parse_args([])


if __name__ == "__main__":
    unittest.main()
