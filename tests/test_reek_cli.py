import io
import json
import os
import sys
import tempfile
import textwrap
import unittest
from contextlib import redirect_stderr, redirect_stdout
from pathlib import Path

import reek_cli


@unittest.skipIf(os.name == "nt", "shebang scripts are POSIX-only")
class TestReekCli(unittest.TestCase):
    def setUp(self) -> None:
        self._td = tempfile.TemporaryDirectory()
        self.root = Path(self._td.name)
        self.source = self.root / "user.rb"
        self.source.write_text("class User\n  def name(x); end\nend\n", encoding="utf-8")

    def tearDown(self) -> None:
        self._td.cleanup()

    def _fake_reek(self, payload: str) -> Path:
        script = self.root / "fake-reek"
        script.write_text(
            f"#!{sys.executable}\n"
            + textwrap.dedent(
                f"""
                import json, sys
                smells = json.loads({payload!r})
                for s in smells:
                    s["source"] = sys.argv[-1]
                print(json.dumps(smells))
                """
            ),
            encoding="utf-8",
        )
        script.chmod(0o755)
        return script

    def _main(self, *argv: str):
        out, err = io.StringIO(), io.StringIO()
        with redirect_stdout(out), redirect_stderr(err):
            rc = reek_cli.main(list(argv))
        return rc, out.getvalue(), err.getvalue()

    def test_reports_warnings_against_original_path(self) -> None:
        script = self._fake_reek(
            json.dumps([{"lines": [2], "message": "has unused parameter 'x'", "smell_type": "UnusedParameters"}])
        )
        report = self.root / "out" / "report.json"
        rc, out, _ = self._main(
            str(self.source),
            "--executable",
            str(script),
            "--project-root",
            str(self.root),
            "--output",
            str(report),
        )
        self.assertEqual(reek_cli.EXIT_WARNINGS, rc)
        self.assertEqual(f"{self.source}:2: [UnusedParameters] has unused parameter 'x'", out.strip())

        data = json.loads(report.read_text(encoding="utf-8"))
        self.assertEqual(str(self.source), data[0]["file_path"])
        self.assertEqual(2, data[0]["line"])

    def test_clean_file_json_format(self) -> None:
        script = self._fake_reek("[]")
        rc, out, _ = self._main(
            str(self.source), "--executable", str(script), "--project-root", str(self.root), "--format", "json"
        )
        self.assertEqual(reek_cli.EXIT_CLEAN, rc)
        self.assertEqual([], json.loads(out))

    def test_execution_failure_is_terse(self) -> None:
        rc, _, err = self._main(
            str(self.source), "--executable", str(self.root / "missing-reek"), "--project-root", str(self.root)
        )
        self.assertEqual(reek_cli.EXIT_FAILED, rc)
        self.assertIn("Execution failed.", err)

    def test_invalid_settings_file_is_reported(self) -> None:
        bad_settings = {
            "unparsable": "executable: [unclosed\n",
            "not a mapping": "- reek\n",
            "negative timeout": "timeout_seconds: -1\n",
        }
        for name, text in bad_settings.items():
            with self.subTest(settings=name):
                (self.root / ".reek-runner.yml").write_text(text, encoding="utf-8")
                rc, out, err = self._main(
                    str(self.source), "--executable", "/opt/reek", "--project-root", str(self.root)
                )
                self.assertEqual(reek_cli.EXIT_FAILED, rc)
                self.assertEqual("", out)
                self.assertIn("❌ Invalid settings", err)

    def test_unreadable_source(self) -> None:
        rc, _, err = self._main(str(self.root / "nope.rb"), "--executable", "/opt/reek")
        self.assertEqual(reek_cli.EXIT_FAILED, rc)
        self.assertIn("Cannot read", err)


if __name__ == "__main__":
    unittest.main()
