import sys
import unittest
from unittest.mock import patch

from tools.core_cmd import CmdResult
from tools.reek.environment import RubyGemEnvironment


def _res(exit_code=0, stdout="", stderr=""):
    return CmdResult(exit_code=exit_code, elapsed_seconds=0.0, command_str="ruby", stdout=stdout, stderr=stderr)


class TestRubyEnvironment(unittest.TestCase):
    def test_script_path_from_rubygems(self) -> None:
        env = RubyGemEnvironment("/usr/bin/ruby")
        with patch("tools.reek.environment.run_cmd", return_value=_res(stdout="/gems/bin/reek\n")) as run:
            self.assertEqual("/gems/bin/reek", env.script_path("reek", "/proj"))
        cmd = run.call_args.args[0]
        self.assertEqual(["/usr/bin/ruby", "-e"], cmd[:2])
        self.assertEqual("reek", cmd[-1])
        self.assertEqual("/proj", str(run.call_args.kwargs["cwd"]))

    def test_missing_gem_yields_none(self) -> None:
        env = RubyGemEnvironment("/usr/bin/ruby")
        with patch("tools.reek.environment.run_cmd", return_value=_res(exit_code=1, stderr="GemNotFound")):
            self.assertIsNone(env.script_path("reek"))
        with patch("tools.reek.environment.run_cmd", side_effect=FileNotFoundError("ruby")):
            self.assertIsNone(env.script_path("reek"))

    def test_name_uses_version_and_falls_back_to_path(self) -> None:
        with patch("tools.reek.environment.run_cmd", return_value=_res(stdout="ruby 3.3.0\n")):
            self.assertEqual("ruby 3.3.0", RubyGemEnvironment("/usr/bin/ruby").name)
        with patch("tools.reek.environment.run_cmd", side_effect=FileNotFoundError("ruby")):
            self.assertEqual("/usr/bin/ruby", RubyGemEnvironment("/usr/bin/ruby").name)

    def test_home_path_requires_existing_interpreter(self) -> None:
        self.assertEqual(sys.executable, RubyGemEnvironment(sys.executable).home_path())
        self.assertIsNone(RubyGemEnvironment("/no/such/ruby").home_path())

    def test_from_path_without_ruby(self) -> None:
        with patch("tools.reek.environment.shutil.which", return_value=None):
            self.assertIsNone(RubyGemEnvironment.from_path())
        with patch("tools.reek.environment.shutil.which", return_value="/usr/bin/ruby"):
            self.assertEqual("/usr/bin/ruby", RubyGemEnvironment.from_path().ruby_bin)


if __name__ == "__main__":
    unittest.main()
