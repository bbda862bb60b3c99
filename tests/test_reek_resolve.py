import unittest
from typing import Optional

from reek_runner.domain import (
    CommandContext,
    EnvironmentUnavailable,
    InterpreterHomeUndefined,
    RunConfiguration,
    ToolNotFound,
)
from tools.reek.resolve import ReekCommandResolver, resolve_command


class FakeEnvironment:
    def __init__(self, script: Optional[str] = "/gems/bin/reek", home: Optional[str] = "/usr/bin/ruby") -> None:
        self.name = "ruby-3.3.0"
        self.script = script
        self.home = home
        self.lookups = []

    def script_path(self, tool, module=None):
        self.lookups.append((tool, module))
        return self.script

    def home_path(self):
        return self.home


class TestReekResolve(unittest.TestCase):
    def test_explicit_executable_wins(self) -> None:
        cfg = RunConfiguration(explicit_executable_path="/opt/reek")
        for env in (None, FakeEnvironment(), FakeEnvironment(script=None, home=None)):
            self.assertEqual(CommandContext("/opt/reek", None), resolve_command(cfg, env))

    def test_explicit_executable_skips_lookup(self) -> None:
        env = FakeEnvironment()
        resolve_command(RunConfiguration(explicit_executable_path="/opt/reek"), env)
        self.assertEqual([], env.lookups)

    def test_no_environment(self) -> None:
        with self.assertRaises(EnvironmentUnavailable):
            resolve_command(RunConfiguration(explicit_executable_path=""), None)

    def test_tool_not_found_logs_environment_name(self) -> None:
        with self.assertLogs("tools.reek.resolve", level="ERROR") as cm:
            with self.assertRaises(ToolNotFound):
                resolve_command(RunConfiguration(), FakeEnvironment(script=None))
        self.assertIn("ruby-3.3.0", "\n".join(cm.output))

    def test_interpreter_home_undefined(self) -> None:
        with self.assertRaises(InterpreterHomeUndefined):
            resolve_command(RunConfiguration(), FakeEnvironment(home=None))

    def test_inferred_command(self) -> None:
        env = FakeEnvironment()
        ctx = ReekCommandResolver(module="/proj").resolve(RunConfiguration(), env)
        self.assertEqual(CommandContext("/gems/bin/reek", "/usr/bin/ruby"), ctx)
        self.assertEqual([("reek", "/proj")], env.lookups)


if __name__ == "__main__":
    unittest.main()
