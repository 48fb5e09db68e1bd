"""Environment-driven settings, read at call time."""

import os
import shlex

COMMAND_ENV = "ASSERT_CLI_COMMAND"
VERBOSE_ENV = "ASSERT_CLI_VERBOSE"

DEFAULT_COMMAND = ["cargo", "run", "--"]


def main_command() -> list[str]:
    """Resolve the command that runs the project's primary binary.

    Order: ASSERT_CLI_COMMAND env → cargo run --.
    """
    env_cmd = os.environ.get(COMMAND_ENV)
    if env_cmd:
        return shlex.split(env_cmd)
    return list(DEFAULT_COMMAND)


def cargo_command(name: str) -> list[str]:
    return ["cargo", "run", "--bin", name, "--"]


def verbose() -> bool:
    return os.environ.get(VERBOSE_ENV, "").lower() in ("1", "true", "yes")
