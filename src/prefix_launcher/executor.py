# Prefix Launcher — Rofi Prefix Command Launcher
# Copyright (c) 2025
# TriFactoria (Andrew Blankfield)
#
# Licensed under the Business Source License 1.1 (BSL 1.1).
# You may use, modify, and redistribute this file under the terms of the BSL.
# On the Change Date (2029-01-01), this file will be licensed under
# the Apache License, Version 2.0.

"""
Subprocess-backed executor implementation.

Every external program the launcher touches (menu picker, query prompt,
target command, workspace switcher) goes through run(). It blocks until
the process exits and never raises: failures come back as a non-zero
exit code with a message on stderr.
"""

from __future__ import annotations

import subprocess
from datetime import datetime


class SubprocessExecutor:
    """Subprocess implementation of Executor protocol."""

    def __init__(
        self, timeout: float | None = None, shell: str | None = None
    ):
        """Initialize executor with configuration.

        Args:
            timeout: Command timeout in seconds (default: none, wait
                until the command exits)
            shell: Shell executable (default: /bin/sh)
        """
        self.timeout = timeout
        self.shell = shell

    def run(
        self, command: str, input_text: str | None = None
    ) -> tuple[int, str, str, str, int]:
        """Run a shell command and return buffered results.

        Args:
            command: shell command to execute
            input_text: text written to the command's stdin

        Returns:
            (exit_code, stdout, stderr, started_at, duration_ms)
        """
        started_at = datetime.now().isoformat()
        start_time = datetime.now()

        try:
            result = subprocess.run(
                command,
                shell=True,
                executable=self.shell,
                input=input_text,
                capture_output=True,
                text=True,
                timeout=self.timeout,
            )
            duration_ms = int(
                (datetime.now() - start_time).total_seconds() * 1000
            )
            exit_code = (
                1 if result.returncode == 127 else result.returncode
            )
            return (
                exit_code, result.stdout, result.stderr,
                started_at, duration_ms
            )
        except subprocess.TimeoutExpired:
            duration_ms = int(
                (datetime.now() - start_time).total_seconds() * 1000
            )
            return (
                1, "",
                f"Command timed out after {self.timeout} seconds",
                started_at, duration_ms
            )
        except Exception as e:
            duration_ms = int(
                (datetime.now() - start_time).total_seconds() * 1000
            )
            return (
                1, "", f"Error executing command: {e}",
                started_at, duration_ms
            )
