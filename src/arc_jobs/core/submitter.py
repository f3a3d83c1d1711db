#!/usr/bin/env python3
"""
src/arc_jobs/core/submitter.py

Hands generated job scripts to the PBS submit executable
"""

import subprocess
from typing import List, Optional


class Submitter:
    """
    Builds and runs the scheduler submit command for a job script

    Submission is fire-and-forget: the scheduler's output is returned
    untouched and nothing is retried.
    """

    def __init__(self, submit_executable: str = "qsub"):
        """
        Initialize submitter

        Args:
            submit_executable: Scheduler submit command (e.g. 'qsub')
        """
        self.submit_executable = submit_executable

    def build_command(self, script_path: str) -> List[str]:
        """Argument vector that submits ``script_path``"""
        return [self.submit_executable, str(script_path)]

    def submit(
        self, script_path: str, dry_run: bool = False
    ) -> Optional[subprocess.CompletedProcess]:
        """
        Submit a job script

        Args:
            script_path: Path of the written job script
            dry_run: If True, only print the command

        Returns:
            Completed process of the submit command, or None on a dry run

        Raises:
            subprocess.CalledProcessError: If the submit command fails
        """
        cmd = self.build_command(script_path)

        print(f"Submitting {script_path}...")
        print(f"  Command: {' '.join(cmd)}")

        if dry_run:
            return None

        result = subprocess.run(cmd, capture_output=True, text=True, check=True)
        if result.stdout.strip():
            print(f"  {result.stdout.strip()}")

        return result
