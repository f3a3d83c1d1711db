"""
PBS job composed from a job spec and a runtime command

PBSJob wires the components together:
FileManager (paths) -> ScriptGenerator (render + write) -> Submitter (qsub)
"""

from typing import Any, Dict, List, Optional

from .components import FileManager, JobSpec, RuntimeCommand, ScriptGenerator
from .submitter import Submitter


class PBSJob:
    """
    One PBS job running one runtime script
    Uses composition for clean separation of concerns
    """

    def __init__(
        self,
        job_spec: JobSpec,
        command: RuntimeCommand,
        submitter: Optional[Submitter] = None,
    ) -> None:
        """Initialize job with composition components"""
        self.job_spec = job_spec
        self.command = command

        # Composition components
        self.file_manager = FileManager(
            command.project, command.script, command.script_suffix
        )
        self.script_generator = ScriptGenerator(job_spec, command, self.file_manager)
        self.submitter = submitter or Submitter()

        self.script_path: Optional[str] = None

    def generate_job(self) -> Dict[str, Any]:
        """Write the job script and describe the generated job"""
        self.script_path = self.script_generator.write()

        return {
            "type": "pbs",
            "job_name": self.job_spec.jobname,
            "script_path": self.script_path,
            "stdout": self.job_spec.stdout,
            "stderr": self.job_spec.stderr,
            "env_log": self.file_manager.log_path("env.toml"),
            "interactive": self.job_spec.interactive,
        }

    def submit_command(self) -> List[str]:
        """Submit command for the written script"""
        if self.script_path is None:
            raise RuntimeError("No job script written. Call generate_job() first.")
        return self.submitter.build_command(self.script_path)

    def submit(self, dry_run: bool = False):
        """Generate the script if needed, then submit it"""
        if self.script_path is None:
            self.generate_job()
        return self.submitter.submit(self.script_path, dry_run=dry_run)


def qsub(
    job_spec: JobSpec, command: RuntimeCommand, submitter: Optional[Submitter] = None
) -> List[str]:
    """Write the job script and return the command that submits it"""
    job = PBSJob(job_spec, command, submitter)
    job.generate_job()
    return job.submit_command()
