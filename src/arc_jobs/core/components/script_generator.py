"""
Composition classes for PBS job script generation

These classes handle specific aspects of job creation:
- ScriptGenerator: Creates PBS scripts from components
"""

from .command_builder import RuntimeCommand
from .file_manager import FileManager
from .job_spec import JobSpec


class ScriptGenerator:
    """Generates PBS scripts from components"""

    # Base PBS script template
    PBS_TEMPLATE = """{header}
{body}"""

    def __init__(
        self, job_spec: JobSpec, command: RuntimeCommand, file_manager: FileManager
    ) -> None:
        self.job_spec = job_spec
        self.command = command
        self.file_manager = file_manager

    def prepare(self) -> None:
        """Validate inputs and fill in defaults before rendering"""
        # Fails before anything touches the filesystem
        if self.job_spec.resources.is_empty():
            raise ValueError("Resource list is empty: at least one resource must be set")
        self.command.validate_script()
        self.file_manager.basename()

        # Standard output/standard error log files
        if not self.job_spec.stdout:
            self.job_spec.stdout = self.file_manager.artifact_path("stdout.txt")
        if not self.job_spec.stderr:
            self.job_spec.stderr = self.file_manager.artifact_path("stderr.txt")

        resources = self.job_spec.resources
        if resources.ompthreads is None:
            resources.ompthreads = self.command.threads

        self.command.apply_defaults(interactive=self.job_spec.interactive)

    def generate_script(self) -> str:
        """Generate complete PBS script"""
        envfile = self.file_manager.artifact_path("env.toml")

        return self.PBS_TEMPLATE.format(
            header=self.job_spec.pbs_header(),
            body=self.command.bash_commands(envfile),
        )

    def write(self) -> str:
        """Prepare, render and write the job script; returns its path"""
        self.prepare()
        script = self.generate_script()

        # Directories are only created once rendering succeeded
        self.file_manager.ensure_project_dir()
        return self.file_manager.write_script(script)
