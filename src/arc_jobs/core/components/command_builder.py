"""
Composition classes for PBS job script generation

These classes handle specific aspects of job creation:
- RuntimeCommand: Builds the shell body that runs a runtime script
"""

import re
import shlex
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Sequence


class RuntimeCommand(ABC):
    """
    Builds runtime commands from parameters without string templates

    Subclasses describe a concrete runtime through the class attributes
    below; instances carry one invocation of a script.
    """

    @property
    @abstractmethod
    def executable_name(self) -> str:
        """Name of the runtime executable inside bindir"""

    @property
    @abstractmethod
    def script_suffix(self) -> str:
        """Suffix every script run by this runtime must have"""

    # Environment variables filled from bindir, project and threads
    bindir_var: str = ""
    project_var: str = ""
    threads_var: str = ""

    # Flags added when absent, name -> value (None for a bare switch)
    default_flags: Dict[str, Optional[str]] = {}
    interactive_flag: Optional[str] = None

    # Arguments that make the runtime print its environment as TOML
    env_dump_args: Sequence[str] = ()

    def __init__(
        self,
        bindir: str,
        threads: int,
        project: str,
        script: str,
        args: Sequence[str],
        flags: Optional[Dict[str, Optional[str]]] = None,
        env: Optional[Dict[str, str]] = None,
        secrets: Optional[Iterable[str]] = None,
    ) -> None:
        """
        Initialize runtime command

        Args:
            bindir: Directory containing the runtime executable
            threads: Number of runtime threads
            project: Working directory of the job
            script: Script path, relative to ``project`` or absolute
            args: Positional arguments passed to the script
            flags: Runtime flags, name -> value or None for a switch
            env: Environment variables exported before the run
            secrets: Names of ``env`` entries kept out of the environment log
        """
        self.bindir = str(bindir)
        self.threads = threads
        self.project = str(project)
        self.script = str(script)
        self.args = [str(arg) for arg in args]
        self.flags = dict(flags) if flags else {}
        self.env = dict(env) if env else {}
        self.secrets = list(dict.fromkeys(secrets)) if secrets else []

    def validate_script(self) -> None:
        """Check that the script has the runtime's suffix"""
        if not self.script.endswith(self.script_suffix):
            raise ValueError(
                f"Script '{self.script}' must end with '{self.script_suffix}'"
            )

    def apply_defaults(self, interactive: bool = False) -> "RuntimeCommand":
        """Fill missing environment variables and flags, keeping caller values"""
        self.env.setdefault(self.bindir_var, self.bindir)
        self.env.setdefault(self.project_var, self.project)
        self.env.setdefault(self.threads_var, str(self.threads))

        for name, value in self.default_flags.items():
            self.flags.setdefault(name, value)

        if interactive and self.interactive_flag:
            self.flags.setdefault(self.interactive_flag, None)

        return self

    @property
    def executable(self) -> str:
        """Full path of the runtime executable"""
        return str(Path(self.bindir) / self.executable_name)

    @staticmethod
    def format_flag(name: str, value: Optional[str]) -> str:
        """Render '--name' or '--name=value'; names starting with '-' are kept as is"""
        flag = name if name.startswith("-") else f"--{name}"
        if value is None:
            return flag
        return f"{flag}={value}"

    def build_flags(self) -> List[str]:
        """Render flags in insertion order"""
        return [self.format_flag(name, value) for name, value in self.flags.items()]

    def build_runtime(self) -> List[str]:
        """Executable followed by its flags"""
        return [self.executable] + self.build_flags()

    # Characters special to both POSIX ERE and Python regex
    ERE_SPECIAL = re.compile(r"([.^$*+?()\[\]{}|\\])")

    def redaction_pattern(self) -> Optional[str]:
        """Extended regex matching snapshot lines keyed by a secret name"""
        if not self.secrets:
            return None
        names = "|".join(self.ERE_SPECIAL.sub(r"\\\1", name) for name in self.secrets)
        return f"^({names}) *="

    def env_dump_command(self, envfile: str) -> str:
        """Pipeline that logs the job environment with secrets filtered out"""
        dump = " ".join(
            [shlex.quote(part) for part in self.build_runtime()]
            + [shlex.quote(part) for part in self.env_dump_args]
        )
        pipeline = [dump, "sort -h"]

        pattern = self.redaction_pattern()
        if pattern:
            pipeline.append(f"grep -Ev {shlex.quote(pattern)}")

        return f"{' | '.join(pipeline)} > {shlex.quote(envfile)}"

    def build_command(self) -> List[str]:
        """Build the runtime invocation as list of strings"""
        return self.build_runtime() + [self.script, "--"] + self.args

    @staticmethod
    def format_export(name: str, value) -> str:
        """Export line; values referencing variables are left for the shell to expand"""
        value = str(value)
        if "$" not in value:
            value = shlex.quote(value)
        return f"export {name}={value}"

    def export_lines(self) -> List[str]:
        """One export line per environment variable, insertion order kept"""
        return [self.format_export(name, value) for name, value in self.env.items()]

    def bash_commands(self, envfile: str) -> str:
        """Generate the shell body of the job script"""
        project = shlex.quote(self.project)
        lines = [
            "# Ensure project directory path exists",
            f"mkdir -p {project}",
            f"cd {project}",
            "",
            "# Set environment variables",
            *self.export_lines(),
            "",
            "# Log environment variables",
            self.env_dump_command(envfile),
            "",
            f"# Run {self.executable_name} script",
            " ".join(shlex.quote(part) for part in self.build_command()),
        ]
        return "\n".join(lines) + "\n"


class JuliaCommand(RuntimeCommand):
    """Runs a Julia script in a project environment"""

    executable_name = "julia"
    script_suffix = ".jl"

    bindir_var = "JULIA_BINDIR"
    project_var = "JULIA_PROJECT"
    threads_var = "JULIA_NUM_THREADS"

    default_flags = {
        "startup-file": "no",
        "history-file": "no",
        "optimize": None,
        "quiet": None,
    }
    interactive_flag = "-i"

    env_dump_args = ("-e", "using TOML; TOML.print(ENV)")
