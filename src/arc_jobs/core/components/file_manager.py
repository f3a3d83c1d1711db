"""
Composition classes for PBS job script generation

These classes handle specific aspects of job creation:
- FileManager: Handles file operations and naming
"""

import shutil
import tempfile
from pathlib import Path
from typing import Optional, Sequence


class FileManager:
    """Handles file operations and naming conventions"""

    LOG_KINDS = ("stdout.txt", "stderr.txt", "env.toml", "job.pbs")

    def __init__(self, project: str, script: str, suffix: str) -> None:
        if not suffix:
            raise ValueError("Script suffix must not be empty")

        self.project = Path(project)
        self.script = str(script)
        self.suffix = suffix
        self.logs_dir = self.project / "pbs"

    def basename(self) -> str:
        """Script file name without the runtime suffix"""
        if not self.script.endswith(self.suffix):
            raise ValueError(f"Script '{self.script}' must end with '{self.suffix}'")
        return Path(self.script).name[: -len(self.suffix)]

    def artifact_path(self, kind: str) -> str:
        """Path of a job artifact, e.g. <project>/pbs/<basename>_stdout.txt"""
        if kind not in self.LOG_KINDS:
            raise ValueError(f"Unknown log kind '{kind}'. Available: {list(self.LOG_KINDS)}")

        return str(self.logs_dir / f"{self.basename()}_{kind}")

    def log_path(self, kind: str) -> str:
        """Artifact path with the log directory created"""
        path = self.artifact_path(kind)
        self.logs_dir.mkdir(parents=True, exist_ok=True)
        return path

    def ensure_project_dir(self) -> str:
        """Create the project working directory if absent"""
        self.project.mkdir(parents=True, exist_ok=True)
        return str(self.project)

    def write_script(self, content: str) -> str:
        """Write job script to file and make executable"""
        script_path = Path(self.log_path("job.pbs"))

        with open(script_path, "w") as f:
            f.write(content)

        script_path.chmod(0o755)
        return str(script_path)

    @staticmethod
    def copy_project(
        project: str,
        folders: Sequence[str] = ("src", "scripts"),
        dest: Optional[str] = None,
    ) -> str:
        """
        Stage a project into a fresh directory

        Copies the project and manifest files plus the given folders, skipping
        any that do not exist. Symlinks are followed.

        Args:
            project: Source project directory
            folders: Folders to copy alongside the manifest files
            dest: Destination directory. If None, a new temporary directory.

        Returns:
            Path to the staged project

        Raises:
            FileNotFoundError: If the project directory does not exist
            FileExistsError: If a copied entry already exists in ``dest``
        """
        source = Path(project)
        if not source.is_dir():
            raise FileNotFoundError(f"Project directory not found: {source}")

        if dest is None:
            dest = tempfile.mkdtemp(prefix=f"{source.name}_")
        target_root = Path(dest)
        target_root.mkdir(parents=True, exist_ok=True)

        entries = [source / "Project.toml", source / "Manifest.toml"]
        entries += [source / folder for folder in folders]

        for entry in entries:
            if not entry.exists():
                continue

            target = target_root / entry.name
            if target.exists():
                raise FileExistsError(f"Refusing to overwrite: {target}")

            if entry.is_dir():
                shutil.copytree(entry, target, symlinks=False)
            else:
                shutil.copy2(entry, target)

        return str(target_root)
