#!/usr/bin/env python3
"""
src/arc_jobs/core/config_parser.py

Configuration file parser for .def files
Uses Python's built-in configparser for robust .ini-style file handling
"""

import configparser
import re
import shlex
from pathlib import Path
from typing import Callable, Dict, List, Optional, Type

from .components import JobSpec, JuliaCommand, ResourceSpec, RuntimeCommand
from .locator import find_runtime_bindir


class ConfigParser:
    """Parser for .def job definition files"""

    INT_RESOURCES = ("select", "ncpus", "ngpus", "mpiprocs", "ompthreads", "mem", "gpu_mem")

    def __init__(self, def_file_path: str):
        """
        Initialize parser with .def file path

        Args:
            def_file_path: Path to the .def configuration file

        Raises:
            FileNotFoundError: If .def file doesn't exist
            ValueError: If required sections are missing
        """
        self.def_file_path = Path(def_file_path).resolve()

        if not self.def_file_path.exists():
            raise FileNotFoundError(f"Definition file not found: {self.def_file_path}")

        self.config = configparser.ConfigParser(interpolation=None, allow_no_value=True)
        # Environment variable names are case sensitive
        self.config.optionxform = str
        self.config.read(str(self.def_file_path))

        # Validate required sections exist
        self.validate_required_sections()

    def validate_required_sections(self):
        """Validate that required sections exist in the .def file"""
        required_sections = ["pbs", "runtime"]
        missing_sections = [
            sec for sec in required_sections if not self.config.has_section(sec)
        ]

        if missing_sections:
            raise ValueError(
                f"Missing required sections in {self.def_file_path}: {missing_sections}"
            )

    def validate_required_params(self):
        """Validate that essential parameters exist"""
        pbs_config = self.get_pbs_config()
        runtime_config = self.get_runtime_config()

        required_pbs = ["account", "jobname"]
        missing_pbs = [param for param in required_pbs if not pbs_config.get(param)]

        required_runtime = ["project", "script"]
        missing_runtime = [
            param for param in required_runtime if not runtime_config.get(param)
        ]

        errors = []
        if missing_pbs:
            errors.append(f"Missing required [pbs] parameters: {missing_pbs}")
        if missing_runtime:
            errors.append(f"Missing required [runtime] parameters: {missing_runtime}")

        if errors:
            raise ValueError(". ".join(errors))

    def get_pbs_config(self) -> Dict[str, Optional[str]]:
        """Get parameters from [pbs] section"""
        return dict(self.config["pbs"])

    def get_runtime_config(self) -> Dict[str, Optional[str]]:
        """Get parameters from [runtime] section"""
        return dict(self.config["runtime"])

    def get_env(self) -> Dict[str, str]:
        """Get environment variables from [env] section, file order kept"""
        if self.config.has_section("env"):
            return {k: v or "" for k, v in self.config["env"].items()}
        return {}

    def get_flags(self) -> Dict[str, Optional[str]]:
        """Get runtime flags from [flags] section; bare keys are switches"""
        if self.config.has_section("flags"):
            return {k: (v if v else None) for k, v in self.config["flags"].items()}
        return {}

    @staticmethod
    def split_list(value: Optional[str]) -> List[str]:
        """Split a comma or newline separated value"""
        if not value:
            return []
        return [item.strip() for item in re.split(r"[,\n]", value) if item.strip()]

    def _get_int(self, section: str, key: str) -> Optional[int]:
        value = self.config[section].get(key)
        if value is None or value.strip() == "":
            return None
        try:
            return int(value)
        except ValueError:
            raise ValueError(f"[{section}] {key} must be an integer, got '{value}'")

    def _get_bool(self, section: str, key: str) -> Optional[bool]:
        value = self.config[section].get(key)
        if value is None or value.strip() == "":
            return None
        try:
            return self.config.getboolean(section, key)
        except ValueError:
            raise ValueError(f"[{section}] {key} must be a boolean, got '{value}'")

    def build_resources(self) -> ResourceSpec:
        """Build the resource request from [pbs]"""
        walltime = self.config["pbs"].get("walltime") or None
        ints = {key: self._get_int("pbs", key) for key in self.INT_RESOURCES}
        return ResourceSpec(walltime=walltime, **ints)

    def build_job_spec(self) -> JobSpec:
        """Build job metadata from [pbs]"""
        self.validate_required_params()
        pbs_config = self.get_pbs_config()

        return JobSpec(
            resources=self.build_resources(),
            modules=self.split_list(pbs_config.get("modules")),
            account=pbs_config["account"],
            jobname=pbs_config["jobname"],
            stdout=pbs_config.get("stdout") or "",
            stderr=pbs_config.get("stderr") or "",
            interactive=bool(self._get_bool("pbs", "interactive")),
            x11_forwarding=self._get_bool("pbs", "x11_forwarding"),
        )

    def build_command(
        self,
        job_spec: Optional[JobSpec] = None,
        command_class: Type[RuntimeCommand] = JuliaCommand,
        bindir_resolver: Optional[Callable[[str], str]] = None,
        project: Optional[str] = None,
    ) -> RuntimeCommand:
        """
        Build the runtime command from [runtime], [env] and [flags]

        Args:
            job_spec: Job whose thread count is used when [runtime] has none
            command_class: Runtime command type to build
            bindir_resolver: Called with the executable name when no bindir
                is configured. Defaults to a PATH lookup.
            project: Overrides the configured project directory

        Returns:
            RuntimeCommand instance
        """
        self.validate_required_params()
        runtime_config = self.get_runtime_config()

        bindir = runtime_config.get("bindir")
        if not bindir:
            resolver = bindir_resolver or find_runtime_bindir
            bindir = resolver(command_class.executable_name)

        threads = self._get_int("runtime", "threads")
        if threads is None:
            resources = job_spec.resources if job_spec else self.build_resources()
            threads = 1 if resources.ompthreads is None else resources.ompthreads

        return command_class(
            bindir=bindir,
            threads=threads,
            project=project or runtime_config["project"],
            script=runtime_config["script"],
            args=shlex.split(runtime_config.get("args") or ""),
            flags=self.get_flags(),
            env=self.get_env(),
            secrets=self.split_list(runtime_config.get("secrets")),
        )

    def get_all_sections(self) -> list:
        """Get list of all sections in the .def file"""
        return list(self.config.sections())

    def print_config_summary(self):
        """Print a summary of the parsed configuration"""
        print(f"Configuration file: {self.def_file_path}")
        print(f"Sections found: {self.get_all_sections()}")
        print("\n[pbs] configuration:")
        for key, value in self.get_pbs_config().items():
            print(f"  {key} = {value}")
        print("\n[runtime] parameters:")
        for key, value in self.get_runtime_config().items():
            print(f"  {key} = {value}")

        secrets = set(self.split_list(self.get_runtime_config().get("secrets")))
        env = self.get_env()
        if env:
            print("\n[env] variables:")
            for key, value in env.items():
                shown = "****" if key in secrets else value
                print(f"  {key} = {shown}")
