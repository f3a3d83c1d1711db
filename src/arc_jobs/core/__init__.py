"""
Core components for PBS job generation
"""

from .components import (
    ResourceSpec, JobSpec, RuntimeCommand, JuliaCommand, FileManager, ScriptGenerator
)
from .submitter import Submitter
from .pbs_job import PBSJob, qsub
from .locator import find_runtime_bindir
from .config_parser import ConfigParser

__all__ = [
    "ResourceSpec", "JobSpec", "RuntimeCommand", "JuliaCommand",
    "FileManager", "ScriptGenerator",
    "Submitter", "PBSJob", "qsub", "find_runtime_bindir",
    "ConfigParser"
]
