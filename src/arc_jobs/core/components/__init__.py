"""
Core composition components for PBS job generation
"""

from .resource_config import ResourceSpec
from .job_spec import JobSpec
from .command_builder import RuntimeCommand, JuliaCommand
from .file_manager import FileManager
from .script_generator import ScriptGenerator

__all__ = [
    "ResourceSpec",
    "JobSpec",
    "RuntimeCommand",
    "JuliaCommand",
    "FileManager",
    "ScriptGenerator"
]
