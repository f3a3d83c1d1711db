"""
ARC Jobs

A Python package for generating and submitting PBS job scripts that run
Julia scripts on an HPC cluster.
"""

__version__ = "0.1.0"

from .core import (
    ConfigParser, JobSpec, JuliaCommand, PBSJob, ResourceSpec, Submitter, qsub
)

__all__ = [
    "ConfigParser", "JobSpec", "JuliaCommand", "PBSJob", "ResourceSpec",
    "Submitter", "qsub"
]
