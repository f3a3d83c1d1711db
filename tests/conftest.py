"""
pytest configuration and fixtures
"""

import pytest
import tempfile
from pathlib import Path

from arc_jobs.core.components import JobSpec, JuliaCommand, ResourceSpec


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests"""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir).resolve()


@pytest.fixture
def project_dir(temp_dir):
    """Project directory that does not exist yet"""
    return temp_dir / "proj"


@pytest.fixture
def job_spec():
    """Job spec used across generator tests"""
    return JobSpec(
        resources=ResourceSpec(walltime="00:05:00", select=2, ncpus=3),
        modules=["m1", "m2"],
        account="acct",
        jobname="job1",
    )


@pytest.fixture
def julia_command(project_dir):
    """Julia command running ./run.jl in the test project"""
    return JuliaCommand(
        bindir="/opt/rt/bin",
        threads=3,
        project=str(project_dir),
        script="./run.jl",
        args=["Alice", "Bob"],
    )


@pytest.fixture
def sample_def_content(project_dir):
    """Sample .def file content for tests"""
    return f"""[pbs]
account = test_account
jobname = test-job
walltime = 00:05:00
select = 2
ncpus = 3
mem = 5
modules = gcc/9.1.0, git/2.21.0
    python/3.7.3

[runtime]
bindir = /opt/julia/bin
project = {project_dir}
script = ./scripts/test_script.jl
args = Alice "Bob Smith" Carol
secrets = JL_SECRET_VAL1, JL_SECRET_VAL2

[env]
JL_SECRET_VAL1 = SECRET1
JL_SECRET_VAL2 = SECRET2
JL_PUBLIC_VAL = PUBLIC

[flags]
check-bounds = no
inline
"""


@pytest.fixture
def sample_def_file(temp_dir, sample_def_content):
    """Create a sample .def file for tests"""
    def_file = temp_dir / "test.def"
    with open(def_file, "w") as f:
        f.write(sample_def_content)
    return def_file
