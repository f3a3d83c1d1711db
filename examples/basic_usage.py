#!/usr/bin/env python3
"""
Basic usage example for arc-jobs
"""

import tempfile
from pathlib import Path

from arc_jobs import JobSpec, JuliaCommand, PBSJob, ResourceSpec


def main():
    project = Path(tempfile.mkdtemp(prefix="TestProj_"))

    job_spec = JobSpec(
        resources=ResourceSpec(walltime="00:05:00", select=2, ncpus=3, mem=5),
        modules=["gcc/9.1.0", "git/2.21.0"],
        account="st-alloc-1",
        jobname="test-job",
    )
    command = JuliaCommand(
        bindir="/opt/julia/bin",
        threads=job_spec.resources.ompthreads,
        project=str(project),
        script="./scripts/test_script.jl",
        args=["Alice", "Bob", "Carol"],
        env={"JL_SECRET_VAL1": "SECRET1", "JL_PUBLIC_VAL": "PUBLIC"},
        secrets=["JL_SECRET_VAL1"],
    )

    job = PBSJob(job_spec, command)
    job_info = job.generate_job()

    print(f"Generated {job_info['job_name']}: {job_info['script_path']}")
    print(Path(job_info["script_path"]).read_text())

    # Prints the qsub command without running it
    job.submit(dry_run=True)


if __name__ == "__main__":
    main()
