#!/usr/bin/env python3
"""
Command line entry point: build a PBS job script from a .def file

Usage:
    arc-qsub job.def                       # write the script, print qsub command
    arc-qsub job.def --stage-to /scratch/me/run1 --submit
    arc-qsub job.def --submit --dry-run
"""

import argparse
from typing import Optional, Sequence

from .core import ConfigParser, FileManager, PBSJob


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="arc-qsub", description="Generate and submit PBS jobs for Julia scripts"
    )

    parser.add_argument("def_file",
                       help="Job definition (.def) file")
    parser.add_argument("--stage-to", dest="stage_to",
                       help="Copy the project here first and run from the copy")
    parser.add_argument("--submit", action="store_true",
                       help="Submit the job after writing the script")
    parser.add_argument("--dry-run", action="store_true",
                       help="With --submit, print the submit command only")
    parser.add_argument("--summary", action="store_true",
                       help="Print the parsed configuration")

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point"""
    args = build_parser().parse_args(argv)

    config = ConfigParser(args.def_file)
    if args.summary:
        config.print_config_summary()

    job_spec = config.build_job_spec()

    project = None
    if args.stage_to:
        source = config.get_runtime_config()["project"]
        project = FileManager.copy_project(source, dest=args.stage_to)
        print(f"Project staged at: {project}")

    command = config.build_command(job_spec=job_spec, project=project)

    job = PBSJob(job_spec, command)
    job_info = job.generate_job()

    print(f"Job script written: {job_info['script_path']}")
    print(f"Environment log: {job_info['env_log']}")

    if args.submit:
        job.submit(dry_run=args.dry_run)
    else:
        print(f"Submit with: {' '.join(job.submit_command())}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
