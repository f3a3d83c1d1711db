#!/usr/bin/env python3
"""
Node list reader for running PBS jobs

Reads the hosts PBS assigned to the job so a distributed runtime can start
its workers on them. Meant to run inside the job, not at submission time.

Usage:
    python node_list.py                      # hosts from $PBS_NODEFILE
    python node_list.py --nodefile nodes.txt --unique
"""

import argparse
import os
from pathlib import Path
from typing import List, Optional, Sequence


def read_node_list(nodefile: Optional[str] = None) -> List[str]:
    """
    Read assigned hostnames in file order

    PBS lists a host once per allocated CPU, so duplicates are kept.

    Args:
        nodefile: Path to the node file. Defaults to $PBS_NODEFILE.

    Returns:
        Hostnames, one per non-empty line

    Raises:
        RuntimeError: If no node file is given and PBS_NODEFILE is not set
        FileNotFoundError: If the node file does not exist
    """
    if nodefile is None:
        nodefile = os.environ.get("PBS_NODEFILE")
        if not nodefile:
            raise RuntimeError("PBS_NODEFILE not set. This should be run inside a PBS job.")

    path = Path(nodefile)
    if not path.exists():
        raise FileNotFoundError(f"Node file not found: {path}")

    with open(path, "r") as f:
        return [line.strip() for line in f if line.strip()]


def unique_hosts(nodes: Sequence[str]) -> List[str]:
    """Distinct hostnames, first-seen order"""
    return list(dict.fromkeys(nodes))


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point"""
    parser = argparse.ArgumentParser(description="List the nodes assigned to a PBS job")

    parser.add_argument("--nodefile",
                       help="Node file (default: $PBS_NODEFILE)")
    parser.add_argument("--unique", action="store_true",
                       help="Print each host once")

    args = parser.parse_args(argv)

    try:
        nodes = read_node_list(args.nodefile)
    except (RuntimeError, FileNotFoundError) as e:
        print(f"ERROR: {e}")
        return 1

    if args.unique:
        nodes = unique_hosts(nodes)

    for node in nodes:
        print(node)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
