"""
Composition classes for PBS job script generation

These classes handle specific aspects of job creation:
- ResourceSpec: Manages the PBS resource request (the ``-l`` list)
"""

import re
from typing import Optional


class ResourceSpec:
    """Requested compute resources for a PBS job"""

    # Order matters: PBS parses walltime and select positionally
    FIELDS = (
        "walltime",
        "select",
        "ncpus",
        "ngpus",
        "mpiprocs",
        "ompthreads",
        "mem",
        "gpu_mem",
    )

    # Memory fields are requested in gigabytes
    UNITS = {"mem": "gb", "gpu_mem": "gb"}

    WALLTIME_PATTERN = re.compile(r"\d{2,}:[0-5]\d:[0-5]\d")

    def __init__(
        self,
        walltime: Optional[str] = None,
        select: Optional[int] = None,
        ncpus: Optional[int] = None,
        ngpus: Optional[int] = None,
        mpiprocs: Optional[int] = None,
        ompthreads: Optional[int] = None,
        mem: Optional[int] = None,
        gpu_mem: Optional[int] = None,
    ) -> None:
        """
        Initialize resource request

        Args:
            walltime: Maximum run time as HH:MM:SS
            select: Number of chunks (nodes)
            ncpus: CPUs per chunk
            ngpus: GPUs per chunk
            mpiprocs: MPI processes per chunk
            ompthreads: OpenMP threads per chunk, defaults to ncpus
            mem: Memory per chunk in GB
            gpu_mem: GPU memory per chunk in GB

        Raises:
            ValueError: If a field has an invalid value
        """
        self.walltime = walltime
        self.select = select
        self.ncpus = ncpus
        self.ngpus = ngpus
        self.mpiprocs = mpiprocs
        self.ompthreads = ncpus if ompthreads is None else ompthreads
        self.mem = mem
        self.gpu_mem = gpu_mem

        self.validate()

    def validate(self) -> None:
        """Validate field values"""
        if self.walltime is not None and not self.WALLTIME_PATTERN.fullmatch(
            str(self.walltime)
        ):
            raise ValueError(
                f"Invalid walltime '{self.walltime}', expected HH:MM:SS"
            )

        for name in self.FIELDS[1:]:
            value = getattr(self, name)
            if value is None:
                continue
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"Resource '{name}' must be an integer, got {value!r}")
            if value < 0:
                raise ValueError(f"Resource '{name}' must be non-negative, got {value}")

        if self.select is not None and self.select < 1:
            raise ValueError(f"Resource 'select' must be positive, got {self.select}")

    def is_empty(self) -> bool:
        """True when no resource field is set"""
        return all(getattr(self, name) is None for name in self.FIELDS)

    def resource_string(self, name: str) -> str:
        """Render one field as name=value<unit><sep>, or '' if unset"""
        if name not in self.FIELDS:
            raise ValueError(f"Unknown resource '{name}'. Available: {list(self.FIELDS)}")

        value = getattr(self, name)
        if value is None:
            return ""

        unit = self.UNITS.get(name, "")
        sep = "," if name == "walltime" else ":"
        return f"{name}={value}{unit}{sep}"

    def resource_list(self) -> str:
        """Build the value of the '#PBS -l' directive"""
        r_list = "".join(self.resource_string(name) for name in self.FIELDS)

        if not r_list:
            raise ValueError("Resource list is empty: at least one resource must be set")

        # Remove trailing separator
        return r_list[:-1]

    def __repr__(self) -> str:
        fields = ", ".join(
            f"{name}={getattr(self, name)!r}"
            for name in self.FIELDS
            if getattr(self, name) is not None
        )
        return f"ResourceSpec({fields})"
