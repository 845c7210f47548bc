from tiersched.config import SchedulerConfig
from tiersched.errors import (
    ConfigurationError,
    InvalidPriority,
    InvariantViolation,
    MalformedWorkloadRecord,
    PartitionMisconfiguration,
    SimulationError,
    TickLimitExceeded,
    UnknownProcess,
    WorkloadError,
)
from tiersched.metrics import RunSummary, average, summarize
from tiersched.process import Priority, Process, ProcessState, ProcessTable
from tiersched.scheduler import Scheduler
from tiersched.workload import ProcessDescriptor, generate_workload, load_workload

__version__ = "1.0.0"
