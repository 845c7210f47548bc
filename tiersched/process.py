from enum import Enum

from tiersched.errors import InvalidPriority, MalformedWorkloadRecord, UnknownProcess


class Priority(Enum):
    HIGH = 1
    MEDIUM = 2
    LOW = 3

    @classmethod
    def parse(cls, value, pid=None):
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise InvalidPriority(value, pid) from None


class ProcessState(Enum):
    READY = "ready"
    WAITING = "waiting"  # on an I/O burst
    RUNNING = "running"
    FINISHED = "finished"


class Process:
    """One process control block.

    Bursts alternate CPU, I/O, CPU, ... so ``cpu_bursts`` always holds either
    as many entries as ``io_bursts`` or exactly one more. The head of each list
    is the burst currently being worked through and may be partially consumed.
    """

    def __init__(self, pid, priority, cpu_bursts, io_bursts, arrival=0):
        self.pid = pid
        self.priority = Priority.parse(priority, pid)
        self.arrival = arrival
        self.state = ProcessState.READY
        self.cpu_bursts = list(cpu_bursts)
        self.io_bursts = list(io_bursts)
        if not self.cpu_bursts or not 0 <= len(self.cpu_bursts) - len(self.io_bursts) <= 1:
            raise MalformedWorkloadRecord("process {}: bursts must alternate starting with CPU".format(pid))
        if any(b <= 0 for b in self.cpu_bursts + self.io_bursts):
            raise MalformedWorkloadRecord("process {}: burst lengths must be positive".format(pid))
        self.turnaround = 0
        self.wait = 0
        self.response = 0

    @classmethod
    def from_descriptor(cls, descriptor):
        bursts = list(descriptor.bursts)
        return cls(descriptor.pid, descriptor.priority, bursts[0::2], bursts[1::2], descriptor.arrival)

    # Copy of the remaining bursts with state and counters reset.
    def fresh(self):
        return Process(self.pid, self.priority, self.cpu_bursts, self.io_bursts, self.arrival)

    @property
    def is_finished(self):
        return not self.cpu_bursts and not self.io_bursts

    @property
    def remaining_bursts(self):
        return len(self.cpu_bursts) + len(self.io_bursts)

    def __repr__(self):
        return "Process({}, {}, {}, cpu={}, io={})".format(
            self.pid, self.priority.name, self.state.name, self.cpu_bursts, self.io_bursts)


class ProcessTable:
    """Id to record lookup for one run, kept in workload order."""

    def __init__(self, processes=()):
        self._records = {}
        for p in processes:
            self.add(p)

    def add(self, process):
        if process.pid in self._records:
            raise MalformedWorkloadRecord("duplicate process id {}".format(process.pid))
        self._records[process.pid] = process

    def __getitem__(self, pid):
        try:
            return self._records[pid]
        except KeyError:
            raise UnknownProcess(pid) from None

    def __contains__(self, pid):
        return pid in self._records

    def __iter__(self):
        return iter(self._records.values())

    def __len__(self):
        return len(self._records)

    def in_state(self, state):
        return [p for p in self._records.values() if p.state is state]
