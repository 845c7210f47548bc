import math
from collections import namedtuple

from tiersched.config import BURSTMAX, BURSTMIN, CPUMAX, CPUMIN, IOMAX, IOMIN, PIDMIN, PROCMAX, PROCMIN
from tiersched.errors import MalformedWorkloadRecord
from tiersched.process import Priority

# bursts alternate CPU, I/O, CPU, ... starting with CPU
ProcessDescriptor = namedtuple("ProcessDescriptor", ["pid", "arrival", "priority", "bursts"])


class Rand48(object):
    def __init__(self, seed):
        self.n = seed

    def srand(self, seed):
        self.n = (seed << 16) + 0x330e

    def next(self):
        self.n = (25214903917 * self.n + 11) & (2**48 - 1)
        return self.n

    def drand(self):
        return self.next() / 2**48

    # Uniform integer in [low, high)
    def randrange(self, low, high):
        return low + math.floor(self.drand() * (high - low))


def generate_workload(rand_obj, proc_min=PROCMIN, proc_max=PROCMAX, pid_min=PIDMIN, burst_min=BURSTMIN,
                      burst_max=BURSTMAX, cpu_min=CPUMIN, cpu_max=CPUMAX, io_min=IOMIN, io_max=IOMAX):
    workload = list()
    num_process = rand_obj.randrange(proc_min, proc_max)

    for i in range(num_process):
        priority = rand_obj.randrange(1, 4)
        num_burst = rand_obj.randrange(burst_min, burst_max)
        bursts = list()
        for j in range(num_burst):
            if j % 2:
                bursts.append(rand_obj.randrange(io_min, io_max))
            else:
                bursts.append(rand_obj.randrange(cpu_min, cpu_max))
        workload.append(ProcessDescriptor(i + pid_min, i, priority, tuple(bursts)))

    return workload


def format_line(descriptor):
    fields = [descriptor.pid, descriptor.arrival, descriptor.priority] + list(descriptor.bursts)
    return ", ".join(str(f) for f in fields)


def parse_line(line, lineno=None):
    """Parse ``pid, arrival, priority, burst, burst, ...``.

    A trailing separator is allowed. Priority codes are 1 (High), 2 (Medium)
    and 3 (Low).
    """
    fields = [f.strip() for f in line.strip().split(",")]
    if fields and fields[-1] == "":
        fields.pop()
    if len(fields) < 4:
        raise MalformedWorkloadRecord("expected pid, arrival, priority and at least one burst", lineno, line)

    values = list()
    for f in fields:
        try:
            values.append(int(f))
        except ValueError:
            raise MalformedWorkloadRecord("field {!r} is not an integer".format(f), lineno, line) from None

    pid, arrival, priority = values[:3]
    bursts = tuple(values[3:])
    if arrival < 0:
        raise MalformedWorkloadRecord("negative arrival index", lineno, line)
    if min(bursts) <= 0:
        raise MalformedWorkloadRecord("burst lengths must be positive", lineno, line)
    Priority.parse(priority, pid)

    return ProcessDescriptor(pid, arrival, priority, bursts)


def read_workload(lines):
    workload = list()
    for lineno, line in enumerate(lines, 1):
        if line.strip() == "":
            continue
        workload.append(parse_line(line, lineno))
    return workload


def load_workload(path):
    with open(path) as f:
        return read_workload(f)


def dump_workload(workload, path):
    with open(path, "w") as f:
        for descriptor in workload:
            f.write(format_line(descriptor) + "\n")
