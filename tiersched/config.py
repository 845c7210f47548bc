from tiersched.errors import ConfigurationError, PartitionMisconfiguration

CORECOUNT = 16  # cores in the pool
RRTIME = 40  # round robin quantum in ms, keep below CPUMAX or RR turns into FCFS
MAXTICKS = 100000  # hard ceiling on ticks per run

# workload generator bounds, upper bounds are exclusive
PROCMIN = 50
PROCMAX = 100
PIDMIN = 30
BURSTMIN = 1
BURSTMAX = 8
CPUMIN = 30
CPUMAX = 60
IOMIN = 5
IOMAX = 10

RUNCOUNT = 100


class SchedulerConfig:
    def __init__(self, core_count=CORECOUNT, quantum=RRTIME, high_reserved=None, medium_reserved=None,
                 low_reserved=None, max_ticks=MAXTICKS, check_invariants=True):
        if core_count <= 0:
            raise ConfigurationError("core count must be positive, got {}".format(core_count))
        if quantum <= 0:
            raise ConfigurationError("quantum must be positive, got {}".format(quantum))
        if max_ticks is not None and max_ticks <= 0:
            raise ConfigurationError("tick ceiling must be positive, got {}".format(max_ticks))

        if high_reserved is None and medium_reserved is None and low_reserved is None:
            high_reserved, medium_reserved, low_reserved = split_cores(core_count)
        if None in (high_reserved, medium_reserved, low_reserved):
            raise ConfigurationError("either all or none of the reserved core counts must be given")
        if min(high_reserved, medium_reserved, low_reserved) < 0 or \
                high_reserved + medium_reserved + low_reserved != core_count:
            raise PartitionMisconfiguration(core_count, high_reserved, medium_reserved, low_reserved)

        self.core_count = core_count
        self.quantum = quantum
        self.high_reserved = high_reserved
        self.medium_reserved = medium_reserved
        self.low_reserved = low_reserved
        self.max_ticks = max_ticks
        self.check_invariants = check_invariants

    @classmethod
    def split(cls, core_count, quantum=RRTIME, **kwargs):
        high, medium, low = split_cores(core_count)
        return cls(core_count, quantum, high, medium, low, **kwargs)

    @property
    def reserved(self):
        return self.high_reserved, self.medium_reserved, self.low_reserved

    def __repr__(self):
        return "SchedulerConfig(core_count={}, quantum={}, reserved={}/{}/{})".format(
            self.core_count, self.quantum, self.high_reserved, self.medium_reserved, self.low_reserved)


# Half of the cores for High, a third for Medium, the remainder for Low.
def split_cores(core_count):
    high = core_count // 2
    medium = core_count // 3
    return high, medium, core_count - high - medium
