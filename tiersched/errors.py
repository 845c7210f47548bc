class SimulationError(Exception):
    pass


class ConfigurationError(SimulationError):
    pass


class PartitionMisconfiguration(ConfigurationError):
    def __init__(self, core_count, high, medium, low):
        self.core_count = core_count
        self.reserved = (high, medium, low)
        super().__init__("reserved cores {}/{}/{} (sum {}) do not match core count {}".format(
            high, medium, low, high + medium + low, core_count))


class WorkloadError(SimulationError):
    pass


class MalformedWorkloadRecord(WorkloadError):
    def __init__(self, message, lineno=None, line=None):
        self.lineno = lineno
        self.line = line
        if lineno is not None:
            message = "line {}: {} ({!r})".format(lineno, message, line)
        super().__init__(message)


class InvalidPriority(WorkloadError):
    def __init__(self, value, pid=None):
        self.value = value
        self.pid = pid
        if pid is None:
            super().__init__("invalid priority {!r}".format(value))
        else:
            super().__init__("process {}: invalid priority {!r}".format(pid, value))


class InvariantViolation(SimulationError):
    def __init__(self, message, pid=None, tick=None, phase=None):
        self.pid = pid
        self.tick = tick
        self.phase = phase
        super().__init__("tick {} ({}): process {}: {}".format(tick, phase, pid, message))


class TickLimitExceeded(SimulationError):
    def __init__(self, limit):
        self.limit = limit
        super().__init__("run did not terminate within {} ticks".format(limit))


class UnknownProcess(SimulationError, KeyError):
    def __init__(self, pid):
        self.pid = pid
        super().__init__("no process with id {}".format(pid))

    def __str__(self):
        return self.args[0]
