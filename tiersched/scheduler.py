import logging

from tiersched.config import SchedulerConfig
from tiersched.cores import CorePool
from tiersched.errors import InvariantViolation, SimulationError, TickLimitExceeded, WorkloadError
from tiersched.process import Priority, Process, ProcessState, ProcessTable
from tiersched.queues import ReadyQueues, WaitQueue

logger = logging.getLogger(__name__)


class Scheduler:
    """Tiered round robin over a fixed pool of cores, one instance per run.

    Every tick applies one quantum in five phases: turnaround accrual, core
    service, response accrual, core assignment and I/O service. Processes are
    not pinned to a core between ticks, the only continuity is the FIFO order
    of their tier's ready queue.
    """

    def __init__(self, workload, config=None):
        if config is None:
            config = SchedulerConfig()
        self.config = config
        self.quantum = config.quantum

        # each run works on its own records, never the caller's
        self.table = ProcessTable(p.fresh() if isinstance(p, Process) else Process.from_descriptor(p)
                                  for p in workload)
        if len(self.table) == 0:
            raise WorkloadError("workload contains no processes")

        self.ready = ReadyQueues()
        self.waiting = WaitQueue()
        self.cores = CorePool(config)
        for p in self.table:
            self.ready.push(p)

        self.time = 0
        self.ticks = 0
        self.core_idle = 0
        self.cpu_idle = 0
        self.cpu_bursts = 0  # completed CPU bursts
        self.started = False
        self.done = False

        longest = max(max(p.cpu_bursts) for p in self.table)
        if self.quantum >= longest:
            logger.warning("quantum %dms covers the longest CPU burst (%dms); round robin degenerates to FCFS",
                           self.quantum, longest)

    def start(self):
        # Initial dispatch: processes wait in their ready queue before the first tick.
        if self.started:
            return
        self.started = True
        logger.debug("time 0ms: Simulator started with %d processes on %d cores", len(self.table), len(self.cores))
        self._accrue_response()
        self._assign_cores()

    def run(self):
        self.start()
        while not self.done:
            self.tick()
        logger.debug("time %dms: Simulator ended after %d ticks", self.time, self.ticks)
        return self.ticks

    def tick(self):
        if self.done:
            raise SimulationError("run already finished after {} ticks".format(self.ticks))
        self.start()

        self.ticks += 1
        if self.config.max_ticks is not None and self.ticks > self.config.max_ticks:
            raise TickLimitExceeded(self.config.max_ticks)

        self._accrue_turnaround()
        cpu_used = self._service_cores()
        self._accrue_response()
        self._assign_cores()
        io_used = self._service_io()

        if self.ready.is_empty() and len(self.waiting) == 0 and self.cores.is_empty():
            # the last tick only lasts as long as the work it actually finished
            self.time += cpu_used + io_used - self.quantum
            self.done = True

        if self.config.check_invariants:
            self.check_invariants()

    @property
    def finished(self):
        return self.table.in_state(ProcessState.FINISHED)

    @property
    def remaining_bursts(self):
        return sum(p.remaining_bursts for p in self.table)

    # Phase A
    def _accrue_turnaround(self):
        for p in self.table:
            if p.state is not ProcessState.FINISHED:
                p.turnaround += self.quantum
        self.time += self.quantum

    # Phase B, returns the longest CPU burst completed this tick
    def _service_cores(self):
        longest = 0
        idle = False
        for pid in self.cores.slots:
            if pid is None:
                if not idle:
                    self.cpu_idle += self.quantum
                    idle = True
                self.core_idle += self.quantum

        for index, pid in self.cores.occupied():
            p = self.table[pid]
            if not p.cpu_bursts:
                raise InvariantViolation("on core {} with no CPU burst left".format(index), pid, self.ticks,
                                         "core service")

            remaining = p.cpu_bursts[0] - self.quantum
            if remaining <= 0:
                used = p.cpu_bursts.pop(0)
                p.turnaround += used - self.quantum
                self.cpu_bursts += 1
                longest = max(longest, used)
                done_at = self.time - self.quantum + used
                if p.io_bursts:
                    p.state = ProcessState.WAITING
                    self.waiting.push(pid)
                    logger.debug("time %dms: Process %d completed a CPU burst; blocking on I/O for %dms",
                                 done_at, pid, p.io_bursts[0])
                elif p.cpu_bursts:
                    raise InvariantViolation("CPU burst follows a CPU burst", pid, self.ticks, "core service")
                else:
                    p.state = ProcessState.FINISHED
                    logger.debug("time %dms: Process %d terminated", done_at, pid)
            else:
                p.cpu_bursts[0] = remaining
                p.state = ProcessState.READY
                self.ready.push(p)
                logger.debug("time %dms: Time slice expired; process %d preempted with %dms to go",
                             self.time, pid, remaining)

        self.cores.clear()
        return longest

    # Phase C
    def _accrue_response(self):
        for p in self.table:
            if p.state is ProcessState.READY:
                p.response += self.quantum

    # Phase D
    def _assign_cores(self):
        for priority in Priority:
            for index in self.cores.reserved(priority):
                pid = self.ready.pop(priority)
                if pid is None:
                    break
                self._dispatch(index, pid)

        # spillover into whatever is still open, High first
        for index in self.cores.open_slots():
            pid = self.ready.pop_any()
            if pid is None:
                break
            self._dispatch(index, pid)

    def _dispatch(self, index, pid):
        p = self.table[pid]
        self.cores.place(index, pid, self.ticks)
        p.state = ProcessState.RUNNING
        logger.debug("time %dms: Process %d started using core %d for %dms burst",
                     self.time, pid, index, p.cpu_bursts[0] if p.cpu_bursts else 0)

    # Phase E, returns the I/O time consumed this tick
    def _service_io(self):
        used = 0
        while used < self.quantum and len(self.waiting) != 0:
            pid = self.waiting.front()
            p = self.table[pid]
            if not p.io_bursts:
                raise InvariantViolation("waiting with no I/O burst left", pid, self.ticks, "I/O service")

            burst = p.io_bursts[0]
            if used + burst <= self.quantum:
                used += burst
                self._credit_wait(burst)
                p.io_bursts.pop(0)
                self.waiting.pop()
                if p.cpu_bursts:
                    p.state = ProcessState.READY
                    self.ready.push(p)
                    logger.debug("time %dms: Process %d completed I/O; added to %s ready queue",
                                 self.time, pid, p.priority.name.lower())
                else:
                    p.state = ProcessState.FINISHED
                    logger.debug("time %dms: Process %d completed I/O; terminated", self.time, pid)
            else:
                serviced = self.quantum - used
                p.io_bursts[0] = burst - serviced
                self._credit_wait(serviced)
                used = self.quantum
                logger.debug("time %dms: Process %d blocked on I/O with %dms to go", self.time, pid, p.io_bursts[0])
        return used

    # Every process blocked on I/O is charged for I/O time spent on any of them.
    def _credit_wait(self, amount):
        for p in self.table:
            if p.state is ProcessState.WAITING:
                p.wait += amount

    def check_invariants(self):
        phase = "exclusivity check"
        where = {}

        def locate(pid, location, state):
            if pid in where:
                raise InvariantViolation("found in {} and {}".format(where[pid][0], location), pid, self.ticks, phase)
            where[pid] = (location, state)

        for priority in Priority:
            for pid in self.ready.ids(priority):
                locate(pid, "{} ready queue".format(priority.name.lower()), ProcessState.READY)
        for pid in self.waiting:
            locate(pid, "wait queue", ProcessState.WAITING)
        for index, pid in self.cores.occupied():
            locate(pid, "core {}".format(index), ProcessState.RUNNING)
        for p in self.table:
            if p.state is ProcessState.FINISHED:
                if not p.is_finished:
                    raise InvariantViolation("finished with bursts left", p.pid, self.ticks, phase)
                locate(p.pid, "finished set", ProcessState.FINISHED)

        for p in self.table:
            if p.pid not in where:
                raise InvariantViolation("not in any queue, core or the finished set", p.pid, self.ticks, phase)
            location, state = where.pop(p.pid)
            if p.state is not state:
                raise InvariantViolation("in {} but state is {}".format(location, p.state.name), p.pid,
                                         self.ticks, phase)
        if where:
            raise InvariantViolation("not part of this run", next(iter(where)), self.ticks, phase)
