from tiersched.errors import InvariantViolation
from tiersched.process import Priority


class CorePool:
    """Fixed array of core slots, each holding a process id or None.

    Slots are split into contiguous reserved ranges: High first, then Medium,
    then Low, sized by the scheduler config. Occupied slots are reported in the
    order they were filled so that preempted processes go back to their queue
    in the order they were dispatched.
    """

    def __init__(self, config):
        self.slots = [None] * config.core_count
        self._order = []
        high, medium, _ = config.reserved
        self._ranges = {
            Priority.HIGH: range(0, high),
            Priority.MEDIUM: range(high, high + medium),
            Priority.LOW: range(high + medium, config.core_count),
        }

    def reserved(self, priority):
        return self._ranges[priority]

    def place(self, index, pid, tick=None):
        if self.slots[index] is not None:
            raise InvariantViolation("core {} already holds process {}".format(index, self.slots[index]),
                                     pid, tick, "core assignment")
        if pid in self.slots:
            raise InvariantViolation("already on core {}".format(self.slots.index(pid)), pid, tick,
                                     "core assignment")
        self.slots[index] = pid
        self._order.append(index)

    def open_slots(self):
        return [i for i, pid in enumerate(self.slots) if pid is None]

    def occupied(self):
        return [(i, self.slots[i]) for i in self._order]

    def clear(self):
        for i in range(len(self.slots)):
            self.slots[i] = None
        self._order = []

    def is_empty(self):
        return all(pid is None for pid in self.slots)

    def __len__(self):
        return len(self.slots)

    def __repr__(self):
        return "CorePool({})".format(self.slots)
