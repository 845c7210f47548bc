from tiersched.process import Priority


class ReadyQueues:
    """One first-come-first-served queue of process ids per priority tier."""

    def __init__(self):
        self._queues = {priority: list() for priority in Priority}

    def push(self, process):
        self._queues[process.priority].append(process.pid)

    def pop(self, priority):
        queue = self._queues[priority]
        if len(queue) == 0:
            return None
        return queue.pop(0)

    # Spillover order: High, then Medium, then Low.
    def pop_any(self):
        for priority in Priority:
            pid = self.pop(priority)
            if pid is not None:
                return pid
        return None

    def ids(self, priority):
        return list(self._queues[priority])

    def is_empty(self):
        return all(len(q) == 0 for q in self._queues.values())

    def __len__(self):
        return sum(len(q) for q in self._queues.values())

    def __repr__(self):
        return "ReadyQueues({})".format(
            ", ".join("{}={}".format(p.name, self._queues[p]) for p in Priority))


class WaitQueue:
    """Processes blocked on I/O, serviced strictly in arrival order."""

    def __init__(self):
        self._queue = list()

    def push(self, pid):
        self._queue.append(pid)

    def front(self):
        return self._queue[0]

    def pop(self):
        return self._queue.pop(0)

    def __len__(self):
        return len(self._queue)

    def __iter__(self):
        return iter(list(self._queue))

    def __repr__(self):
        return "WaitQueue({})".format(self._queue)
