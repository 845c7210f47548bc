from collections import namedtuple

import numpy as np

from tiersched.errors import SimulationError

RunSummary = namedtuple("RunSummary", ["run", "sim_time", "throughput", "avg_turnaround", "avg_wait",
                                       "avg_response", "core_idle", "cpu_idle"])

Averages = namedtuple("Averages", ["runs", "sim_time", "throughput", "avg_turnaround", "avg_wait",
                                   "avg_response", "core_idle", "cpu_idle"])


def summarize(scheduler, run=0):
    """Reduce a finished run to its summary.

    Turnaround and wait are averaged per process. Response is averaged per
    completed CPU burst, since it is accrued for every stay in a ready queue.
    """
    if not scheduler.done:
        raise SimulationError("run {} has not finished".format(run))

    counters = np.array([[p.turnaround, p.wait, p.response] for p in scheduler.table], dtype=np.int64)
    total_turnaround, total_wait, total_response = counters.sum(axis=0)
    num_process = len(counters)

    return RunSummary(
        run=run,
        sim_time=scheduler.time,
        throughput=num_process / scheduler.time,
        avg_turnaround=float(total_turnaround) / num_process,
        avg_wait=float(total_wait) / num_process,
        avg_response=float(total_response) / scheduler.cpu_bursts,
        core_idle=scheduler.core_idle,
        cpu_idle=scheduler.cpu_idle,
    )


def average(summaries):
    if len(summaries) == 0:
        raise SimulationError("no runs to average")
    columns = np.array([s[1:] for s in summaries], dtype=np.float64)
    return Averages(len(summaries), *(float(v) for v in columns.mean(axis=0)))
