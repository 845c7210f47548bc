import logging

from tiersched.config import SchedulerConfig
from tiersched.metrics import summarize
from tiersched.scheduler import Scheduler
from tiersched.workload import Rand48, dump_workload, generate_workload, load_workload

logger = logging.getLogger(__name__)


def run_simulations(run_count, seed, config=None, workload_path=None, on_run=None, **generator_args):
    """Run ``run_count`` independent simulations and return their summaries.

    Each run gets a freshly generated workload and its own scheduler. With
    ``workload_path`` the workload is written to that file and read back before
    it is scheduled. ``on_run`` is called with each summary as it is produced.
    A failing run raises; the caller decides whether to start over.
    """
    if config is None:
        config = SchedulerConfig()

    rand_obj = Rand48(0)
    rand_obj.srand(seed)

    summaries = list()
    for run in range(1, run_count + 1):
        workload = generate_workload(rand_obj, **generator_args)
        if workload_path is not None:
            dump_workload(workload, workload_path)
            workload = load_workload(workload_path)

        scheduler = Scheduler(workload, config)
        scheduler.run()
        summary = summarize(scheduler, run)
        logger.info("run %d: %d processes, %d ticks, %dms", run, len(workload), scheduler.ticks, summary.sim_time)

        summaries.append(summary)
        if on_run is not None:
            on_run(summary)

    return summaries
