import logging
import sys

from tiersched.config import CORECOUNT, RRTIME, SchedulerConfig
from tiersched.errors import SimulationError
from tiersched.metrics import average
from tiersched.report import write_averages, write_run
from tiersched.runner import run_simulations

USAGE = "usage: tiersched SEED RUNS [QUANTUM] [CORES] [SUMMARY|VERBOSE|TRACE] [WORKLOAD_FILE]\n"
MODES = ("SUMMARY", "VERBOSE", "TRACE")


def main(argv=None):
    if argv is None:
        argv = sys.argv[1:]
    if len(argv) < 2 or len(argv) > 6:
        sys.stderr.write(USAGE)
        return 2

    try:
        rand_seed = int(argv[0])
        run_count = int(argv[1])
        quantum = int(argv[2]) if len(argv) > 2 else RRTIME
        core_count = int(argv[3]) if len(argv) > 3 else CORECOUNT
    except ValueError as e:
        sys.stderr.write("error: {}\n".format(e))
        sys.stderr.write(USAGE)
        return 2

    mode = argv[4].upper() if len(argv) > 4 else "SUMMARY"
    if mode not in MODES or run_count <= 0:
        sys.stderr.write(USAGE)
        return 2
    workload_path = argv[5] if len(argv) > 5 else None

    logging.basicConfig(level=logging.DEBUG if mode == "TRACE" else logging.WARNING,
                        format="%(message)s", stream=sys.stderr)

    on_run = write_run if mode != "SUMMARY" else None
    try:
        config = SchedulerConfig.split(core_count, quantum)
        summaries = run_simulations(run_count, rand_seed, config, workload_path, on_run)
    except SimulationError as e:
        sys.stderr.write("error: {}\n".format(e))
        return 1

    write_averages(average(summaries))
    return 0


if __name__ == "__main__":
    sys.exit(main())
