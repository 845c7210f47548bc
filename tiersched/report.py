import sys


def write_run(summary, out=None):
    if out is None:
        out = sys.stdout
    lines = [
        "Sim run time: {}".format(summary.sim_time),
        "Average throughput: {:.4f}".format(summary.throughput),
        "Average turnaround: {:.3f}".format(summary.avg_turnaround),
        "Average wait time: {:.3f}".format(summary.avg_wait),
        "Average response time: {:.3f}".format(summary.avg_response),
        "Total Core Idle Time: {}".format(summary.core_idle),
        "Total CPU Idle Time: {}".format(summary.cpu_idle),
    ]
    for line in lines:
        out.write("Simulation {}: {}\n".format(summary.run, line))
    out.write("\n")


def write_averages(averages, out=None):
    if out is None:
        out = sys.stdout
    out.write(" -- Over {} runs -- \n".format(averages.runs))
    out.write("Average sim run time: {:.3f}\n".format(averages.sim_time))
    out.write("Average throughput (processes/ms): {:.2g}\n".format(averages.throughput))
    out.write("Average turnaround time: {:.3f}\n".format(averages.avg_turnaround))
    out.write("Average wait time: {:.3f}\n".format(averages.avg_wait))
    out.write("Average response time: {:.3f}\n".format(averages.avg_response))
    out.write("Average core idle time: {:.3f}\n".format(averages.core_idle))
    out.write("Average cpu idle time: {:.3f}\n".format(averages.cpu_idle))
