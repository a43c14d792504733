"""Timed, indented logging for nested tasks.

Important functions:
 - task: a context manager to wrap self-contained tasks
 - event: print a log message (indented based on active tasks)
 - dump_profile: write the time spent in each task to a file

Nothing is printed unless the `verbose` option is set, but task durations are
always recorded.  Messages go to standard error so they never mix with the
results the driver prints.
"""

from collections import defaultdict
from contextlib import contextmanager
import datetime
import sys

from intpoly.opts import Option

verbose = Option("verbose", bool, False, description="Log each task and event to stderr")

# seconds spent, keyed by the stack of task names active at the time
_times = defaultdict(float)
_task_stack = []
_begin = datetime.datetime.now()

def log(string):
    if verbose.value:
        print(string, file=sys.stderr)

def _indented(text, depth):
    return "  " * depth + text

def _describe(name, kwargs):
    if not kwargs:
        return name
    details = ", ".join("{}={}".format(k, v) for k, v in kwargs.items())
    return "{} [{}]".format(name, details)

def task_begin(name, **kwargs):
    log(_indented(_describe(name, kwargs) + "...", len(_task_stack)))
    _task_stack.append((name, datetime.datetime.now()))

def task_end():
    path = tuple(name for name, _ in _task_stack)
    name, start = _task_stack.pop()
    seconds = (datetime.datetime.now() - start).total_seconds()
    _times[path] += seconds
    log(_indented("Finished {} [duration={:.3}s]".format(name, seconds), len(_task_stack)))

@contextmanager
def task(name, **kwargs):
    task_begin(name, **kwargs)
    try:
        yield
    finally:
        task_end()

def event(name):
    log(_indented(name, len(_task_stack)))

def task_times():
    """Total seconds spent in each task, keyed by the stack of task names."""
    return dict(_times)

def dump_profile(path):
    elapsed = (datetime.datetime.now() - _begin).total_seconds()
    lines = ["Total duration: {:.3} seconds".format(elapsed)]
    for path_names, seconds in sorted(_times.items(), key=lambda kv: kv[1], reverse=True):
        lines.append("{:16.3} {}".format(seconds, ", ".join(path_names)))
    with open(path, "w") as f:
        f.write("\n".join(lines) + "\n")
