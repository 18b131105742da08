from contextlib import contextmanager
from queue import LifoQueue
from timeit import default_timer as timer

_open_timers = LifoQueue()


class Elapsed:
    """Wall-clock seconds spent in a tracked section, filled in when the section exits"""
    def __init__(self):
        self.seconds = 0.0

    def __repr__(self):
        return f"<{self.__class__.__name__} {self.seconds:.6f}s>"


@contextmanager
def tracked():
    """
    Time the enclosed block. Its start time is pushed onto the stack of open timers on entry and popped on exit, even
    when the block raises, so nested sections each report their own duration and a failed run leaves nothing behind.
    """
    elapsed = Elapsed()
    _open_timers.put(timer())
    try:
        yield elapsed
    finally:
        elapsed.seconds = timer() - _open_timers.get_nowait()


def open_timers() -> int:
    """The number of tracked sections currently running"""
    return _open_timers.qsize()


def track_runtime(func, *args, **kwargs):
    """Call func and return a tuple of its return value and the seconds the call took"""
    with tracked() as elapsed:
        ret = func(*args, **kwargs)
    return ret, elapsed.seconds
