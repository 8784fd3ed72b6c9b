"""Ephemeral working directory for one assembly run."""

import logging
import shutil
import signal
import tempfile
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Dict, Iterator, Union

from lxclocal.errors import AssemblyInterrupted


logger = logging.getLogger(__name__)

# SIGINT already surfaces as KeyboardInterrupt
HANDLED_SIGNALS = (signal.SIGHUP, signal.SIGTERM)


def _raise_interrupted(signum, frame):
    raise AssemblyInterrupted(signum)


def _install_handlers() -> Dict[int, object]:
    if threading.current_thread() is not threading.main_thread():
        return {}

    previous = {}
    for sig in HANDLED_SIGNALS:
        previous[sig] = signal.signal(sig, _raise_interrupted)
    return previous


def _restore_handlers(previous: Dict[int, object]) -> None:
    for sig, handler in previous.items():
        signal.signal(sig, handler)


@contextmanager
def working_directory(parent: Union[str, Path]) -> Iterator[Path]:
    """Create a private directory under parent and always remove it.

    Termination signals are turned into AssemblyInterrupted while the
    directory is held so the cleanup below still runs.
    """
    parent = Path(parent)
    parent.mkdir(parents=True, exist_ok=True)

    workdir = Path(tempfile.mkdtemp(prefix=".lxc-local.", dir=parent))
    logger.debug(f"Created working directory {workdir}")

    previous = _install_handlers()
    try:
        yield workdir
    finally:
        _restore_handlers(previous)
        shutil.rmtree(workdir, ignore_errors=True)
        if workdir.exists():
            logger.warning(f"Could not fully remove working directory {workdir}")
        else:
            logger.debug(f"Removed working directory {workdir}")
