"""Run identifiers and the environment a review ran in."""

import importlib.metadata
import platform
import secrets
import sys
from collections.abc import Sequence
from datetime import UTC, datetime

from exdedupe.audit.models import RunEnvironment

__all__ = ["new_run_id", "collect_environment"]


def new_run_id(now: datetime | None = None) -> str:
    """Return a run id that sorts by start time.

    Parameters
    ----------
    now : datetime | None, optional
        Start time (UTC). Defaults to the current time.

    Returns
    -------
    str
        Id such as ``review-20260203T123456Z-9f2c01ab``.
    """
    started = now if now is not None else datetime.now(UTC)
    return f"review-{started:%Y%m%dT%H%M%SZ}-{secrets.token_hex(4)}"


def _distribution_version(name: str) -> str:
    try:
        return importlib.metadata.version(name)
    except importlib.metadata.PackageNotFoundError:
        return "unknown"


def collect_environment(argv: Sequence[str] | None = None) -> RunEnvironment:
    """Describe the current invocation.

    Parameters
    ----------
    argv : Sequence[str] | None, optional
        Command line to record, ``sys.argv`` if None.

    Returns
    -------
    RunEnvironment
        Interpreter, platform and package versions.
    """
    uname = platform.uname()
    return RunEnvironment(
        argv=list(argv if argv is not None else sys.argv),
        python_version=platform.python_version(),
        platform=f"{uname.system}-{uname.release}-{uname.machine}",
        exdedupe_version=_distribution_version("exdedupe"),
        click_version=_distribution_version("click"),
    )
