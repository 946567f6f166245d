import logging
import shutil
from typing import Callable, Iterable, Iterator, NamedTuple, Optional

log = logging.getLogger(__name__)

UNKNOWN = "unknown"

FIRST_AVAILABLE = "first-available"
FIRST_NONZERO = "first-nonzero"
POLICIES = (FIRST_AVAILABLE, FIRST_NONZERO)


class PackageManager(NamedTuple):
    name: str
    executable: str
    count_command: str


# Probe order matters: the first manager found wins under FIRST_AVAILABLE.
DEFAULT_MANAGERS = (
    PackageManager("apt", "apt", "apt-cache pkgnames | wc -l"),
    PackageManager("dpkg", "dpkg", "dpkg --list | wc -l"),
    PackageManager("pacman", "pacman", "pacman -Qe | wc -l"),
    PackageManager("zypper", "zypper", "zypper se -i | wc -l"),
    PackageManager("dnf", "dnf", "dnf list installed | wc -l"),
)


def _as_count(text: str) -> int:
    try:
        return int(text.strip())
    except ValueError:
        return 0


class PackageResolver:
    """
    Work out the installed-package count from whichever package manager
    is present.

    Managers are probed in list order with `which`. Under FIRST_AVAILABLE
    the first one on PATH is trusted even if another manager owns the
    system packages. FIRST_NONZERO keeps walking until a manager reports a
    positive count.
    """

    def __init__(
        self,
        runner,
        managers: Iterable[PackageManager] = DEFAULT_MANAGERS,
        which: Callable[[str], Optional[str]] = shutil.which,
        policy: str = FIRST_AVAILABLE,
    ):
        if policy not in POLICIES:
            raise ValueError(f"Unknown package resolver policy: {policy!r}")
        self.runner = runner
        self.managers = tuple(managers)
        self.which = which
        self.policy = policy

    def available(self) -> Iterator[PackageManager]:
        for manager in self.managers:
            if self.which(manager.executable):
                yield manager

    def count(self) -> str:
        first = None
        for manager in self.available():
            output = self.runner.run(manager.count_command)
            log.debug("%s reported %r packages", manager.name, output)
            if self.policy == FIRST_AVAILABLE:
                return output
            if first is None:
                first = output
            if _as_count(output) > 0:
                return output

        if first is not None:
            return first
        log.debug("no supported package manager found")
        return UNKNOWN
