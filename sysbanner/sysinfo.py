import logging
from dataclasses import dataclass

import psutil

from sysbanner import config
from sysbanner.packages import PackageResolver

log = logging.getLogger(__name__)

MIB = 1024 ** 2

KERNEL_COMMAND = "uname -sr"
UPTIME_COMMAND = "uptime -p"
PRODUCT_NAME_COMMAND = "cat /sys/devices/virtual/dmi/id/product_name"
PRODUCT_VERSION_COMMAND = "cat /sys/devices/virtual/dmi/id/product_version"
MEMORY_COMMAND = "free -m | awk 'NR==2{print $3, $2}'"


@dataclass
class HostReport:
    user: str = ""
    hostname: str = ""
    os: str = ""
    kernel: str = ""
    shell: str = ""
    uptime: str = ""
    product_name: str = ""
    product_version: str = ""
    package_count: str = ""
    memory_summary: str = ""

    @property
    def header(self):
        return f"{self.user}@{self.hostname}"

    @property
    def product(self):
        return f"{self.product_name} {self.product_version}"

    def rows(self):
        """Labelled values in display order."""
        return [
            ("OS", self.os),
            ("KERNEL", self.kernel),
            ("SHELL", self.shell),
            ("UPTIME", self.uptime),
            ("PRODUCT", self.product),
            ("PACKAGES", self.package_count),
            ("MEMORY", self.memory_summary),
        ]


def strip_uptime_prefix(text):
    if text.startswith("up "):
        return text[len("up "):]
    return text


def format_memory(used, total):
    percent = used * 100 / total if total else 0.0
    return f"{used}MiB / {total}MiB ({percent:.2f}%)"


def _memory_from_psutil():
    try:
        memory = psutil.virtual_memory()
    except (OSError, RuntimeError) as e:
        log.warning("psutil could not read memory usage: %s", e)
        return ""
    return format_memory(memory.used // MIB, memory.total // MIB)


def get_memory_usage(runner):
    output = runner.run(MEMORY_COMMAND)
    try:
        used, total = (int(part) for part in output.split())
    except ValueError:
        log.debug("unusable memory figures %r, falling back to psutil", output)
        return _memory_from_psutil()
    return format_memory(used, total)


def collect(runner, resolver=None):
    """Gather every banner field. Fields that cannot be read stay blank."""
    if resolver is None:
        resolver = PackageResolver(runner)

    return HostReport(
        user=config.USER,
        hostname=config.HOSTNAME,
        os=config.OS,
        kernel=runner.run(KERNEL_COMMAND),
        shell=config.SHELL,
        uptime=strip_uptime_prefix(runner.run(UPTIME_COMMAND)),
        product_name=runner.run(PRODUCT_NAME_COMMAND),
        product_version=runner.run(PRODUCT_VERSION_COMMAND),
        package_count=resolver.count(),
        memory_summary=get_memory_usage(runner),
    )
