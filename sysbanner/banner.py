import logging

from rich.console import Console
from rich.logging import RichHandler
from rich.text import Text

from sysbanner import config
from sysbanner.runner import ShellRunner
from sysbanner.sysinfo import collect

ACCENT = "bold cyan"
VALUE = "bold"

HEADER_INDENT = " " * 20
RULE_INDENT = " " * 10
RULE = "-" * 29
LABEL_WIDTH = 15

# Nerd Font glyphs
ICONS = {
    "OS": "\uf303",
    "KERNEL": "\ue712",
    "SHELL": "\U000f018d",
    "UPTIME": "\U000f0150",
    "PRODUCT": "\U000f0322",
    "PACKAGES": "\U000f03d6",
    "MEMORY": "\U000f035b",
}


def format_label(name):
    """'OS' -> '<icon> OS: ~~~~~~~~~~>' with every arrow ending in the same column."""
    text = f"{name}: "
    arrow = "~" * (LABEL_WIDTH - len(text) - 1) + ">"
    return f"{ICONS.get(name, ' ')} {text}{arrow}"


def render(report, console):
    console.print(
        Text.assemble(HEADER_INDENT, (report.user, ACCENT), "@", (report.hostname, ACCENT)),
        soft_wrap=True,
    )
    console.print(Text.assemble(RULE_INDENT, (RULE, ACCENT)), soft_wrap=True)
    for name, value in report.rows():
        console.print(
            Text.assemble((format_label(name), ACCENT), " ", (value, VALUE)),
            soft_wrap=True,
        )
    console.print()


def setup_logging(level=None):
    """Send sysbanner diagnostics to stderr, never into the banner."""
    handler = RichHandler(console=Console(stderr=True), show_path=False, log_time_format="[%X]")
    handler.setFormatter(logging.Formatter("%(message)s"))

    logger = logging.getLogger("sysbanner")
    for old in list(logger.handlers):
        logger.removeHandler(old)
    logger.addHandler(handler)
    logger.setLevel(level or config.LOG_LEVEL)


def show_banner(console=None, runner=None, resolver=None):
    console = console or Console()
    runner = runner or ShellRunner()
    report = collect(runner, resolver=resolver)
    render(report, console)
    return report


def main():
    setup_logging()
    show_banner()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
