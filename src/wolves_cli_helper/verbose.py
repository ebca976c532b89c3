"""
Styled status output for the terminal.

Styling is rich's job: callers build styled fragments with :func:`styled`
(or any ``rich.text.Text``) and :func:`say` joins them into one line. Plain
strings are written exactly as given, never parsed as markup.
"""

from datetime import datetime, timezone
from email.utils import format_datetime
from typing import Dict, Optional, Union

from rich.console import Console
from rich.text import Text

from .config import DisplayConfig
from .sysinfo import SystemInfo

Segment = Union[str, Text]

DEFAULT_CONFIG = DisplayConfig()

default_console = Console()


def styled(text: str, style: str) -> Text:
    """Wrap ``text`` in a rich style such as ``"bold"`` or ``"color(208)"``."""
    return Text(text, style=style)


def stamp(now: Optional[datetime] = None, config: DisplayConfig = DEFAULT_CONFIG) -> Text:
    """Timestamp lead, ``[ Mon, 19 Oct 2026 07:04:00 +0000 ] :: ``."""
    now = now or datetime.now(timezone.utc)
    return styled(f"[ {format_datetime(now)} ]{config.separator}", config.lead_style)


def say(
    *segments: Segment,
    console: Optional[Console] = None,
    stamped: bool = False,
    config: DisplayConfig = DEFAULT_CONFIG,
) -> None:
    """
    Write the segments as one line.

    Args:
        segments: Plain strings and pre-styled ``Text`` fragments
        console: Target console, the module console by default
        stamped: Prefix the line with a timestamp lead
        config: Styles for the timestamp lead

    Raises:
        OSError: if the underlying write fails; it is not retried
    """
    target = console or default_console
    parts = [stamp(config=config)] if stamped else []
    parts.extend(segments)
    line = "".join(_render(target, part) for part in parts)
    # single attempt, errors reach the caller
    target.file.write(line + "\n")
    target.file.flush()


def _render(console: Console, segment: Segment) -> str:
    if not isinstance(segment, Text):
        return segment
    with console.capture() as capture:
        console.print(segment, end="", soft_wrap=True, highlight=False)
    return capture.get()


def write_header_lines(
    lines: Dict[str, str],
    console: Optional[Console] = None,
    config: DisplayConfig = DEFAULT_CONFIG,
) -> None:
    """Write key/value pairs with the keys padded to a common width."""
    width = max((len(key) for key in lines), default=0)
    for key, value in lines.items():
        say(
            styled(key.ljust(width), config.lead_style),
            config.separator,
            styled(str(value), config.value_style),
            console=console,
        )


def padding_line(console: Optional[Console] = None, config: DisplayConfig = DEFAULT_CONFIG) -> None:
    """Write a rule framed by blank lines."""
    say(console=console)
    say(styled("-" * config.rule_width, config.rule_style), console=console)
    say(console=console)


def announce(
    preload: Optional[Dict[str, str]] = None,
    console: Optional[Console] = None,
    info: Optional[SystemInfo] = None,
    config: DisplayConfig = DEFAULT_CONFIG,
) -> None:
    """
    Print a banner describing the host.

    ``preload`` entries (a config file path, a run label) are echoed first
    and then listed alongside the system information.
    """
    lines: Dict[str, str] = {}
    if preload:
        for key, value in preload.items():
            say(f"{key}: {value}", console=console)
        lines.update(preload)

    info = info or SystemInfo.collect()
    lines.update(info.to_dict())

    padding_line(console=console, config=config)
    write_header_lines(lines, console=console, config=config)
    padding_line(console=console, config=config)
