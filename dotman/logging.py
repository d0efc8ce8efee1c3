import logging
import textwrap

import structlog
import yaml
from rich.console import Console
from rich.syntax import Syntax
from structlog.types import FilteringBoundLogger
from structlog.typing import EventDict

# stdout is reserved for command output such as completion scripts
console = Console(stderr=True)

Logger = FilteringBoundLogger

HIDDEN_PREFIXES = ('_verbose_', '_debug_')
BOOKKEEPING_KEYS = ('timestamp', 'level', 'log_level', 'exc_info')
LEVEL_STYLES = {
    'DEBUG': 'magenta',
    'INFO': 'blue',
    'WARNING': 'yellow',
    'ERROR': 'red',
    'CRITICAL': 'white on red',
}


def format_context_yaml(event_dict: EventDict, indent: int = 2) -> str:
    """Dump event context as block-style YAML, indented under the event line."""
    if not event_dict:
        return ''
    dumped = yaml.safe_dump(event_dict, sort_keys=True, default_flow_style=False)
    return textwrap.indent(dumped.rstrip('\n'), ' ' * indent)


def filter_context_by_prefix(event_dict: EventDict) -> EventDict:
    """Drop context keys that are only shown in verbose mode."""
    return {key: value for key, value in event_dict.items() if not key.startswith(HIDDEN_PREFIXES)}


def strip_prefixes_from_keys(event_dict: EventDict) -> EventDict:
    """Remove the ``_verbose_``/``_debug_`` markers for display."""
    stripped: EventDict = {}
    for key, value in event_dict.items():
        for prefix in HIDDEN_PREFIXES:
            if key.startswith(prefix):
                key = key.removeprefix(prefix)  # noqa: PLW2901
                break
        stripped[key] = value
    return stripped


def is_verbose() -> bool:
    """Check if we're in verbose mode by looking at the root logger level."""
    return logging.getLogger().level <= logging.DEBUG


def _headline(level: str, event: str) -> str:
    style = LEVEL_STYLES.get(level, 'bold cyan')
    return f'[bold {style}][{level}][/bold {style}] [{style}]{event}[/{style}]'


def cli_renderer(
    _logger: Logger,
    method_name: str,
    event_dict: EventDict,
) -> str:
    """Print one event to the console as a headline plus highlighted YAML context.

    Raises:
        structlog.DropEvent: Always, the event has already been printed.
    """
    level = 'ERROR' if method_name == 'exception' else method_name.upper()
    event = event_dict.pop('event', '')
    for key in BOOKKEEPING_KEYS:
        event_dict.pop(key, None)

    context = strip_prefixes_from_keys(event_dict) if is_verbose() else filter_context_by_prefix(event_dict)

    console.print(_headline(level, event))
    context_yaml = format_context_yaml(context)
    if context_yaml:
        console.print(Syntax(context_yaml, 'yaml', theme='github-dark', background_color='default'))
    raise structlog.DropEvent


def configure_logging(*, verbose: bool = False) -> None:
    """Configure structlog for dotman.

    Args:
        verbose: Enable verbose/debug output
    """
    level = logging.DEBUG if verbose else logging.INFO
    logging.getLogger().setLevel(level)

    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt='ISO', utc=False),
            cli_renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(),
        context_class=dict,
        cache_logger_on_first_use=False,
    )


def get_logger(name: str) -> Logger:
    """Return the structlog logger for a dotman module."""
    return structlog.get_logger(name)
