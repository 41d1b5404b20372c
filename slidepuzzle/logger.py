import sys

from loguru import logger

PALETTE = {
    "board_builder": "cyan",
    "movement": "blue",
    "engine": "green",
    "cli": "magenta",
}

LEVEL_PER_COMPONENT = {
    "movement": "INFO",
}

_min_level = {"level": "INFO"}


def component_filter(record):
    comp = record["extra"].get("component", "")
    component_level = logger.level(LEVEL_PER_COMPONENT.get(comp, "DEBUG")).no
    global_level = logger.level(_min_level["level"]).no
    return record["level"].no >= max(component_level, global_level)


def formatter(record):
    comp = record["extra"].get("component", "")
    colour = PALETTE.get(comp, "white")

    # The colour tag goes into the template so loguru turns it into ANSI codes.
    return (
        "{time:HH:mm:ss} | "
        f"<{colour}>{comp:<15}</> | "
        "<level>{message}</level>\n"
    )


def set_level(level: str, verbose_components=()) -> None:
    """Set the global minimum level, optionally unmuting noisy components."""
    _min_level["level"] = level
    for comp in verbose_components:
        LEVEL_PER_COMPONENT.pop(comp, None)


logger.remove()
logger.add(sys.stderr, format=formatter, filter=component_filter, colorize=True)
