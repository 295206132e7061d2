"""
Centralized logging using Loguru with context-aware verbosity.

This module provides LOG() and WARN() functions that respect the current
ProgramState's verbosity level without requiring explicit state passing.
Everything goes to stderr; stdout is reserved for substitution output.

Usage:
    from tmpl.lib.log import LOG, WARN, state_connectToLogger

    # At start of the pipeline:
    state_connectToLogger(state)

    # Anywhere in that context:
    LOG("Opened template", level=1)
    LOG("Boundary at line 12", level=3)
    WARN("Directive #intro matched no section")
"""

from loguru import logger
from typing import Any, Optional
from contextvars import ContextVar
import sys

# Context variable to hold current ProgramState
_program_state: ContextVar[Optional[Any]] = ContextVar('program_state', default=None)

logger_format = (
    "<green>{time:HH:mm:ss}</green> │ "
    "<level>{level: <7}</level> │ "
    "<cyan>{function: <20}</cyan> @ "
    "<cyan>{line: <4}</cyan> ║ "
    "<level>{message}</level>"
)

logger.remove()  # Remove default handler
logger.add(sys.stderr, format=logger_format, level="DEBUG")


def state_connectToLogger(state: Any) -> None:
    """
    Connect a ProgramState to the logging context.

    Args:
        state: ProgramState instance with verbosity attribute
    """
    _program_state.set(state)


def verbosity_get() -> int:
    """Verbosity of the connected state, 0 when nothing is connected"""
    state = _program_state.get()
    return getattr(state, 'verbosity', 0) if state is not None else 0


def LOG(message: str, level: int = 1, **kwargs: Any) -> None:
    """
    Log message if current state's verbosity allows.

    Args:
        message: Log message to display
        level: Minimum verbosity level required (1=normal, 2=verbose, 3=debug)
        **kwargs: Additional loguru metadata

    Verbosity levels:
        0 = Silent (default)
        1 = Progress (-v)
        2 = Verbose (-vv)
        3 = Debug (-vvv)
    """
    if verbosity_get() >= level:
        logger.opt(depth=1).debug(message, **kwargs)


def WARN(message: str, level: int = 1, **kwargs: Any) -> None:
    """
    Log a warning if current state's verbosity allows.

    Used for conditions that do not change standard output, such as a
    directive that selected no section.
    """
    if verbosity_get() >= level:
        logger.opt(depth=1).warning(message, **kwargs)
