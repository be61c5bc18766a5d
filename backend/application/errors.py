"""
Error surfacing for manager operations.
"""

import functools
import logging

from domain.shared.exceptions import DomainException

logger = logging.getLogger(__name__)


def surfaces_errors(action: str):
    """
    Turn a DomainException raised by a manager operation into the
    state's error message "<action>: <reason>".
    
    The decorated method must take the current AppState as its first
    argument after self and return the new AppState.
    """
    def decorator(method):
        @functools.wraps(method)
        def wrapper(self, state, *args, **kwargs):
            try:
                return method(self, state, *args, **kwargs)
            except DomainException as exc:
                logger.exception("%s (%s)", action, exc.code)
                return state.with_error(f"{action}: {exc.message}")
        return wrapper
    return decorator
