"""
Domain event dispatch.

Events are written to the application log once the writes that
produced them have been accepted by the record store.
"""

import logging

from domain.shared.base_aggregate import AggregateRoot

logger = logging.getLogger(__name__)


def dispatch_events(aggregate: AggregateRoot) -> int:
    """Log and clear the aggregate's pending events; returns how many were sent."""
    events = aggregate.clear_domain_events()
    for event in events:
        logger.info("%s %s", event.event_type, event.payload())
    return len(events)
