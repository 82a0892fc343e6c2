"""
comments_store.bootstrap

Composition root for the comments store.

Responsibilities:
- Configure structured logging once.
- Register slice reducers with the policies from settings.
- Build the `Store`.
"""

from __future__ import annotations

from comments_store.observability.logging import configure_logging, get_logger
from comments_store.settings import Settings
from comments_store.store.reducers import bind_strict, combine_reducers
from comments_store.store.store import Store

log = get_logger(__name__)

COMMENTS_SLICE = "comments"


def create_store(*, settings: Settings) -> Store:
    configure_logging(service_name=settings.service_name, level=settings.log_level)
    log.info("create_store", env=settings.env, strict_actions=settings.strict_actions)

    root_reducer = combine_reducers(
        {COMMENTS_SLICE: bind_strict(settings.strict_actions)},
    )
    return Store(root_reducer)


# --- Module Notes -----------------------------------------------------------
# New slices are registered here; reducers themselves never read settings.
