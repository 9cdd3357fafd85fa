"""Custom Dishka scopes for videocat."""

from dishka import BaseScope, new_scope


class Scope(BaseScope):  # type: ignore[misc]  # BaseScope is designed to be subclassed
    """videocat dependency injection scopes.

    Hierarchy: APP -> UOW

    - APP: Application lifetime (config, the video store)
    - UOW: Unit of Work (one HTTP request: services and handlers)
    """

    APP = new_scope("APP")
    UOW = new_scope("UOW")
