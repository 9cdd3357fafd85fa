from dishka import Provider as DishkaProvider

from videocat.util.di.scope import Scope


class Provider(DishkaProvider):
    """Base for videocat DI providers. Factories default to the UOW scope."""

    scope = Scope.UOW
