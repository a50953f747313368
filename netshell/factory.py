"""A keyed registry of object creators."""


class Factory:
    """Map keys to callables that build objects."""

    def __init__(self):
        self._creators = {}

    def register(self, key, creator):
        """Register ``creator`` under ``key``, replacing any previous one."""
        self._creators[key] = creator

    def unregister(self, key):
        """Remove the creator for ``key`` if there is one."""
        self._creators.pop(key, None)

    def create(self, key, *args):
        """Build an object with the creator registered under ``key``."""
        try:
            creator = self._creators[key]
        except KeyError:
            raise KeyError(f"No creator found for key: {key}") from None
        return creator(*args)