"""House services: configuration, token movements and table lifecycle.

These wrap the pool engine with persistence. They raise SnookerError
subclasses and leave committing or rolling back to the caller.
"""
