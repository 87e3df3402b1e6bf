"""Travel booking example: actions and intent handlers.

Run with:
    actionbind chat --config examples/travel --module examples.travel
"""

from examples.travel import actions, handlers  # noqa: F401
