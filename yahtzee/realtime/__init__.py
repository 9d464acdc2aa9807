"""
Yahtzee Change Notifications.

Publish/subscribe plumbing between the engine and any attached renderer.
"""

from yahtzee.realtime.events import EventPayload, GameEvent
from yahtzee.realtime.notifier import ChangeNotifier, Subscriber

__all__ = [
    "ChangeNotifier",
    "EventPayload",
    "GameEvent",
    "Subscriber",
]
