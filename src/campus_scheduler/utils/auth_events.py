"""Auth-state change notifications.

Subscribers register a callback and get back a handle; calling
``unsubscribe()`` on the handle detaches the callback again.
"""

import logging
import threading
from typing import Callable, List, Optional

logger = logging.getLogger(__name__)

SIGNED_UP = "SIGNED_UP"
SIGNED_IN = "SIGNED_IN"
SIGNED_OUT = "SIGNED_OUT"

AuthCallback = Callable[[str, Optional[str]], None]


class Subscription:
    """Handle returned by AuthStateNotifier.subscribe."""

    def __init__(self, notifier: "AuthStateNotifier", callback: AuthCallback):
        self._notifier = notifier
        self.callback = callback

    def unsubscribe(self) -> None:
        self._notifier._remove(self)


class AuthStateNotifier:
    """Fans auth events out to subscribed callbacks."""

    def __init__(self):
        self._subscriptions: List[Subscription] = []
        self._lock = threading.Lock()

    def subscribe(self, callback: AuthCallback) -> Subscription:
        subscription = Subscription(self, callback)
        with self._lock:
            self._subscriptions.append(subscription)
        return subscription

    def _remove(self, subscription: Subscription) -> None:
        with self._lock:
            if subscription in self._subscriptions:
                self._subscriptions.remove(subscription)

    def emit(self, event: str, identity_id: Optional[str]) -> None:
        """Deliver ``event`` to every subscriber.

        A failing callback is logged and does not stop delivery to the rest.
        """
        with self._lock:
            subscriptions = list(self._subscriptions)
        for subscription in subscriptions:
            try:
                subscription.callback(event, identity_id)
            except Exception:
                logger.exception("Auth state callback failed for %s", event)


auth_notifier = AuthStateNotifier()
