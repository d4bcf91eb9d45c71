from __future__ import annotations

import logging
from typing import Any, Mapping, Protocol, runtime_checkable

from feedwire.errors import ConfigurationError
from feedwire.notifications.models import VARIANTS, NotificationConfig, NotificationParamsBase, NotificationType, narrow

log = logging.getLogger("feedwire.notifications.dispatch")


@runtime_checkable
class NotificationSender(Protocol):
    """Delivery collaborator for one notification type (webhook, chat, push)."""

    def send(self, params: NotificationParamsBase, payload: Mapping[str, Any]) -> Any: ...


def deliver(
    config: NotificationConfig,
    payload: Mapping[str, Any],
    *,
    senders: Mapping[NotificationType, NotificationSender],
) -> Any:
    kind = config.params.kind
    sender = senders.get(kind)
    if sender is None:
        raise ConfigurationError(f"No sender configured for notification type {kind.value}")

    params = narrow(config.params, VARIANTS[kind])
    log.debug("Delivering %s notification id=%s", kind.value, config.id)
    return sender.send(params, payload)
