"""Notification configurations.

A config pairs a trigger condition with exactly one delivery params variant,
tagged on the wire as WEBHOOK, SLACK or FCM.
"""
from __future__ import annotations

from feedwire.notifications.dispatch import NotificationSender, deliver
from feedwire.notifications.models import (
    FirebaseParams,
    NotificationConfig,
    NotificationParamsBase,
    NotificationType,
    SlackParams,
    WebhookParams,
    as_firebase,
    as_slack,
    as_webhook,
    narrow,
    parse_notification_params,
)

__all__ = [
    "FirebaseParams",
    "NotificationConfig",
    "NotificationParamsBase",
    "NotificationSender",
    "NotificationType",
    "SlackParams",
    "WebhookParams",
    "as_firebase",
    "as_slack",
    "as_webhook",
    "deliver",
    "narrow",
    "parse_notification_params",
]
