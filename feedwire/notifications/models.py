from __future__ import annotations

from enum import Enum
from typing import Annotated, Any, ClassVar, Dict, FrozenSet, Literal, Mapping, Optional, Type, TypeVar, Union

from pydantic import Field, TypeAdapter, field_validator

from feedwire.errors import WrongVariant
from schemas.base import ValueObject


class NotificationType(str, Enum):
    WEBHOOK = "WEBHOOK"
    SLACK = "SLACK"
    FCM = "FCM"


class NotificationParamsBase(ValueObject):
    identity_fields: ClassVar[FrozenSet[str]] = frozenset({"params_id"})

    TAG: ClassVar[NotificationType]

    # Assigned by storage; never serialized and never compared.
    params_id: Optional[int] = Field(default=None, exclude=True)

    def model_post_init(self, context: Any, /) -> None:
        if not hasattr(type(self), "TAG"):
            raise TypeError(
                f"{type(self).__name__} has no notification type; use WebhookParams, SlackParams or FirebaseParams"
            )

    @property
    def kind(self) -> NotificationType:
        return self.TAG

    def as_webhook(self) -> "WebhookParams":
        return as_webhook(self)

    def as_slack(self) -> "SlackParams":
        return as_slack(self)

    def as_firebase(self) -> "FirebaseParams":
        return as_firebase(self)


class WebhookParams(NotificationParamsBase):
    TAG: ClassVar[NotificationType] = NotificationType.WEBHOOK

    type: Literal["WEBHOOK"] = "WEBHOOK"
    url: str


class SlackParams(NotificationParamsBase):
    TAG: ClassVar[NotificationType] = NotificationType.SLACK

    type: Literal["SLACK"] = "SLACK"
    workspace_id: str
    channel_id: str
    secret: str = Field(repr=False)


class FirebaseParams(NotificationParamsBase):
    TAG: ClassVar[NotificationType] = NotificationType.FCM

    type: Literal["FCM"] = "FCM"
    project_id: str
    client_email: str
    private_key: str = Field(repr=False)
    topic: str


NotificationParams = Annotated[
    Union[WebhookParams, SlackParams, FirebaseParams],
    Field(discriminator="type"),
]

VARIANTS: Dict[NotificationType, Type[NotificationParamsBase]] = {
    NotificationType.WEBHOOK: WebhookParams,
    NotificationType.SLACK: SlackParams,
    NotificationType.FCM: FirebaseParams,
}

_params_adapter: TypeAdapter[Any] = TypeAdapter(NotificationParams)


def parse_notification_params(data: Mapping[str, Any]) -> NotificationParamsBase:
    return _params_adapter.validate_python(dict(data))


P = TypeVar("P", bound=NotificationParamsBase)


def narrow(params: NotificationParamsBase, variant: Type[P]) -> P:
    if isinstance(params, variant):
        return params
    actual = params.kind.value if isinstance(params, NotificationParamsBase) else type(params).__name__
    raise WrongVariant(actual=actual, expected=variant.TAG.value)


def as_webhook(params: NotificationParamsBase) -> WebhookParams:
    return narrow(params, WebhookParams)


def as_slack(params: NotificationParamsBase) -> SlackParams:
    return narrow(params, SlackParams)


def as_firebase(params: NotificationParamsBase) -> FirebaseParams:
    return narrow(params, FirebaseParams)


class NotificationConfig(ValueObject):
    """A trigger condition plus exactly one delivery params variant."""

    identity_fields: ClassVar[FrozenSet[str]] = frozenset({"id"})

    id: Optional[int] = None
    condition: str
    params: NotificationParams

    @field_validator("condition")
    @classmethod
    def _validate_condition(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("condition must not be empty")
        return value

    def with_id(self, notification_id: int) -> "NotificationConfig":
        return self.model_copy(update={"id": notification_id})
