"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

import httpx

from order_intake.application.show_order import ShowOrderHandler
from order_intake.application.submit_order import AdminAlertConfig, SubmitOrderHandler
from order_intake.domain.exceptions import ConfigurationError
from order_intake.domain.notification.notifier import Notifier
from order_intake.domain.repository.order_store import OrderStore
from order_intake.infrastructure.config import Settings
from order_intake.infrastructure.logging_config import setup_logging
from order_intake.infrastructure.notification.log_notifier import LoggingNotifier
from order_intake.infrastructure.notification.twilio_whatsapp import (
    TwilioWhatsAppNotifier,
)
from order_intake.infrastructure.persistence.json_order_store import JsonOrderStore
from order_intake.infrastructure.persistence.supabase_order_store import (
    SupabaseOrderStore,
)
from order_intake.infrastructure.web.endpoint import SubmitOrderEndpoint
from order_intake.infrastructure.web.wsgi import make_wsgi_app


def http_client(settings: Settings) -> httpx.Client:
    return httpx.Client(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        transport=httpx.HTTPTransport(retries=settings.http_retries),
    )


def order_store(settings: Settings) -> OrderStore:
    if settings.store_backend == "supabase":
        settings.validate_backends()
        return SupabaseOrderStore(
            settings.supabase_url,  # type: ignore[arg-type]
            settings.supabase_service_role_key,  # type: ignore[arg-type]
            client=http_client(settings),
        )
    return JsonOrderStore(settings.data_dir / "orders.json")


def notifier(settings: Settings) -> Notifier:
    if settings.notifier_backend == "twilio":
        settings.validate_backends()
        return TwilioWhatsAppNotifier(
            settings.twilio_account_sid,  # type: ignore[arg-type]
            settings.twilio_auth_token,  # type: ignore[arg-type]
            settings.whatsapp_from_number,
            client=http_client(settings),
        )
    return LoggingNotifier()


def alert_config(settings: Settings) -> AdminAlertConfig:
    if not settings.admin_phone_number:
        raise ConfigurationError("Missing settings: ADMIN_PHONE_NUMBER")
    return AdminAlertConfig(recipient=settings.admin_phone_number)


def submit_order_handler(settings: Settings) -> SubmitOrderHandler:
    return SubmitOrderHandler(
        order_store=order_store(settings),
        notifier=notifier(settings),
        alert_config=alert_config(settings),
    )


def show_order_handler(settings: Settings) -> ShowOrderHandler:
    return ShowOrderHandler(order_store=order_store(settings))


def submit_order_endpoint(settings: Settings) -> SubmitOrderEndpoint:
    return SubmitOrderEndpoint(submit_order_handler(settings))


def create_app(settings: Settings | None = None):
    """WSGI entry point, e.g. ``gunicorn 'order_intake.infrastructure.bootstrap:create_app()'``."""
    settings = settings or Settings()
    setup_logging(settings.log_level, json_format=settings.log_json)
    return make_wsgi_app(submit_order_endpoint(settings))
