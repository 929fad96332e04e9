"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from storefront.domain.model.value_objects import Money
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.service.pricing import ShippingPolicy
from storefront.infrastructure.config import StoreConfig
from storefront.infrastructure.messaging.twilio_whatsapp_gateway import (
    TwilioWhatsAppGateway,
)
from storefront.infrastructure.persistence.json_cart_repository import (
    JsonCartRepository,
)
from storefront.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)
from storefront.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)


def product_repository(config: StoreConfig) -> JsonProductRepository:
    return JsonProductRepository(config.products_file)


def cart_repository(config: StoreConfig) -> JsonCartRepository:
    return JsonCartRepository(config.carts_file)


def order_repository(config: StoreConfig) -> OrderRepository:
    if config.order_backend == "firestore":
        # Imported here so the JSON backend never initialises Firebase.
        from storefront.infrastructure.persistence.firestore_order_repository import (
            FirestoreOrderRepository,
            firestore_client,
        )

        return FirestoreOrderRepository(firestore_client(config.firebase_credentials))
    return JsonOrderRepository(config.orders_file)


def notification_gateway(config: StoreConfig) -> TwilioWhatsAppGateway:
    return TwilioWhatsAppGateway(config.twilio)


def shipping_policy(config: StoreConfig) -> ShippingPolicy:
    return ShippingPolicy(
        free_shipping_threshold=Money(config.free_shipping_threshold),
        flat_fee=Money(config.flat_shipping_fee),
    )
