"""Runtime configuration, read from the environment.

The CLI calls ``load_dotenv()`` first, so a local ``.env`` file works
the same as exported variables.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from pathlib import Path

ORDER_BACKENDS = ("json", "firestore")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# Default data directory: <repo root>/data when installed in editable mode.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


@dataclass(frozen=True)
class TwilioSettings:
    account_sid: str = ""
    auth_token: str = ""
    from_number: str = ""
    admin_number: str = ""
    timeout: float = 10.0


@dataclass(frozen=True)
class StoreConfig:
    data_dir: Path
    log_level: str
    order_backend: str
    firebase_credentials: str
    free_shipping_threshold: Decimal
    flat_shipping_fee: Decimal
    twilio: TwilioSettings

    @property
    def products_file(self) -> Path:
        return self.data_dir / "products.json"

    @property
    def orders_file(self) -> Path:
        return self.data_dir / "orders.json"

    @property
    def carts_file(self) -> Path:
        return self.data_dir / "carts.json"


def _decimal(environ: Mapping[str, str], key: str, default: str) -> Decimal:
    raw = environ.get(key, default).strip()
    try:
        value = Decimal(raw)
    except InvalidOperation:
        raise ValueError(f"{key} must be a number, got {raw!r}")
    if value < 0:
        raise ValueError(f"{key} cannot be negative, got {raw!r}")
    return value


def load_config(environ: Mapping[str, str] | None = None) -> StoreConfig:
    env = os.environ if environ is None else environ

    backend = env.get("ORDER_BACKEND", "json").strip().lower()
    if backend not in ORDER_BACKENDS:
        raise ValueError(
            f"ORDER_BACKEND must be one of {', '.join(ORDER_BACKENDS)}, got {backend!r}"
        )

    raw_timeout = env.get("TWILIO_TIMEOUT", "10").strip()
    try:
        timeout = float(raw_timeout)
    except ValueError:
        raise ValueError(f"TWILIO_TIMEOUT must be a number, got {raw_timeout!r}")

    log_level = env.get("LOG_LEVEL", "INFO").strip().upper()
    if log_level not in LOG_LEVELS:
        raise ValueError(f"LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got {log_level!r}")

    data_dir = env.get("STOREFRONT_DATA_DIR")
    return StoreConfig(
        data_dir=Path(data_dir) if data_dir else _DEFAULT_DATA_DIR,
        log_level=log_level,
        order_backend=backend,
        firebase_credentials=env.get("FIREBASE_CREDENTIALS", ""),
        free_shipping_threshold=_decimal(env, "FREE_SHIPPING_THRESHOLD", "500"),
        flat_shipping_fee=_decimal(env, "FLAT_SHIPPING_FEE", "50"),
        twilio=TwilioSettings(
            account_sid=env.get("TWILIO_ACCOUNT_SID", ""),
            auth_token=env.get("TWILIO_AUTH_TOKEN", ""),
            from_number=env.get("TWILIO_WHATSAPP_NUMBER", ""),
            admin_number=env.get("ADMIN_WHATSAPP_NUMBER", ""),
            timeout=timeout,
        ),
    )
