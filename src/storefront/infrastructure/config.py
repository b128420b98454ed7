"""Runtime settings read from the environment.

Every value has a default so the CLI works out of the box; the defaults
for delivery pricing match the storefront's published policy (free
delivery from ₹5000, otherwise ₹250).
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.checkout import DeliveryPolicy
from storefront.domain.model.value_objects import DEFAULT_CURRENCY, Money

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


@dataclass(frozen=True)
class Settings:
    data_dir: Path = _DEFAULT_DATA_DIR
    currency: str = DEFAULT_CURRENCY
    free_shipping_threshold: str = "5000"
    delivery_fee: str = "250"
    environment: str = "development"

    @staticmethod
    def from_env(environ: dict[str, str] | None = None) -> Settings:
        env = os.environ if environ is None else environ
        settings = Settings(
            data_dir=Path(env.get("STOREFRONT_DATA_DIR", str(_DEFAULT_DATA_DIR))),
            currency=env.get("STOREFRONT_CURRENCY", DEFAULT_CURRENCY).upper(),
            free_shipping_threshold=env.get("STOREFRONT_FREE_SHIPPING_THRESHOLD", "5000"),
            delivery_fee=env.get("STOREFRONT_DELIVERY_FEE", "250"),
            environment=env.get("STOREFRONT_ENV", "development").lower(),
        )
        # Fail at load time rather than at the first checkout
        settings.delivery_policy()
        return settings

    def delivery_policy(self) -> DeliveryPolicy:
        try:
            threshold = Money.of(self.free_shipping_threshold, self.currency)
            fee = Money.of(self.delivery_fee, self.currency)
        except ValidationError as exc:
            raise ValidationError(f"Invalid delivery settings: {exc}") from exc
        return DeliveryPolicy(free_shipping_threshold=threshold, flat_fee=fee)
