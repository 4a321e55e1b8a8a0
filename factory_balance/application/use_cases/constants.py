"""Shared constants for application use cases."""

INVENTORY_POLICY_DEGRADE = "degrade"
INVENTORY_POLICY_STRICT = "strict"
INVENTORY_FAILURE_POLICIES = (
    INVENTORY_POLICY_DEGRADE,
    INVENTORY_POLICY_STRICT,
)

DEFAULT_MAX_WORKERS = 4

TREASURY_SOURCE = "treasuries"
COUNTERPARTY_SOURCE = "parties"


__all__ = [
    "INVENTORY_POLICY_DEGRADE",
    "INVENTORY_POLICY_STRICT",
    "INVENTORY_FAILURE_POLICIES",
    "DEFAULT_MAX_WORKERS",
    "TREASURY_SOURCE",
    "COUNTERPARTY_SOURCE",
]
