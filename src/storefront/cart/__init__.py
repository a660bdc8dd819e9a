"""Cart adapter abstraction — pluggable cart integration."""

import os

_cart_instance = None


def get_cart():
    """Return the configured cart adapter (singleton).

    Uses InMemoryCart by default. Configure via the CART_ADAPTER
    environment variable.
    """
    global _cart_instance
    if _cart_instance is None:
        adapter = os.environ.get("CART_ADAPTER", "memory")
        if adapter == "memory":
            from storefront.cart.memory_adapter import InMemoryCart

            _cart_instance = InMemoryCart()
        else:
            raise ValueError(f"Unknown cart adapter: {adapter}")
    return _cart_instance


def reset_cart():
    """Reset the cart singleton (useful for testing)."""
    global _cart_instance
    _cart_instance = None
