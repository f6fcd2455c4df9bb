# tests/conftest.py

import logfire
import pytest

from stubsweep.core.domain.models import duplicate_paths

logfire.configure(send_to_logfire=False, console=False)

TYPED_REPLACEMENTS = [
    "src/api/cart/controllers/cart.ts",
    "src/api/cart/routes/cart.ts",
    "src/api/order/controllers/order.ts",
    "src/api/order/routes/order.ts",
    "src/api/order/services/order.ts",
    "src/api/stripe/controllers/stripe.ts",
    "src/api/stripe/routes/stripe.ts",
]

# Neighbours of the stubs that must survive a cleanup
BYSTANDERS = [
    "src/api/cart/controllers/cart-simple.js",
    "src/api/cart/routes/cart-custom.js",
    "src/api/cart/services/cart.js",
    "src/api/order/routes/stripe-webhook.js",
]


def _touch(root, rel_path):
    path = root / rel_path
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("module.exports = {};\n")
    return path


@pytest.fixture
def project(tmp_path):
    """A Strapi-like tree holding all 7 stubs, their replacements and bystanders."""
    for rel_path in duplicate_paths() + TYPED_REPLACEMENTS + BYSTANDERS:
        _touch(tmp_path, rel_path)
    return tmp_path


@pytest.fixture
def touch():
    return _touch


@pytest.fixture
def typed_replacements():
    return list(TYPED_REPLACEMENTS)


@pytest.fixture
def bystanders():
    return list(BYSTANDERS)
