# tests/test_models.py

from stubsweep.core.domain.models import (
    DUPLICATE_GROUPS,
    CleanupOutcome,
    CleanupResult,
    DuplicateFile,
    duplicate_paths,
)


def test_catalog_is_fixed_and_ordered():
    assert duplicate_paths() == [
        "src/api/cart/controllers/cart.js",
        "src/api/cart/routes/cart.js",
        "src/api/order/controllers/order.js",
        "src/api/order/routes/order.js",
        "src/api/order/services/order.js",
        "src/api/stripe/controllers/stripe.js",
        "src/api/stripe/routes/stripe.js",
    ]
    assert [g.name for g in DUPLICATE_GROUPS] == ["Cart API", "Order API", "Stripe API"]


def test_catalog_has_no_patterns():
    for path in duplicate_paths():
        assert not any(ch in path for ch in "*?[]")
        assert not path.startswith("/") and ".." not in path


def test_annotation_and_replacement_path():
    f = DuplicateFile("src/api/order/controllers/order.js", "old version", "order.ts")
    assert f.annotation == "old version, using order.ts instead"
    assert f.replacement_path == "src/api/order/controllers/order.ts"


def test_result_executed_flag():
    assert CleanupResult(CleanupOutcome.EXECUTED).executed
    assert not CleanupResult(CleanupOutcome.CANCELLED).executed
