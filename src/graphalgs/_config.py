from __future__ import annotations

import os

# Constructor-time consistency assertions (transitive-closure cross checks,
# MST optimality conditions, ...). They cost O(V^2) or worse, so they stay off
# unless GRAPHALGS_CHECK is set. ``python -O`` removes them regardless.
CHECK_INVARIANTS = os.environ.get("GRAPHALGS_CHECK", "").strip().lower() in {"1", "true", "yes"}

FLOAT_EPSILON = 1e-12


def checks_enabled(check: bool | None) -> bool:
    if check is None:
        return CHECK_INVARIANTS
    return bool(check)
