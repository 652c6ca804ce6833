"""cvarbiter — scoring and arbitration core for CV rewrites."""

__version__ = "0.1.0"

from cvarbiter.analysis.analyzer import analyze  # noqa: E402
from cvarbiter.arbiter.arbiter import arbitrate  # noqa: E402
from cvarbiter.arbiter.batch import run_batch  # noqa: E402
from cvarbiter.arbiter.merger import merge_indicator_sets  # noqa: E402
from cvarbiter.scoring.weights import (  # noqa: E402
    BULLET_PROFILE,
    DOCUMENT_FALLBACK_PROFILE,
    DOCUMENT_PROFILE,
    get_profile,
)

__all__ = [
    "BULLET_PROFILE",
    "DOCUMENT_FALLBACK_PROFILE",
    "DOCUMENT_PROFILE",
    "__version__",
    "analyze",
    "arbitrate",
    "get_profile",
    "merge_indicator_sets",
    "run_batch",
]
