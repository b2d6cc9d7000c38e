"""Match finalized speech utterances to a fixed catalog of sign-language phrases."""

from .matching import MatchEngine, MatchResult
from .normalization import VariantRule, normalize

__version__ = "1.0.0"

__all__ = ["MatchEngine", "MatchResult", "VariantRule", "normalize", "__version__"]
