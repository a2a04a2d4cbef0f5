"""Per-day attributes. Importing this package registers the standard set."""
from . import standard as _standard  # noqa: F401
