"""Engine bootstrap (import side-effect)."""
from .api import set_engine
from .bootstrap import build_engine

set_engine(build_engine())
