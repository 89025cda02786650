from shipyard.models.base import Base  # noqa: F401
from shipyard.models.mod import Mod  # noqa: F401
