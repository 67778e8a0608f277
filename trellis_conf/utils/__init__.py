"""trellis-conf utilities module.

Components:
- exceptions: Custom exception classes
- settings: Configuration and settings management
"""

from trellis_conf.utils.exceptions import *  # noqa: F401, F403
from trellis_conf.utils.settings import *  # noqa: F401, F403
