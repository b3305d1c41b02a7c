"""listboard - searchable list and character statistics view-model.

Author: Michael Economou
Date: 2026-03-02
"""

from listboard.config import APP_VERSION

__version__ = APP_VERSION
