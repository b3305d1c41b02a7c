"""Application services.

Author: Michael Economou
Date: 2026-03-02
"""

from listboard.app.services.list_view_model import ListViewModel

__all__ = ["ListViewModel"]
