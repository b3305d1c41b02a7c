"""Module: __init__.py.

Author: Michael Economou
Date: 2026-03-02

Pure Python event/signal implementation used by the Qt-free state layer.
"""

from listboard.utils.events.observable import Observable, Signal

__all__ = ["Observable", "Signal"]
