"""CLI package.

The ``cli`` sub-package contains the Click application.  It should
import only from the public modules of the parent package.
"""
from __future__ import annotations
