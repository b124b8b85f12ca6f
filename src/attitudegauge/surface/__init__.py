"""
Drawing surfaces the gauge can render onto.

Auto-imports all backend modules so registration side-effects run. After
importing this package, `registry.list_keys()` and `registry.create_surface()`
know about all available backends.
"""
from __future__ import annotations

import importlib
import pkgutil

from attitudegauge.surface.base import Font, LinearGradient, Style, Surface

for _module in pkgutil.iter_modules(__path__, __name__ + "."):
    importlib.import_module(_module.name)

__all__ = ["Font", "LinearGradient", "Style", "Surface"]
