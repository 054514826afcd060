"""Optional module loading."""

import importlib
import logging
import sys
from types import ModuleType

logger = logging.getLogger(__name__)


def safe_import(name: str) -> ModuleType | None:
    """Import a module, returning None if it cannot be imported.

    Args:
        name: Dotted module name.

    Returns:
        The module, or None if it (or one of its imports) is missing.
    """
    try:
        return importlib.import_module(name)
    except ImportError as e:
        logger.debug("Optional module %s not available: %s", name, e)
        return None


def unload_module(name: str) -> bool:
    """Remove a module from the import cache.

    The next import of ``name`` loads it afresh.

    Returns:
        True if the module was loaded, False otherwise.
    """
    return sys.modules.pop(name, None) is not None
