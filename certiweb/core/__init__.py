"""certiweb core.

Re-exports the main Certiweb class:
    from certiweb.core import Certiweb
"""

from certiweb.core.certiweb_class import Certiweb

__all__ = ["Certiweb"]
