"""
flagsync – per-tenant feature-flag authority.

Import path convention::

    from flagsync.kernel.errors import AuthenticationError
    from flagsync.storage import Codec, DocumentStore
    from flagsync.application.feature_flags import FlagDocumentManager
    from flagsync.api import create_app
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
