"""gmsign - SM2/SM3 signature containers for OFD document signing.

Produces GB/T 35275 SignedData signature values for the GM/T 0099 signing
workflow.
"""

__version__ = "0.1.0"
__author__ = "gmsign Contributors"

from gmsign.config import Settings, get_settings

__all__ = ["Settings", "get_settings", "__version__"]
