from trawl.version.trawl_version import TRAWL_VERSION, Version

__all__ = ["TRAWL_VERSION", "Version"]
