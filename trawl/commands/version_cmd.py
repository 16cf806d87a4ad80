"""
Version command - displays trawl version information
"""

from trawl.version import TRAWL_VERSION


def run_version(verbose: bool = False) -> None:
    """
    Display trawl version information.

    Args:
        verbose: If True, also show the semantic version parts and release date
    """
    if verbose:
        print(f"trawl version {TRAWL_VERSION.full_version()}")
        print("\nDetailed version information:")
        print(f"  Semantic Version: {'.'.join(map(str, TRAWL_VERSION.semver()))}")
        print(f"  Release Date:     {TRAWL_VERSION.date_string()}")
    else:
        print(f"trawl {TRAWL_VERSION}")
