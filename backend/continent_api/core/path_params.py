"""Path Parameters — extract a single trailing path parameter after a fixed prefix.

Invariants:
    - Parameter is the remainder of the path after the prefix, verbatim
    - No percent-decoding, no trimming, no splitting on "/"
    - Paths outside the prefix raise MalformedPathError (never silently truncated)
"""

from continent_api.core.errors import MalformedPathError

CONTINENTS_PREFIX = "/continents/"


def extract_path_parameter(path: str, prefix: str = CONTINENTS_PREFIX) -> str:
    if not path.startswith(prefix):
        raise MalformedPathError(path, prefix)
    return path[len(prefix):]
