from __future__ import annotations

import logging
from typing import Dict, Optional

from pyproj import CRS
from pyproj.exceptions import CRSError

from tilecrs.utils.exceptions import ProjectionDefinitionError, ProjectionNotFoundError

log = logging.getLogger(__name__)


def shorten_urn(code: str) -> str:
    """
    Reduce a URN style code to its AUTHORITY:CODE form.

    Codes with more than three colon-delimited segments keep only the third-from-last
    and the last segment; anything else is returned unchanged.

    Examples:
        >>> shorten_urn("urn:ogc:def:crs:EPSG::3857")
        'EPSG:3857'
        >>> shorten_urn("EPSG:4326")
        'EPSG:4326'
    """
    urn = code.split(":")
    if len(urn) > 3:
        return f"{urn[-3]}:{urn[-1]}"
    return code


class DefinitionRegistry:
    """
    A table of projection definitions keyed by code.

    Definitions registered with `define` are proj strings, WKT or anything else pyproj.CRS
    accepts. Codes that were never registered can still be resolved through the
    authority database shipped with pyproj (e.g. "EPSG:3857"), which plays the role of
    the pre-registered definitions a map viewer knows about out of the box.

    Registries are independent of each other; pass one explicitly to keep definitions
    isolated, or rely on DEFAULT_REGISTRY which is shared by the whole process.
    The registry does no locking.

    Args:
        definitions: Initial code -> definition pairs
        use_authority_database: Whether unregistered AUTHORITY:CODE strings are looked up in pyproj's database

    Examples:
        >>> registry = DefinitionRegistry()
        >>> registry.define("EPSG:900913", "+proj=merc +a=6378137 +b=6378137 +units=m +no_defs")
        >>> "EPSG:900913" in registry
        True
    """

    def __init__(
        self,
        definitions: Optional[Dict[str, str]] = None,
        use_authority_database: bool = True,
    ):
        self._definitions: Dict[str, str] = dict(definitions) if definitions else {}
        self.use_authority_database = use_authority_database

    def __contains__(self, code: str) -> bool:
        return self.get(code) is not None

    def __len__(self) -> int:
        return len(self._definitions)

    def define(self, code: str, definition: str):
        """
        Register a definition for a code, replacing any previous one.
        """
        if code in self._definitions:
            log.debug(f"replacing projection definition for {code}")
        else:
            log.debug(f"registering projection definition for {code}")
        self._definitions[code] = definition

    def definition(self, code: str) -> Optional[str]:
        """
        Get the registered definition string for a code, if there is one.
        """
        return self._definitions.get(code)

    def get(self, code: str) -> Optional[CRS]:
        """
        Look up a single code without any fallback.

        Args:
            code: The projection code

        Returns:
            The pyproj CRS for the code, or None if the code is unknown

        Raises:
            ProjectionDefinitionError: If the code is registered but its definition cannot be parsed
        """
        definition = self._definitions.get(code)
        if definition is not None:
            try:
                return CRS.from_user_input(definition)
            except CRSError as e:
                raise ProjectionDefinitionError(
                    f"Could not parse the definition registered for {code}: {definition}"
                ) from e

        if self.use_authority_database:
            return _from_authority(code)

        return None

    def resolve(self, code: str) -> CRS:
        """
        Look up a code, retrying once with the shortened form of URN style codes.

        Args:
            code: The projection code, e.g. "EPSG:3857" or "urn:ogc:def:crs:EPSG::3857"

        Returns:
            The pyproj CRS for the code

        Raises:
            ProjectionNotFoundError: If neither the code nor its shortened form is known
        """
        crs = self.get(code)
        if crs is not None:
            return crs

        short_code = shorten_urn(code)
        if short_code != code:
            log.debug(f"no definition for {code}; retrying as {short_code}")
            crs = self.get(short_code)
            if crs is not None:
                return crs

        raise ProjectionNotFoundError(code)


def _from_authority(code: str) -> Optional[CRS]:
    parts = code.split(":")
    if len(parts) != 2 or not all(parts):
        return None

    auth_name, auth_code = parts
    try:
        return CRS.from_authority(auth_name, auth_code)
    except CRSError:
        return None


DEFAULT_REGISTRY = DefinitionRegistry()
