"""Offline construction of catalog station identifiers."""

import logging
from typing import TYPE_CHECKING

from station_id_resolver.domain.errors import MalformedRailwayIdError, UnknownRailwayError
from station_id_resolver.domain.models import RailwayCatalog

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from station_id_resolver.domain.ports import Romanizer

STATION_NAMESPACE = "odpt.Station"


def parse_railway_id(railway_id: str) -> tuple[str, str]:
    """Split "<namespace>:<Operator>.<Line>" into (operator, line).

    Raises:
        MalformedRailwayIdError: If the identifier does not have that shape.
    """
    namespace, separator, operator_and_line = railway_id.partition(":")
    if not separator or not namespace:
        raise MalformedRailwayIdError(railway_id)

    parts = operator_and_line.split(".")
    if len(parts) != 2 or not all(parts):
        raise MalformedRailwayIdError(railway_id)
    return parts[0], parts[1]


class IdentifierSynthesizer:
    """Builds a best-effort station identifier from a line name and a romanized station name.

    The result is well-formed but not checked against the catalog, so
    ambiguous romanizations can produce identifiers the catalog does not know.
    """

    def __init__(self, railway_catalog: RailwayCatalog, romanizer: "Romanizer") -> None:
        self._railway_catalog = railway_catalog
        self._romanizer = romanizer

    def synthesize(self, station_name: str, line_name: str) -> str | None:
        """Synthesize the identifier of station_name on line_name.

        Returns:
            "odpt.Station:<Operator>.<Line>.<Romanized>", or None when the
            station name romanizes to nothing.

        Raises:
            UnknownRailwayError: If line_name is not in the railway catalog.
            MalformedRailwayIdError: If the catalog entry is malformed.
        """
        railway_id = self._railway_catalog.lookup(line_name)
        if railway_id is None:
            raise UnknownRailwayError(line_name)

        operator, line = parse_railway_id(railway_id)
        romanized = self._romanizer.romanize(station_name)
        if not romanized:
            logger.warning(f"Station name '{station_name}' romanized to an empty string")
            return None

        station_id = f"{STATION_NAMESPACE}:{operator}.{line}.{romanized}"
        logger.debug(f"Synthesized {station_id} from '{station_name}' on '{line_name}'")
        return station_id
