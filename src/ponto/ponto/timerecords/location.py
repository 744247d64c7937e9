from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, Sequence

from ..common.validators import is_valid_coordinates
from ..core.constants import DEFAULT_LATITUDE, DEFAULT_LONGITUDE, DEFAULT_MAX_DISTANCE_METERS
from ..employees.model import AllowedLocation

EARTH_RADIUS_METERS = 6371000


def haversine_meters(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    phi1, phi2 = math.radians(lat1), math.radians(lat2)
    d_phi = math.radians(lat2 - lat1)
    d_lambda = math.radians(lon2 - lon1)
    a = math.sin(d_phi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(d_lambda / 2) ** 2
    return EARTH_RADIUS_METERS * 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))


@dataclass(frozen=True)
class LocationCheck:
    within_range: bool
    reason: str
    distance_meters: Optional[float] = None
    location_name: Optional[str] = None


@dataclass
class LocationValidator:
    """Advisory geofence check for punches.

    The result only feeds the record's reason text; a punch is never refused
    or invalidated because of its location.
    """

    default_latitude: float = DEFAULT_LATITUDE
    default_longitude: float = DEFAULT_LONGITUDE
    max_distance_meters: float = DEFAULT_MAX_DISTANCE_METERS
    skip_validation: bool = False
    # Non-zero widens every radius (development setups).
    radius_override_meters: float = 0

    def check(
        self,
        latitude: Optional[float],
        longitude: Optional[float],
        allowed: Sequence[AllowedLocation] = (),
    ) -> LocationCheck:
        if self.skip_validation:
            return LocationCheck(True, "Validação de localização desativada")

        if latitude is None or longitude is None:
            return LocationCheck(False, "Localização não informada")

        if not is_valid_coordinates(latitude, longitude):
            return LocationCheck(False, "Coordenadas inválidas")

        targets = list(allowed) or [
            AllowedLocation(
                name="Sede",
                latitude=self.default_latitude,
                longitude=self.default_longitude,
                radius_meters=self.max_distance_meters,
            )
        ]

        nearest: Optional[tuple[float, AllowedLocation]] = None
        for loc in targets:
            distance = haversine_meters(latitude, longitude, loc.latitude, loc.longitude)
            radius = self.radius_override_meters or loc.radius_meters
            if distance <= radius:
                return LocationCheck(
                    True,
                    f"Localização válida - {loc.name}",
                    distance_meters=distance,
                    location_name=loc.name,
                )
            if nearest is None or distance < nearest[0]:
                nearest = (distance, loc)

        distance, loc = nearest
        return LocationCheck(
            False,
            f"Fora do local permitido - {round(distance)}m de {loc.name}",
            distance_meters=distance,
            location_name=loc.name,
        )
