from ponto.employees.model import AllowedLocation
from ponto.timerecords.location import LocationValidator, haversine_meters


def test_haversine_known_distance():
    # São Paulo -> Rio de Janeiro, roughly 360 km.
    distance = haversine_meters(-23.5505, -46.6333, -22.9068, -43.1729)
    assert 355_000 < distance < 365_000


def test_default_location_used_without_allowed_locations():
    check = LocationValidator().check(-23.5505, -46.6333)
    assert check.within_range
    assert check.location_name == "Sede"


def test_employee_allowed_locations_and_radius():
    office = AllowedLocation(name="Filial", latitude=-22.9068, longitude=-43.1729, radius_meters=200)
    validator = LocationValidator()

    inside = validator.check(-22.9069, -43.1730, [office])
    outside = validator.check(-22.9200, -43.1729, [office])

    assert inside.within_range and inside.reason == "Localização válida - Filial"
    assert not outside.within_range
    assert outside.reason.endswith("de Filial")


def test_radius_override_and_skip():
    office = AllowedLocation(name="Filial", latitude=-22.9068, longitude=-43.1729, radius_meters=10)

    assert LocationValidator(radius_override_meters=5000).check(-22.92, -43.1729, [office]).within_range
    assert LocationValidator(skip_validation=True).check(None, None).within_range


def test_missing_or_invalid_coordinates():
    validator = LocationValidator()
    assert validator.check(None, -46.0).reason == "Localização não informada"
    assert validator.check(91.0, 0.0).reason == "Coordenadas inválidas"
    assert validator.check(float("nan"), 0.0).reason == "Coordenadas inválidas"
