from volcanomap.model.records import VolcanoRecord


def make_record(
    name: str = "Test",
    lat: float = 0.0,
    lon: float = 0.0,
    elevation: float = 1000.0,
    type: str = "Stratovolcano",
    country: str = "Nowhere",
    location: str = "Somewhere",
    status: str = "Holocene",
) -> VolcanoRecord:
    return VolcanoRecord(
        name=name,
        country=country,
        location=location,
        lat=lat,
        lon=lon,
        elevation=elevation,
        type=type,
        status=status,
    )
