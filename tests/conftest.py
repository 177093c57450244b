import pytest

from helpers import make_record
from volcanomap.model.records import VolcanoRecord


@pytest.fixture
def records() -> list[VolcanoRecord]:
    return [
        make_record("Etna", 37.748, 14.999, 3357, "Stratovolcano"),
        make_record("Kilauea", 19.421, -155.287, 1222, "Shield volcano"),
        make_record("Krakatau", -6.102, 105.423, 155, "Caldera"),
        make_record("Axial Seamount", 45.95, -130.0, -1410, "Submarine volcano"),
        make_record("Paricutin", 19.493, -102.251, 3170, "Cinder cone"),
        make_record("Fuji", 35.361, 138.728, 3776, "Stratovolcano"),
    ]
