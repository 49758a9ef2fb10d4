"""
Unit tests for the cleanliness index
"""
from swachhta_prahari.domain.services.cleanliness import zone_cleanliness, cleanliness_index

from tests.factories import make_incident


class TestZoneCleanliness:
    def test_clean_zone_scores_95(self):
        assert zone_cleanliness(0, 0.0) == 95

    def test_score_drops_with_count_and_severity(self):
        # 10 incidents averaging weight 2 -> 100 - 2
        assert zone_cleanliness(10, 2.0) == 98

    def test_floor_at_60(self):
        assert zone_cleanliness(500, 4.0) == 60


class TestCleanlinessIndex:
    def test_no_incidents(self):
        index = cleanliness_index([])
        assert index["byZone"] == {"A": 95, "B": 95, "C": 95, "D": 95}
        assert index["overall"] == 95

    def test_incidents_only_affect_their_zone(self):
        incidents = [make_incident(zone="B", severity="critical") for _ in range(30)]
        index = cleanliness_index(incidents)
        # 30 * 4 / 10 = 12
        assert index["byZone"]["B"] == 88
        assert index["byZone"]["A"] == 95
        assert index["overall"] == round((95 * 3 + 88) / 4, 2)
