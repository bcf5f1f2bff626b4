"""Unit tests for BMRService."""

from fittrack.domain.body_metrics.calculation.bmr_service import BMRService
from fittrack.domain.body_metrics.core.value_objects import Gender


class TestBMRService:
    """Test BMR calculation using Mifflin-St Jeor formula."""

    def setup_method(self):
        """Set up test fixtures."""
        self.service = BMRService()

    def test_calculate_bmr_male(self):
        bmr = self.service.calculate(70.0, 170.0, 30, Gender.MALE)

        # Expected: 10*70 + 6.25*170 - 5*30 + 5 = 1617.5
        assert bmr == 1617.5

    def test_calculate_bmr_female(self):
        bmr = self.service.calculate(60.0, 165.0, 25, Gender.FEMALE)

        # Expected: 10*60 + 6.25*165 - 5*25 - 161 = 1345.25
        assert bmr == 1345.25

    def test_male_female_difference(self):
        male = self.service.calculate(70.0, 170.0, 30, Gender.MALE)
        female = self.service.calculate(70.0, 170.0, 30, Gender.FEMALE)

        assert male - female == 166.0

    def test_calculate_bmr_different_ages(self):
        young = self.service.calculate(70.0, 170.0, 25, Gender.MALE)
        old = self.service.calculate(70.0, 170.0, 50, Gender.MALE)

        assert young - old == 125.0  # 25 years * 5
