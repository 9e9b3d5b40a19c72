import unittest

from walkcast.breeds import BREED_PROFILES, list_profiles, profile_for, resolve_profile
from walkcast.domain import (
    BreedId,
    CoatType,
    HeatSensitivity,
    SafetyLevel,
    SizeCategory,
    WeatherReading,
)


class TestCatalog(unittest.TestCase):
    def test_every_breed_has_a_profile(self):
        self.assertEqual(set(BREED_PROFILES.keys()), set(BreedId))
        self.assertEqual([b for b, _ in list_profiles()], list(BreedId))

    def test_profile_for_accepts_string_ids(self):
        self.assertIs(profile_for("husky"), BREED_PROFILES[BreedId.HUSKY])
        self.assertEqual(profile_for(BreedId.BULLDOG).name, "Bulldog")

    def test_unknown_breed_raises(self):
        with self.assertRaises(ValueError):
            profile_for("cat")

    def test_catalog_is_read_only(self):
        with self.assertRaises(TypeError):
            BREED_PROFILES[BreedId.HUSKY] = BREED_PROFILES[BreedId.BULLDOG]  # type: ignore[index]

    def test_profiles_are_frozen(self):
        profile = profile_for(BreedId.BEAGLE)
        with self.assertRaises(Exception):
            profile.max_humidity = 99.0  # type: ignore[misc]

    def test_resolve_profile_passes_profiles_through(self):
        profile = profile_for(BreedId.POODLE)
        self.assertIs(resolve_profile(profile), profile)
        self.assertIs(resolve_profile("poodle"), profile)

    def test_descriptive_traits(self):
        husky = profile_for(BreedId.HUSKY)
        self.assertEqual(husky.coat_type, CoatType.DOUBLE)
        self.assertEqual(husky.heat_sensitivity, HeatSensitivity.HIGH)
        self.assertEqual(husky.heat_sensitivity.display_name, "High")
        self.assertEqual(profile_for(BreedId.MIXED).size_category.display_name, "Varies")
        self.assertEqual(SizeCategory.EXTRA_LARGE.display_name, "XL")


class TestBreedAssess(unittest.TestCase):
    def test_safe_conditions_are_safe_for_every_breed(self):
        for breed_id, profile in list_profiles():
            rng = profile.safe_temperature_range
            for temp in (rng.low, (rng.low + rng.high) / 2, rng.high):
                with self.subTest(breed=breed_id, temp=temp):
                    level = profile.assess(temp, profile.max_humidity, profile.max_wind_speed)
                    self.assertEqual(level, SafetyLevel.SAFE)

    def test_humidity_or_wind_only_downgrade_to_caution(self):
        lab = profile_for(BreedId.LABRADOR_RETRIEVER)
        self.assertEqual(lab.assess(72.0, 95.0, 10.0), SafetyLevel.CAUTION)
        self.assertEqual(lab.assess(72.0, 50.0, 40.0), SafetyLevel.CAUTION)
        self.assertEqual(lab.assess(72.0, 95.0, 40.0), SafetyLevel.CAUTION)

    def test_caution_range(self):
        lab = profile_for(BreedId.LABRADOR_RETRIEVER)
        self.assertEqual(lab.assess(85.0, 50.0, 5.0), SafetyLevel.CAUTION)
        self.assertEqual(lab.assess(90.0, 50.0, 5.0), SafetyLevel.CAUTION)

    def test_outside_both_ranges_is_unsafe(self):
        lab = profile_for(BreedId.LABRADOR_RETRIEVER)
        self.assertEqual(lab.assess(95.0, 50.0, 5.0), SafetyLevel.UNSAFE)
        self.assertEqual(lab.assess(40.0, 50.0, 5.0), SafetyLevel.UNSAFE)
        # gap between safe (<=80) and caution (>=81)
        self.assertEqual(lab.assess(80.5, 50.0, 5.0), SafetyLevel.UNSAFE)

    def test_mixed_breed_low_band_is_caution(self):
        mixed = profile_for(BreedId.MIXED)
        self.assertEqual(mixed.assess(60.0, 40.0, 5.0), SafetyLevel.CAUTION)
        self.assertEqual(mixed.assess(55.0, 40.0, 5.0), SafetyLevel.CAUTION)

    def test_mixed_breed_high_band_is_caution(self):
        mixed = profile_for(BreedId.MIXED)
        self.assertEqual(mixed.assess(80.0, 40.0, 5.0), SafetyLevel.CAUTION)
        self.assertEqual(mixed.assess(85.0, 40.0, 5.0), SafetyLevel.CAUTION)

    def test_mixed_breed_outside_bands_is_unsafe(self):
        mixed = profile_for(BreedId.MIXED)
        self.assertEqual(mixed.assess(86.0, 40.0, 5.0), SafetyLevel.UNSAFE)
        self.assertEqual(mixed.assess(50.0, 40.0, 5.0), SafetyLevel.UNSAFE)
        self.assertEqual(mixed.assess(78.5, 40.0, 5.0), SafetyLevel.UNSAFE)

    def test_other_breeds_have_no_extra_bands(self):
        for breed_id, profile in list_profiles():
            if breed_id == BreedId.MIXED:
                continue
            self.assertEqual(profile.extra_caution_ranges, ())


class TestWalkRecommendation(unittest.TestCase):
    def test_messages_follow_profile_level(self):
        lab = profile_for(BreedId.LABRADOR_RETRIEVER)
        safe = WeatherReading(temperature=72.0, humidity=50.0, wind_speed=10.0)
        caution = WeatherReading(temperature=85.0, humidity=50.0, wind_speed=10.0)
        unsafe = WeatherReading(temperature=100.0, humidity=50.0, wind_speed=10.0)
        self.assertEqual(lab.walk_recommendation(safe), "Perfect for walks!")
        self.assertEqual(lab.walk_recommendation(caution), "Exercise caution during walks")
        self.assertEqual(lab.walk_recommendation(unsafe), "Avoid outdoor activities")


if __name__ == "__main__":
    unittest.main()
