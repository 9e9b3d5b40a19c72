import datetime as dt
import unittest

from pydantic import ValidationError

from walkcast.domain import WeatherReading
from walkcast.weather import (
    format_humidity,
    format_temperature,
    format_wind_speed,
    reading_from_openweather,
    to_display_strings,
)


def _payload(**overrides):
    base = {
        "coord": {"lat": 40.7, "lon": -74.0},
        "weather": [{"id": 800, "main": "Clear", "description": "clear sky", "icon": "01d"}],
        "main": {
            "temp": 72.4,
            "feels_like": 71.0,
            "temp_min": 70.0,
            "temp_max": 75.0,
            "pressure": 1015,
            "humidity": 55,
        },
        "wind": {"speed": 8.2, "deg": 200},
        "sys": {"country": "US", "sunrise": 1749980000, "sunset": 1750033000},
        "name": "New York",
        "dt": 1750000000,  # 2025-06-15 15:06:40 UTC
        "timezone": -14400,
        "id": 5128581,
        "cod": 200,
    }
    base.update(overrides)
    return base


class TestReadingFromOpenWeather(unittest.TestCase):
    def test_parses_core_fields(self):
        r = reading_from_openweather(_payload())
        self.assertEqual(r.temperature, 72.4)
        self.assertEqual(r.humidity, 55.0)
        self.assertEqual(r.wind_speed, 8.2)
        self.assertEqual(r.condition, "Clear")

    def test_local_timestamp_and_hour(self):
        r = reading_from_openweather(_payload())
        self.assertEqual(r.timestamp.utcoffset(), dt.timedelta(hours=-4))
        self.assertEqual(r.hour, 11)
        self.assertEqual(r.hour_of_day, 11)

    def test_missing_wind_is_calm(self):
        payload = _payload()
        del payload["wind"]
        self.assertEqual(reading_from_openweather(payload).wind_speed, 0.0)

    def test_missing_condition_and_time(self):
        payload = _payload(weather=[])
        del payload["dt"]
        r = reading_from_openweather(payload)
        self.assertEqual(r.condition, "Unknown")
        self.assertIsNone(r.timestamp)
        self.assertIsNone(r.hour_of_day)

    def test_missing_main_raises(self):
        payload = _payload()
        del payload["main"]
        with self.assertRaises(ValueError):
            reading_from_openweather(payload)

    def test_missing_humidity_raises(self):
        with self.assertRaises(ValueError):
            reading_from_openweather(_payload(main={"temp": 70.0}))

    def test_malformed_payloads_raise_value_error(self):
        bad = {
            "list temp": _payload(main={"temp": [1], "humidity": 50}),
            "string temp": _payload(main={"temp": "70", "humidity": 50}),
            "bool humidity": _payload(main={"temp": 70.0, "humidity": True}),
            "nan temp": _payload(main={"temp": float("nan"), "humidity": 50}),
            "weather object": _payload(weather={"a": 1}),
            "wind list": _payload(wind=[5]),
            "wind speed string": _payload(wind={"speed": "fast"}),
            "huge dt": _payload(dt=10 ** 20),
            "float dt": _payload(dt=1750000000.5),
            "huge timezone": _payload(timezone=10 ** 9),
            "negative humidity": _payload(main={"temp": 70.0, "humidity": -5}),
        }
        for label, payload in bad.items():
            with self.subTest(label):
                with self.assertRaises(ValueError):
                    reading_from_openweather(payload)

    def test_non_string_condition_is_unknown(self):
        r = reading_from_openweather(_payload(weather=[{"main": 42}]))
        self.assertEqual(r.condition, "Unknown")


class TestWeatherReading(unittest.TestCase):
    def test_rejects_out_of_range_values(self):
        with self.assertRaises(ValidationError):
            WeatherReading(temperature=70.0, humidity=120.0)
        with self.assertRaises(ValidationError):
            WeatherReading(temperature=70.0, humidity=50.0, hour=24)

    def test_hour_takes_precedence_over_timestamp(self):
        r = WeatherReading(temperature=70.0, humidity=50.0, hour=9,
                           timestamp=dt.datetime(2025, 1, 1, 15, 0))
        self.assertEqual(r.hour_of_day, 9)


class TestFormatting(unittest.TestCase):
    def test_formatters_round_half_away_from_zero(self):
        self.assertEqual(format_temperature(72.5), "73°F")
        self.assertEqual(format_temperature(72.4), "72°F")
        self.assertEqual(format_temperature(-0.5), "-1°F")
        self.assertEqual(format_humidity(49.5), "50%")
        self.assertEqual(format_wind_speed(10.2), "10 mph")

    def test_display_strings(self):
        r = WeatherReading(temperature=68.6, humidity=40.0, wind_speed=3.0)
        self.assertEqual(
            to_display_strings(r),
            {"temperature": "69°F", "humidity": "40%", "wind_speed": "3 mph", "condition": "Unknown"},
        )


if __name__ == "__main__":
    unittest.main()
