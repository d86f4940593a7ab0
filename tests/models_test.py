import unittest

from battery_notify.errors import ConfigurationError
from battery_notify.models import BatteryReading, Thresholds, Urgency, fraction_to_percent


class TestReadings(unittest.TestCase):

    def test_fraction_is_floored(self):
        self.assertEqual(fraction_to_percent(0.999), 99)
        self.assertEqual(fraction_to_percent(0.105), 10)
        self.assertEqual(fraction_to_percent(1.0), 100)
        self.assertEqual(fraction_to_percent(0.0), 0)

    def test_fraction_is_clamped(self):
        self.assertEqual(fraction_to_percent(1.2), 100)
        self.assertEqual(fraction_to_percent(-0.1), 0)

    def test_from_fraction(self):
        reading = BatteryReading.from_fraction(0.75, charging=True)
        self.assertEqual(reading, BatteryReading(75, True))


    def test_urgency_levels(self):
        self.assertEqual([u.name for u in Urgency], ["NORMAL", "CRITICAL"])

class TestThresholds(unittest.TestCase):

    def test_valid(self):
        thresholds = Thresholds(10, 20)
        self.assertEqual((thresholds.critical, thresholds.warn), (10, 20))
        self.assertIsNone(Thresholds(5).warn)
        Thresholds(15, 15)

    def test_critical_above_warn(self):
        with self.assertRaises(ConfigurationError):
            Thresholds(30, 20)

    def test_out_of_range(self):
        with self.assertRaises(ConfigurationError):
            Thresholds(101)
        with self.assertRaises(ConfigurationError):
            Thresholds(10, 150)
        with self.assertRaises(ConfigurationError):
            Thresholds(-1)


if __name__ == '__main__':
    unittest.main()
