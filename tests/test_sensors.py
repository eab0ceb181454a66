#!/usr/bin/env python3
"""
Tests Unitaires pour le systeme triple capteur
==============================================
Tests automatises pour valider:
- Configuration
- Generateur de mesures
- Classification par capteur
- Statistiques et plages min/max
- Rapport console
"""

import sys
import unittest
from pathlib import Path

# Ajouter le chemin des modules
sys.path.insert(0, str(Path(__file__).parent.parent / 'src'))

from core.config import SensorConfig
from interface.sensor_interface import TimestampData
from simulation.sensor_simulator import SensorDataGenerator
from perception.sensor_classifier import SensorClassifier
from perception.sensor_statistics import SensorStatistics, history_range
from visualization.console_report import (
    format_lidar_line, format_camera_line, format_imu_line,
    format_sample, format_summary, TERMINATOR,
)


def make_samples():
    """Deux instants aux valeurs connues."""
    return [
        TimestampData(
            timestamp=0,
            lidar_readings=(2.0, 3.0),
            camera_readings=(200, 200, 200),
            imu_readings=(1.0, 2.0, 2.0),
        ),
        TimestampData(
            timestamp=1,
            lidar_readings=(0.4, 0.6),
            camera_readings=(30, 30, 30),
            imu_readings=(60.0, 0.0, 0.0),
        ),
    ]


def make_statistics():
    classifier = SensorClassifier()
    stats = SensorStatistics()
    for sample in make_samples():
        stats.update(classifier.classify(sample))
    return stats


class TestSensorConfig(unittest.TestCase):
    """Tests pour SensorConfig."""

    def test_defaults(self):
        """Test valeurs par defaut coherentes."""
        config = SensorConfig()
        self.assertEqual(config.rgb_min, 0)
        self.assertEqual(config.rgb_max, 255)
        self.assertLessEqual(config.lidar_min_range, config.lidar_max_range)
        self.assertLessEqual(config.imu_min_rotation, config.imu_max_rotation)

    def test_invalid_values(self):
        """Test parametres incoherents refuses."""
        invalid = [
            dict(num_timestamps=-1),
            dict(lidar_readings_count=-1),
            dict(lidar_min_range=5.0, lidar_max_range=1.0),
            dict(rgb_min=10, rgb_max=5),
            dict(rgb_max=256),
            dict(imu_min_rotation=10.0, imu_max_rotation=-10.0),
            dict(imu_stability_threshold=-1.0),
        ]
        for kwargs in invalid:
            with self.subTest(**kwargs):
                with self.assertRaises(ValueError):
                    SensorConfig(**kwargs)

    def test_with_timestamps(self):
        """Test copie avec un autre nombre d'instants."""
        config = SensorConfig(obstacle_threshold=2.0)
        other = config.with_timestamps(12)
        self.assertEqual(other.num_timestamps, 12)
        self.assertEqual(other.obstacle_threshold, 2.0)
        self.assertEqual(config.num_timestamps, SensorConfig().num_timestamps)


class TestSensorDataGenerator(unittest.TestCase):
    """Tests pour le generateur."""

    def setUp(self):
        self.config = SensorConfig(num_timestamps=20, lidar_readings_count=8)
        self.generator = SensorDataGenerator(self.config, seed=42)

    def test_sample_count_and_timestamps(self):
        """Test nombre d'instants et index croissants."""
        samples = self.generator.generate()
        self.assertEqual(len(samples), 20)
        self.assertEqual([s.timestamp for s in samples], list(range(20)))

    def test_values_in_range(self):
        """Test valeurs dans les plages declarees."""
        cfg = self.config
        for sample in self.generator.generate():
            self.assertEqual(len(sample.lidar_readings), cfg.lidar_readings_count)
            for reading in sample.lidar_readings:
                self.assertGreaterEqual(reading, cfg.lidar_min_range)
                self.assertLessEqual(reading, cfg.lidar_max_range)

            self.assertEqual(len(sample.camera_readings), 3)
            for channel in sample.camera_readings:
                self.assertIsInstance(channel, int)
                self.assertGreaterEqual(channel, cfg.rgb_min)
                self.assertLessEqual(channel, cfg.rgb_max)

            self.assertEqual(len(sample.imu_readings), 3)
            for axis in sample.imu_readings:
                self.assertGreaterEqual(axis, cfg.imu_min_rotation)
                self.assertLessEqual(axis, cfg.imu_max_rotation)

    def test_seed_is_reproducible(self):
        """Test meme graine -> memes mesures."""
        other = SensorDataGenerator(self.config, seed=42)
        self.assertEqual(self.generator.generate(), other.generate())
        self.assertEqual(self.generator.seed, 42)

    def test_entropy_seed_is_captured(self):
        """Test graine effective conservee sans graine explicite."""
        generator = SensorDataGenerator(self.config)
        self.assertIsInstance(generator.seed, int)
        replay = SensorDataGenerator(self.config, seed=generator.seed)
        self.assertEqual(generator.generate(3), replay.generate(3))

    def test_degenerate_ranges(self):
        """Test plages reduites a un point."""
        config = SensorConfig(rgb_min=100, rgb_max=100, lidar_readings_count=0)
        sample = SensorDataGenerator(config, seed=1).generate(1)[0]
        self.assertEqual(sample.camera_readings, (100, 100, 100))
        self.assertEqual(sample.lidar_readings, ())

    def test_negative_count(self):
        """Test nombre negatif refuse."""
        with self.assertRaises(ValueError):
            self.generator.generate(-1)


class TestSensorClassifier(unittest.TestCase):
    """Tests pour SensorClassifier."""

    def setUp(self):
        self.classifier = SensorClassifier(SensorConfig())

    def test_lidar_with_obstacles(self):
        """Test LIDAR avec obstacles et point trop proche."""
        lidar = self.classifier.classify_lidar((0.8, 2.0, 0.4, 5.0))
        self.assertAlmostEqual(lidar.average, 2.05)
        self.assertEqual(lidar.obstacle_count, 2)
        self.assertFalse(lidar.is_valid)
        self.assertEqual(lidar.status, "POOR")

    def test_lidar_thresholds_are_strict(self):
        """Test seuils stricts (obstacle <, validite >)."""
        lidar = self.classifier.classify_lidar((1.0, 2.0, 3.0))
        self.assertEqual(lidar.obstacle_count, 0)
        self.assertEqual(lidar.status, "GOOD")
        self.assertAlmostEqual(lidar.average, 2.0)

        lidar = self.classifier.classify_lidar((0.5, 2.0))
        self.assertFalse(lidar.is_valid)

    def test_lidar_empty(self):
        """Test LIDAR sans faisceau."""
        lidar = self.classifier.classify_lidar(())
        self.assertEqual(lidar.average, 0.0)
        self.assertEqual(lidar.obstacle_count, 0)
        self.assertTrue(lidar.is_valid)

    def test_camera_modes(self):
        """Test luminosite et modes camera."""
        camera = self.classifier.classify_camera((200, 100, 90))
        self.assertAlmostEqual(camera.brightness, 130.0)
        self.assertEqual((camera.mode, camera.status), ("DAY", "GOOD"))

        camera = self.classifier.classify_camera((128, 128, 128))
        self.assertEqual((camera.mode, camera.status), ("NIGHT", "GOOD"))

        camera = self.classifier.classify_camera((50, 50, 50))
        self.assertEqual((camera.mode, camera.status), ("NIGHT", "POOR"))

    def test_camera_real_division(self):
        """Test division reelle."""
        camera = self.classifier.classify_camera((0, 0, 1))
        self.assertAlmostEqual(camera.brightness, 1.0 / 3.0)

    def test_imu_stable(self):
        """Test IMU stable."""
        imu = self.classifier.classify_imu((3.0, 4.0, 0.0))
        self.assertAlmostEqual(imu.total_rotation, 5.0)
        self.assertEqual((imu.mode, imu.status), ("STABLE", "GOOD"))

    def test_imu_stability_is_strict(self):
        """Test |axe| == seuil -> instable."""
        imu = self.classifier.classify_imu((5.0, 0.0, 0.0))
        self.assertEqual(imu.mode, "UNSTABLE")

    def test_imu_range(self):
        """Test plage IMU inclusive."""
        imu = self.classifier.classify_imu((45.0, -45.0, 0.0))
        self.assertEqual(imu.status, "GOOD")
        imu = self.classifier.classify_imu((-50.0, 0.0, 0.0))
        self.assertEqual((imu.mode, imu.status), ("UNSTABLE", "POOR"))

    def test_classify_sample(self):
        """Test classification d'un instant."""
        assessment = self.classifier.classify(make_samples()[1])
        self.assertEqual(assessment.timestamp, 1)
        self.assertEqual(assessment.lidar.obstacle_count, 2)
        self.assertEqual(assessment.camera.mode, "NIGHT")
        self.assertEqual(assessment.imu.status, "POOR")


class TestHistoryRange(unittest.TestCase):
    """Tests pour history_range."""

    def test_first_min_last_max(self):
        """Test premier min, dernier max."""
        extrema = history_range([3.0, 1.0, 5.0, 1.0, 5.0], [10, 11, 12, 13, 14])
        self.assertEqual((extrema.minimum, extrema.min_timestamp), (1.0, 11))
        self.assertEqual((extrema.maximum, extrema.max_timestamp), (5.0, 14))

    def test_constant_history(self):
        """Test historique constant."""
        extrema = history_range([2.0, 2.0, 2.0], [0, 1, 2])
        self.assertEqual(extrema.min_timestamp, 0)
        self.assertEqual(extrema.max_timestamp, 2)

    def test_empty_history(self):
        """Test historique vide."""
        self.assertIsNone(history_range([], []))

    def test_length_mismatch(self):
        """Test longueurs differentes."""
        with self.assertRaises(ValueError):
            history_range([1.0, 2.0], [0])


class TestSensorStatistics(unittest.TestCase):
    """Tests pour SensorStatistics."""

    def test_empty(self):
        """Test statistiques sans mesure."""
        stats = SensorStatistics()
        self.assertEqual(stats.total_operations, 0)
        self.assertEqual(stats.valid_percentage, 0.0)
        self.assertEqual(stats.average_lidar_distance, 0.0)
        self.assertEqual(stats.average_camera_brightness, 0.0)
        self.assertEqual(stats.average_imu_rotation, 0.0)
        self.assertTrue(all(c.reliability == 0.0 for c in stats.counters))
        self.assertIsNone(stats.lidar_range)
        self.assertIsNone(stats.brightness_range)
        self.assertIsNone(stats.rotation_range)

    def test_counter_order(self):
        """Test table des compteurs LIDAR, Camera, IMU."""
        labels = [c.sensor_type.label for c in SensorStatistics().counters]
        self.assertEqual(labels, ["LIDAR", "Camera", "IMU"])

    def test_aggregation(self):
        """Test agregation de deux instants."""
        stats = make_statistics()

        self.assertEqual(stats.total_operations, 6)
        self.assertEqual(stats.total_valid, 3)
        self.assertAlmostEqual(stats.valid_percentage, 50.0)
        for counter in stats.counters:
            self.assertEqual((counter.total, counter.valid), (2, 1))
            self.assertAlmostEqual(counter.reliability, 50.0)

        self.assertAlmostEqual(stats.average_lidar_distance, 1.5)
        self.assertAlmostEqual(stats.average_camera_brightness, 115.0)
        self.assertAlmostEqual(stats.average_imu_rotation, 31.5)
        self.assertEqual(stats.total_obstacles_detected, 2)
        self.assertEqual((stats.day_mode_count, stats.night_mode_count), (1, 1))
        self.assertEqual((stats.stable_mode_count, stats.unstable_mode_count), (1, 1))
        self.assertEqual(stats.processed_timestamps, [0, 1])

        lidar_range = stats.lidar_range
        self.assertAlmostEqual(lidar_range.minimum, 0.5)
        self.assertEqual(lidar_range.min_timestamp, 1)
        self.assertAlmostEqual(lidar_range.maximum, 2.5)
        self.assertEqual(lidar_range.max_timestamp, 0)

    def test_validity_monotonicity(self):
        """Test valid <= total et total == nombre d'instants."""
        config = SensorConfig(num_timestamps=50)
        classifier = SensorClassifier(config)
        stats = SensorStatistics()
        for sample in SensorDataGenerator(config, seed=3).generate():
            stats.update(classifier.classify(sample))

        for counter in stats.counters:
            self.assertEqual(counter.total, 50)
            self.assertLessEqual(counter.valid, counter.total)
        self.assertEqual(stats.day_mode_count + stats.night_mode_count, 50)
        self.assertEqual(stats.stable_mode_count + stats.unstable_mode_count, 50)

        extrema = stats.rotation_range
        self.assertEqual(extrema.minimum, min(stats.imu_rotation_history))
        self.assertEqual(extrema.maximum, max(stats.imu_rotation_history))


class TestConsoleReport(unittest.TestCase):
    """Tests pour le rapport console."""

    def setUp(self):
        classifier = SensorClassifier()
        self.assessments = [classifier.classify(s) for s in make_samples()]

    def test_sensor_lines(self):
        """Test lignes capteurs."""
        first = self.assessments[0]
        self.assertEqual(format_lidar_line(first.lidar),
                         "LIDAR: [2.00, 3.00] Avg: 2.50 m, Obstacles: 0, Status: GOOD")
        self.assertEqual(format_camera_line(first.camera),
                         "Camera: RGB(200, 200, 200), Brightness: 200.00, Mode: DAY, Status: GOOD")
        self.assertEqual(format_imu_line(first.imu),
                         "IMU: RPY(1.00, 2.00, 2.00), Total Rotation: 3.00 deg, "
                         "Mode: STABLE, Status: GOOD")

    def test_sample_block(self):
        """Test bloc d'un instant."""
        block = format_sample(self.assessments[1])
        self.assertEqual(block[0], "Processing Timestamp: 1")
        self.assertEqual(block[1], "LIDAR: [0.40, 0.60] Avg: 0.50 m, Obstacles: 2, Status: POOR")
        self.assertEqual(block[-1], "")

    def test_summary(self):
        """Test resume final."""
        lines = format_summary(make_statistics())
        self.assertIn("Total Sensor Processing Operations: 6", lines)
        self.assertIn("Valid Sensor Readings: 3 / 6 (50.00%)", lines)
        self.assertIn("  - LIDAR: 50.00%", lines)
        self.assertIn("Average Camera Brightness: 115.00", lines)
        self.assertIn("LIDAR Average Range: 0.50 m (Timestamp 1) to 2.50 m (Timestamp 0)", lines)
        self.assertIn("Camera Brightness Range: 30.00 (Timestamp 1) to 200.00 (Timestamp 0)", lines)
        self.assertIn("IMU Rotation Range: 3.00 deg (Timestamp 0) to 60.00 deg (Timestamp 1)", lines)
        self.assertEqual(lines[-1], TERMINATOR)

    def test_summary_without_samples(self):
        """Test resume sans plage."""
        lines = format_summary(SensorStatistics())
        self.assertFalse(any("Range" in line for line in lines))
        self.assertIn("Valid Sensor Readings: 0 / 0 (0.00%)", lines)


def run_tests():
    """Execute tous les tests et affiche un rapport."""
    loader = unittest.TestLoader()
    suite = unittest.TestSuite()

    for case in (TestSensorConfig, TestSensorDataGenerator, TestSensorClassifier,
                 TestHistoryRange, TestSensorStatistics, TestConsoleReport):
        suite.addTests(loader.loadTestsFromTestCase(case))

    runner = unittest.TextTestRunner(verbosity=2)
    result = runner.run(suite)

    print("\n" + "=" * 60)
    print("RESUME DES TESTS UNITAIRES")
    print("=" * 60)
    print(f"Tests executes: {result.testsRun}")
    print(f"Reussis: {result.testsRun - len(result.failures) - len(result.errors)}")
    print(f"Echecs: {len(result.failures)}")
    print(f"Erreurs: {len(result.errors)}")

    return result.wasSuccessful()


if __name__ == "__main__":
    success = run_tests()
    sys.exit(0 if success else 1)
