"""
Tests for YAML configuration loading and run configuration.
"""
import os
import tempfile
import unittest

from depparse.parsing.parse_config import ParseConfig
from depparse.utils.constants import load_config, config


class TestLoadConfig(unittest.TestCase):

    def test_packaged_defaults(self):
        self.assertIn('scoring', config)
        self.assertEqual(config['transition']['arc_threshold'], 0.3)
        self.assertEqual(config['parsing']['chunk_size'], 50)

    def test_custom_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, 'custom.yaml')
            with open(path, 'w', encoding='utf-8') as f:
                f.write("parsing:\n  algorithm: arc-standard\n  max_samples: 5\n")
            loaded = load_config(path)
            self.assertEqual(loaded['parsing']['algorithm'], 'arc-standard')
            self.assertEqual(ParseConfig.from_config(loaded).max_samples, 5)

    def test_non_mapping_rejected(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, 'bad.yaml')
            with open(path, 'w', encoding='utf-8') as f:
                f.write("- just\n- a list\n")
            with self.assertRaises(ValueError):
                load_config(path)


class TestParseConfig(unittest.TestCase):

    def test_defaults(self):
        cfg = ParseConfig()
        self.assertEqual(cfg.algorithm, 'eisner')
        self.assertEqual(cfg.max_samples, 1000)
        self.assertEqual(cfg.chunk_size, 50)
        self.assertIsNone(cfg.sample_percent)

    def test_alias_normalized(self):
        self.assertEqual(ParseConfig(algorithm='chu-liu').algorithm, 'arborescence')

    def test_validation(self):
        with self.assertRaises(ValueError):
            ParseConfig(algorithm='nope')
        with self.assertRaises(ValueError):
            ParseConfig(max_samples=-1)
        with self.assertRaises(ValueError):
            ParseConfig(chunk_size=0)
        with self.assertRaises(ValueError):
            ParseConfig(sample_percent=0)
        with self.assertRaises(ValueError):
            ParseConfig(sample_percent=150)

    def test_overrides_ignore_none(self):
        cfg = ParseConfig.from_config(algorithm=None, max_samples=7)
        self.assertEqual(cfg.algorithm, 'eisner')
        self.assertEqual(cfg.max_samples, 7)

    def test_sample_limit(self):
        self.assertEqual(ParseConfig(max_samples=1000).sample_limit(2500), 1000)
        self.assertEqual(ParseConfig(max_samples=1000).sample_limit(10), 10)
        self.assertEqual(ParseConfig(sample_percent=25).sample_limit(10), 3)
        self.assertEqual(ParseConfig(sample_percent=50, max_samples=100).sample_limit(1000), 100)
        self.assertEqual(ParseConfig().sample_limit(0), 0)


if __name__ == '__main__':
    unittest.main()
