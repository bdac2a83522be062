"""
Tests for the command-line interface.
"""

import json
import os
import shutil
import tempfile
import unittest
from pathlib import Path

import pandas as pd

from svg_to_icon.cli import main, parse_args
from svg_to_icon.config.default import DEFAULT_CONFIG, load_settings
from svg_to_icon.utils.io import load_config, save_config


class TestCLI(unittest.TestCase):
    """Tests for the svg-to-icon command."""
    
    def setUp(self):
        """Set up test fixtures."""
        self.temp_dir = tempfile.mkdtemp()
    
    def tearDown(self):
        """Clean up after tests."""
        shutil.rmtree(self.temp_dir)
    
    def _write(self, name, content):
        path = os.path.join(self.temp_dir, name)
        with open(path, 'w', encoding='utf-8') as f:
            f.write(content)
        return path
    
    def test_parse_args_defaults(self):
        """Test default argument values."""
        args = parse_args(["icons"])
        
        self.assertEqual(args.input, "icons")
        self.assertIsNone(args.output_dir)
        self.assertFalse(args.force)
        self.assertFalse(args.recursive)
        self.assertIsNone(args.report)
    
    def test_convert_single_file(self):
        """Test converting one file."""
        source = self._write("home-filled.svg", '<svg viewBox="0 0 24 24"><path d="M1 1"/></svg>')
        
        self.assertEqual(main([source]), 0)
        self.assertTrue(os.path.exists(os.path.join(self.temp_dir, "HomeFilledIcon.tsx")))
    
    def test_invalid_file_returns_error(self):
        """Test exit codes for unusable input."""
        self.assertEqual(main([self._write("bad.svg", "<div>not svg</div>")]), 1)
        self.assertEqual(main([self._write("icon.png", "<svg></svg>")]), 1)
        self.assertEqual(main([os.path.join(self.temp_dir, "missing.svg")]), 1)
    
    def test_force_overwrites(self):
        """Test that --force replaces an existing component."""
        source = self._write("dot.svg", "<svg><circle/></svg>")
        target = self._write("DotIcon.tsx", "original")
        
        self.assertEqual(main([source, "--force"]), 0)
        with open(target, 'r', encoding='utf-8') as f:
            self.assertIn("export function DotIcon", f.read())
    
    def test_directory_report(self):
        """Test converting a directory and saving a report."""
        self._write("a.svg", "<svg><path/></svg>")
        self._write("b.svg", '<svg viewBox="1 2"></svg>')
        report = os.path.join(self.temp_dir, "report", "results.csv")
        
        self.assertEqual(main([self.temp_dir, "--report", report]), 1)
        
        results_df = pd.read_csv(report)
        self.assertEqual(list(results_df["status"]), ["created", "error"])
        
        with open(os.path.join(self.temp_dir, "report", "conversion_config.json"), 'r', encoding='utf-8') as f:
            saved = json.load(f)
        self.assertEqual(saved["summary"]["created"], 1)
        self.assertEqual(saved["settings"]["component_package"], "@imile/components")
    
    def test_single_file_report(self):
        """Test that a report is written for a single file too."""
        source = self._write("dot.svg", "<svg><circle/></svg>")
        report = os.path.join(self.temp_dir, "dot.json")
        
        self.assertEqual(main([source, "--report", report]), 0)
        
        with open(report, 'r', encoding='utf-8') as f:
            rows = json.load(f)
        self.assertEqual(len(rows), 1)
        self.assertEqual(rows[0]["component"], "DotIcon")
        self.assertEqual(rows[0]["status"], "created")
        self.assertEqual(rows[0]["view_box"], "0 0 24 24")
    
    def test_config_file(self):
        """Test settings loaded from a configuration file."""
        source = self._write("star.svg", "<svg><path/></svg>")
        config = self._write("config.json", json.dumps({"file_extension": ".jsx", "default_size": 16}))
        
        self.assertEqual(main([source, "--config", config]), 0)
        with open(os.path.join(self.temp_dir, "StarIcon.jsx"), 'r', encoding='utf-8') as f:
            self.assertIn('viewBox="0 0 16 16"', f.read())


class TestSettings(unittest.TestCase):
    """Tests for configuration loading."""
    
    def setUp(self):
        """Set up test fixtures."""
        self.temp_dir = tempfile.mkdtemp()
    
    def tearDown(self):
        """Clean up after tests."""
        shutil.rmtree(self.temp_dir)
    
    def test_defaults(self):
        """Test settings without a configuration file."""
        settings = load_settings()
        
        self.assertEqual(settings, DEFAULT_CONFIG)
        self.assertIsNot(settings, DEFAULT_CONFIG)
    
    def test_unknown_keys(self):
        """Test that unknown configuration keys are rejected."""
        path = os.path.join(self.temp_dir, "config.json")
        with open(path, 'w', encoding='utf-8') as f:
            json.dump({"colour": "red"}, f)
        
        with self.assertRaises(ValueError):
            load_settings(path)
    
    def test_load_config_merges_over_defaults(self):
        """Test merging a configuration file over given defaults."""
        path = os.path.join(self.temp_dir, "config.json")
        with open(path, 'w', encoding='utf-8') as f:
            json.dump({"default_size": 32}, f)
        
        merged = load_config(path, defaults=DEFAULT_CONFIG)
        
        self.assertEqual(merged["default_size"], 32)
        self.assertEqual(merged["file_extension"], ".tsx")
        self.assertEqual(DEFAULT_CONFIG["default_size"], 24)
        self.assertEqual(load_config(path), {"default_size": 32})
    
    def test_config_must_be_object(self):
        """Test that a configuration file must hold a JSON object."""
        path = os.path.join(self.temp_dir, "config.json")
        with open(path, 'w', encoding='utf-8') as f:
            json.dump([1, 2], f)
        
        with self.assertRaises(ValueError):
            load_settings(path)
    
    def test_save_config_sorts_keys(self):
        """Test that run records are written with sorted keys and string paths."""
        path = save_config({"settings": {"b": 1, "a": 2}, "input": Path("icons")},
                           os.path.join(self.temp_dir, "run", "record.json"))
        
        with open(path, 'r', encoding='utf-8') as f:
            text = f.read()
        self.assertLess(text.index('"input"'), text.index('"settings"'))
        self.assertLess(text.index('"a"'), text.index('"b"'))
        self.assertEqual(json.loads(text)["input"], "icons")
    
    def test_missing_file(self):
        """Test a configuration path that does not exist."""
        with self.assertRaises(FileNotFoundError):
            load_settings(os.path.join(self.temp_dir, "missing.json"))


if __name__ == "__main__":
    unittest.main()
