import io
import os
import tempfile
import unittest

import numpy as np

from phenology.analysis import analyze
from phenology.analysis import check_options
from phenology.analysis import default_options
from phenology.analysis import dump_options
from phenology.analysis import load_options
from phenology.dates import date_from_day_of_year
from phenology.utilities.errors import ValidationError


class TestOptions(unittest.TestCase):
    def test_defaults(self):
        options = default_options()
        self.assertEqual(options["window"], (1, 365))
        self.assertEqual(options["nsamples"], 1000)
        self.assertEqual(options["alpha"], 0.05)
        self.assertIsNone(options["quantiles"])

    def test_load(self):
        options = load_options(io.StringIO("window: [60, 300]\nnsamples: 200\n"))
        self.assertEqual(options["window"], (60, 300))
        self.assertEqual(options["nsamples"], 200)
        self.assertEqual(options["strategy"], "nonparametric")
        self.assertEqual(list(options.keys()), list(default_options().keys()))

    def test_load_empty(self):
        self.assertEqual(load_options(io.StringIO("")), default_options())

    def test_load_file(self):
        fd, path = tempfile.mkstemp(suffix=".yaml")
        try:
            with os.fdopen(fd, "w") as f:
                f.write("bandwidth: taylor\nbias: true\n")
            options = load_options(path)
        finally:
            os.remove(path)
        self.assertEqual(options["bandwidth"], "taylor")
        self.assertTrue(options["bias"])

    def test_invalid_yaml(self):
        self.assertRaises(
            ValidationError, lambda: load_options(io.StringIO("window: [1, 2\n"))
        )
        self.assertRaises(ValidationError, lambda: load_options(io.StringIO("- 1\n- 2\n")))

    def test_invalid_options(self):
        self.assertRaises(ValidationError, lambda: check_options(dict(color="red")))
        self.assertRaises(ValidationError, lambda: check_options(dict(window=[1, 2, 3])))
        self.assertRaises(ValidationError, lambda: check_options(dict(nsamples="many")))
        self.assertRaises(ValidationError, lambda: check_options(dict(alpha=-0.1)))
        self.assertRaises(ValidationError, lambda: check_options(dict(strategy="other")))
        self.assertRaises(ValidationError, lambda: check_options(dict(rotation="left")))
        self.assertRaises(ValidationError, lambda: check_options(dict(bias="yes")))
        self.assertRaises(
            ValidationError, lambda: check_options(dict(quantiles_boxplot=[0.1, 0.9]))
        )

    def test_dump_and_load(self):
        options = check_options(dict(window=(60, 300), quantiles=[0.2, 0.5, 0.8], seed=3))
        text = dump_options(options)
        self.assertIn("window:", text)
        self.assertEqual(load_options(io.StringIO(text)), options)

    def test_analyze_with_options(self):
        doy = np.resize(np.arange(140, 151), 30)
        day, month = date_from_day_of_year(doy)
        options = load_options(io.StringIO("window: [100, 200]\nnsamples: 100\nseed: 1\n"))
        result = analyze(day=day, month=month, year=np.full(30, 2015), **options)
        self.assertEqual(result.transform.start_day, 100)
        self.assertAlmostEqual(result.mean, 145, delta=1)


if __name__ == "__main__":
    unittest.main()
