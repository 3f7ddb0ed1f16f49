import doctest
import unittest

import numpy as np
import pandas as pd

import phenology.dates.dates
import phenology.dates.transform
from phenology.dates import CircularTransform
from phenology.dates import check_window
from phenology.dates import date_from_day_of_year
from phenology.dates import day_of_year
from phenology.dates import select_observations
from phenology.utilities.errors import ValidationError


def make_table(doy, year=2015):
    day, month = date_from_day_of_year(np.asarray(doy))
    return pd.DataFrame(
        dict(id=np.arange(len(day)), day=day, month=month, year=year)
    )


class TestDayOfYear(unittest.TestCase):
    def test_day_of_year_scalar(self):
        self.assertEqual(day_of_year(1, 1), 1)
        self.assertEqual(day_of_year(1, 3), 60)
        self.assertEqual(day_of_year(25, 5), 145)
        self.assertEqual(day_of_year(31, 12), 365)

    def test_day_of_year_array(self):
        np.testing.assert_array_equal(
            day_of_year([1, 28, 1], [2, 2, 3]), np.array([32, 59, 60])
        )

    def test_date_from_day_of_year_inverse(self):
        doy = np.arange(1, 366)
        day, month = date_from_day_of_year(doy)
        np.testing.assert_array_equal(day_of_year(day, month), doy)

    def test_date_from_day_of_year_scalar(self):
        self.assertEqual(date_from_day_of_year(1), (1, 1))
        self.assertEqual(date_from_day_of_year(59), (28, 2))
        self.assertEqual(date_from_day_of_year(365), (31, 12))

    def test_invalid_month(self):
        self.assertRaises(ValidationError, lambda: day_of_year(1, 13))
        self.assertRaises(ValidationError, lambda: day_of_year(1, 0))

    def test_invalid_day(self):
        self.assertRaises(ValidationError, lambda: day_of_year(0, 1))
        self.assertRaises(ValidationError, lambda: day_of_year(32, 1))

    def test_non_numeric(self):
        self.assertRaises(ValidationError, lambda: day_of_year(["a", 2], [1, 1]))
        self.assertRaises(ValidationError, lambda: day_of_year([np.nan, 2], [1, 1]))
        self.assertRaises(ValidationError, lambda: day_of_year([2.5, 2], [1, 1]))

    def test_validation_error_is_value_error(self):
        self.assertRaises(ValueError, lambda: day_of_year(1, 13))


class TestWindow(unittest.TestCase):
    def test_valid_window(self):
        self.assertEqual(check_window((1, 365)), (1, 365))
        self.assertEqual(check_window([60.0, 300.0]), (60, 300))

    def test_invalid_window(self):
        self.assertRaises(ValidationError, lambda: check_window((100, 100)))
        self.assertRaises(ValidationError, lambda: check_window((200, 100)))
        self.assertRaises(ValidationError, lambda: check_window((0, 100)))
        self.assertRaises(ValidationError, lambda: check_window((1, 366)))
        self.assertRaises(ValidationError, lambda: check_window(1))


class TestSelectObservations(unittest.TestCase):
    def setUp(self):
        self.doy = np.resize(np.arange(140, 151), 30)
        self.table = make_table(self.doy)

    def tearDown(self):
        del self.doy
        del self.table

    def test_select_from_table(self):
        obs = select_observations(observations=self.table)
        self.assertEqual(obs.n_obs, 30)
        np.testing.assert_array_equal(obs.day_of_year, self.doy)
        np.testing.assert_array_equal(obs.id, np.arange(30))

    def test_select_from_arrays(self):
        obs = select_observations(
            day=self.table["day"].to_numpy(),
            month=self.table["month"].to_numpy(),
            year=self.table["year"].to_numpy(),
            id=7,
        )
        self.assertEqual(obs.n_obs, 30)
        np.testing.assert_array_equal(obs.id, np.full(30, 7))

    def test_select_named_columns(self):
        table = self.table.rename(columns=dict(day="d", month="m", year="y"))
        obs = select_observations(day="d", month="m", year="y", observations=table)
        np.testing.assert_array_equal(obs.day_of_year, self.doy)

    def test_missing_column(self):
        table = self.table.drop(columns=["month"])
        self.assertRaises(
            ValidationError, lambda: select_observations(observations=table)
        )

    def test_column_name_without_table(self):
        self.assertRaises(
            ValidationError,
            lambda: select_observations(day="day", month=[1] * 30, year=[2000] * 30),
        )

    def test_unequal_lengths(self):
        self.assertRaises(
            ValidationError,
            lambda: select_observations(day=[1] * 30, month=[1] * 29, year=[2000] * 30),
        )

    def test_minimum_observations(self):
        obs = select_observations(observations=self.table.iloc[:25])
        self.assertEqual(obs.n_obs, 25)
        self.assertRaises(
            ValidationError,
            lambda: select_observations(observations=self.table.iloc[:24]),
        )

    def test_window_filter(self):
        doy = np.concatenate([np.full(20, 50), np.resize(np.arange(140, 151), 10)])
        obs = select_observations(observations=make_table(doy), window=(100, 200))
        self.assertEqual(obs.n_obs, 30)
        self.assertEqual(len(obs.day_of_year), 10)
        self.assertTrue(np.all(obs.day_of_year >= 100))

    def test_window_filter_inclusive(self):
        doy = np.concatenate([np.full(25, 50), [100, 100, 200, 200, 150]])
        obs = select_observations(observations=make_table(doy), window=(100, 200))
        self.assertEqual(len(obs.day_of_year), 5)

    def test_window_filter_too_few(self):
        doy = np.concatenate([np.full(26, 50), [100, 120, 150, 200]])
        self.assertRaises(
            ValidationError,
            lambda: select_observations(observations=make_table(doy), window=(100, 200)),
        )

    def test_unique(self):
        table = pd.concat([self.table, self.table.iloc[:5]], ignore_index=True)
        table["id"] = np.concatenate([np.arange(30), np.arange(5)])
        with self.assertWarns(UserWarning):
            obs = select_observations(observations=table, unique=True)
        self.assertEqual(obs.n_obs, 35)
        self.assertEqual(len(obs.day_of_year), 30)


class TestCircularTransform(unittest.TestCase):
    def test_window_bounds(self):
        t = CircularTransform(60, 300)
        self.assertEqual(float(t.to_angle(60)), 0.0)
        self.assertAlmostEqual(float(t.to_angle(300)), 2 * np.pi)
        self.assertEqual(t.span, 240)

    def test_inverse(self):
        for start, end in [(1, 365), (60, 300), (100, 101)]:
            t = CircularTransform(start, end)
            days = np.arange(start, end)
            np.testing.assert_allclose(t.to_day(t.to_angle(days)), days)

    def test_end_day_wraps_to_start(self):
        t = CircularTransform(1, 365)
        self.assertAlmostEqual(float(t.to_day(t.to_angle(365))), 1.0)

    def test_wrap_negative_angles(self):
        t = CircularTransform(1, 365)
        self.assertAlmostEqual(float(t.to_day(-np.pi / 2)), float(t.to_day(3 * np.pi / 2)))
        self.assertAlmostEqual(float(t.to_day(-4 * np.pi + 1.0)), float(t.to_day(1.0)))

    def test_lengths(self):
        t = CircularTransform(1, 365)
        self.assertAlmostEqual(float(t.days_to_angle(364)), 2 * np.pi)
        self.assertAlmostEqual(float(t.angle_to_days(t.days_to_angle(11.5))), 11.5)
        self.assertAlmostEqual(float(t.density_to_days(1 / (2 * np.pi))), 1 / 364)

    def test_invalid_window(self):
        self.assertRaises(ValidationError, lambda: CircularTransform(10, 5))


def load_tests(loader, tests, ignore):
    tests.addTests(doctest.DocTestSuite(phenology.dates.dates))
    tests.addTests(doctest.DocTestSuite(phenology.dates.transform))
    return tests


if __name__ == "__main__":
    unittest.main()
