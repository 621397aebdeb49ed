from datetime import date

from dateutil import rrule
from django.test import SimpleTestCase

from hireboard.core.utils import jalali


class TestJalaliConversion(SimpleTestCase):
    def test_known_dates(self):
        for gregorian, persian in (
            ((2021, 3, 21), (1400, 1, 1)),
            ((2021, 3, 20), (1399, 12, 30)),
            ((2025, 3, 20), (1403, 12, 30)),
            ((2024, 9, 22), (1403, 7, 1)),
        ):
            with self.subTest(gregorian=gregorian):
                self.assertEqual(jalali.ad2jalali(gregorian), persian)
                self.assertEqual(jalali.jalali2ad(persian), gregorian)

    def test_conversion_is_reversible_across_leap_years(self):
        for day in rrule.rrule(rrule.DAILY, dtstart=date(2020, 1, 1), until=date(2026, 1, 1)):
            ad = jalali.tuple_from_date(day.date())
            self.assertEqual(jalali.jalali2ad(jalali.ad2jalali(ad)), ad)

    def test_leap_years(self):
        self.assertTrue(jalali.is_leap_jalali(1399))
        self.assertFalse(jalali.is_leap_jalali(1400))
        self.assertTrue(jalali.is_leap_jalali(1403))
        self.assertEqual(jalali.days_in_jalali_month(1400, 12), 29)
        self.assertEqual(jalali.days_in_jalali_month(1403, 12), 30)
        self.assertEqual(jalali.days_in_jalali_month(1403, 7), 30)
        self.assertEqual(jalali.days_in_jalali_month(1403, 6), 31)

    def test_is_valid(self):
        for value, calendar, expected in (
            ('1403/05/10', jalali.JALALI, True),
            ('1399/12/30', jalali.JALALI, True),
            ('1400/12/30', jalali.JALALI, False),
            ('1403/07/31', jalali.JALALI, False),
            ('1403/13/01', jalali.JALALI, False),
            ('1403/5/10', jalali.JALALI, False),
            ('1403-05-10', jalali.JALALI, False),
            ('', jalali.JALALI, False),
            ('2024/02/29', jalali.GREGORIAN, True),
            ('2023/02/29', jalali.GREGORIAN, False),
        ):
            with self.subTest(value=value, calendar=calendar):
                self.assertEqual(jalali.is_valid(value, calendar=calendar), expected)

    def test_string_conversion(self):
        self.assertEqual(jalali.date_to_string(date(2021, 3, 21)), '1400/01/01')
        self.assertEqual(
            jalali.date_to_string(date(2021, 3, 21), jalali.GREGORIAN), '2021/03/21'
        )

    def test_strings_sort_in_date_order(self):
        days = [date(2021, 3, 19), date(2021, 3, 20), date(2021, 3, 21), date(2021, 10, 1)]
        strings = [jalali.date_to_string(day) for day in days]
        self.assertEqual(strings, sorted(strings))
