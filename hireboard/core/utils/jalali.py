import datetime
import re

'''
A module to convert Jalali (Solar Hijri) dates to A.D. and vice versa.
Usage:
print(jalali.ad2jalali((2021, 3, 21)))  # (1400, 1, 1)
print(jalali.jalali2ad((1400, 1, 1)))  # (2021, 3, 21)

Dates are exchanged with the board as `YYYY/MM/DD` strings, zero padded, so
that two strings of the same calendar compare in date order.
'''

JALALI, GREGORIAN = 'jalali', 'gregorian'

DATE_STRING_REGEX = re.compile(r'^(\d{4})/(\d{2})/(\d{2})$')

# cumulative days before each gregorian month of a non leap year
_gregorian_days_before_month = (0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334)


def string_from_tuple(tuple_to_convert):
    """
    Converts a date tuple (y, m, d) to a YYYY/MM/DD string
    """
    return '%04d/%02d/%02d' % tuple(tuple_to_convert)


def tuple_from_string(string_to_convert):
    """
    Converts a YYYY/MM/DD string to a date tuple (y, m, d)
    """
    match = DATE_STRING_REGEX.match(string_to_convert or '')
    if not match:
        raise ValueError(f"{string_to_convert} is not in YYYY/MM/DD format.")
    return tuple(int(part) for part in match.groups())


def tuple_from_date(date_to_convert):
    return date_to_convert.year, date_to_convert.month, date_to_convert.day


def is_leap_jalali(year):
    # Esfand 30 of a common year rolls over to Farvardin 1 of the next one
    return ad2jalali(jalali2ad((year, 12, 30))) == (year, 12, 30)


def days_in_jalali_month(year, month):
    if month <= 6:
        return 31
    if month <= 11:
        return 30
    return 30 if is_leap_jalali(year) else 29


def ad2jalali(ad_date):
    """
    Converts an A.D. date tuple to a Jalali date tuple
    """
    gy, gm, gd = ad_date
    gy2 = gy + 1 if gm > 2 else gy
    days = (
        355666 + (365 * gy) + ((gy2 + 3) // 4) - ((gy2 + 99) // 100)
        + ((gy2 + 399) // 400) + gd + _gregorian_days_before_month[gm - 1]
    )
    jy = -1595 + (33 * (days // 12053))
    days %= 12053
    jy += 4 * (days // 1461)
    days %= 1461
    if days > 365:
        jy += (days - 1) // 365
        days = (days - 1) % 365
    if days < 186:
        jm = 1 + (days // 31)
        jd = 1 + (days % 31)
    else:
        jm = 7 + ((days - 186) // 30)
        jd = 1 + ((days - 186) % 30)
    return jy, jm, jd


def jalali2ad(jalali_date):
    """
    Converts a Jalali date tuple to an A.D. date tuple
    """
    jy, jm, jd = jalali_date
    jy += 1595
    days = -355668 + (365 * jy) + ((jy // 33) * 8) + (((jy % 33) + 3) // 4) + jd
    if jm < 7:
        days += (jm - 1) * 31
    else:
        days += ((jm - 7) * 30) + 186

    gy = 400 * (days // 146097)
    days %= 146097
    if days > 36524:
        days -= 1
        gy += 100 * (days // 36524)
        days %= 36524
        if days >= 365:
            days += 1
    gy += 4 * (days // 1461)
    days %= 1461
    if days > 365:
        gy += (days - 1) // 365
        days = (days - 1) % 365

    gd = days + 1
    february = 29 if (gy % 4 == 0 and gy % 100 != 0) or gy % 400 == 0 else 28
    month_days = (0, 31, february, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)
    gm = 0
    while gm < 13 and gd > month_days[gm]:
        gd -= month_days[gm]
        gm += 1
    return gy, gm, gd


def is_valid(date_as_str, calendar=JALALI):
    """
    Checks a YYYY/MM/DD string is a real date of the given calendar
    """
    try:
        year, month, day = tuple_from_string(date_as_str)
    except ValueError:
        return False
    if calendar == GREGORIAN:
        try:
            datetime.date(year, month, day)
        except ValueError:
            return False
        return True
    if not 1 <= month <= 12 or day < 1:
        return False
    return day <= days_in_jalali_month(year, month)


def date_to_string(date, calendar=JALALI):
    """
    Formats a datetime.date as YYYY/MM/DD in the given calendar
    """
    date_tuple = tuple_from_date(date)
    if calendar == JALALI:
        date_tuple = ad2jalali(date_tuple)
    return string_from_tuple(date_tuple)
