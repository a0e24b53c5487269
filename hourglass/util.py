"""Unit length constants for hourglass.

Durations are measured against a working-time calendar rather than a civil
one: a day is one eight-hour shift, a week is five days, a month is
twenty-two working days and a year is 260 working days.
All values are in seconds.
"""

SECOND = 1
MINUTE = 60
HOUR = 3600
DAY = 8 * HOUR
WEEK = 5 * DAY
MONTH = 22 * DAY
YEAR = 260 * DAY
