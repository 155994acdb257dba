"""Library circulation desk.

Tracks books, members and loans, with due-date enforcement, late-fee
calculation and notification hooks on registration, checkout and late return.
"""

__version__ = "0.1.0"
