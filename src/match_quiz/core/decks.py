"""
Built-in decks.

The default deck is used when the GUI is started without ``--deck``.
Two answers are deliberately identical ("12"): pairing is by item
identity, so the matching question still has to be found.
"""

DEFAULT_DECK_TITLE = "General knowledge"

DEFAULT_DECK: tuple[tuple[str, str], ...] = (
    ("Capital of France", "Paris"),
    ("1 + 1", "2"),
    ("Colour of the sky", "Blue"),
    ("Language used to build iOS apps", "Swift"),
    ("Days in a leap year", "366"),
    ("Capital of Germany", "Berlin"),
    ("3 * 3", "9"),
    ("Capital of Italy", "Rome"),
    ("Author of 'Pan Tadeusz'", "Adam Mickiewicz"),
    ("Square root of 16", "4"),
    ("Colour of grass", "Green"),
    ("Apple's phone operating system", "iOS"),
    ("Capital of Spain", "Madrid"),
    ("5 - 2", "3"),
    ("Capital of Poland", "Warsaw"),
    ("7 + 5", "12"),
    ("Colour of blood", "Red"),
    ("Months in a year", "12"),
    ("Hours in a day", "24"),
    ("Capital of Portugal", "Lisbon"),
)
