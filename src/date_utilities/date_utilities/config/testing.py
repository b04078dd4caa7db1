# Fixed so formatted output does not depend on the machine running the tests
DEFAULT_LOCALE = "en_US"
