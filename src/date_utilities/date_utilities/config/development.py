import os

# CLDR locale used for text fields and the localized "full" style
DEFAULT_LOCALE = os.getenv("DATE_UTILITIES_LOCALE", "en_US")
