"""Example: format, parse and measure local date/time values with DateTimeHelper."""

from datetime import datetime

from src.date_utilities.date_utilities.helper.service import DateTimeHelper


def main():
    helper = DateTimeHelper()
    start = helper.parse_date_time("2024-01-15 08:00", "yyyy-MM-dd HH:mm")
    end = datetime(2024, 1, 15, 17, 30)

    print(helper.format_with_pattern(start, "EEEE, MMMM d, yyyy 'at' h:mm a"))
    print(helper.format_full_localized(end, locale="de_DE"))
    print(helper.minutes_between(start, end), "minutes")

    result = helper.try_parse_date("2024-02-30", "yyyy-MM-dd")
    if not result.ok:
        print("Rejected:", result.error)


if __name__ == "__main__":
    main()
