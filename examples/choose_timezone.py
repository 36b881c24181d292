"""Choose a timezone the way an installer script would."""

from grid_menu import select_option

TIMEZONES = [
    "Europe/Madrid (default)",
    "Europe/Paris",
    "Europe/Amsterdam",
    "Europe/Berlin",
    "Europe/Brussels",
    "Europe/Helsinki",
    "Europe/Lisbon",
    "Europe/London",
    "Europe/Oslo",
    "Europe/Prague",
    "Europe/Rome",
    "Europe/Stockholm",
    "Europe/Vienna",
    "Europe/Warsaw",
    "America/New_York",
    "America/Los_Angeles",
    "America/Chicago",
    "America/Sao_Paulo",
    "Asia/Shanghai",
    "Asia/Tokyo",
    "Asia/Seoul",
    "Asia/Kolkata",
    "Australia/Sydney",
    "Africa/Johannesburg",
    "UTC",
]


def main() -> None:
    timezone, ok = select_option("Select timezone:", TIMEZONES)
    if not ok:
        print("No timezone selected.")
        return
    print(f"Selected timezone: {timezone.removesuffix(' (default)')}")


if __name__ == "__main__":
    main()
