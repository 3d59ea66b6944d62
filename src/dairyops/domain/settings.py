"""Settings profiles: account details and display preferences."""

from typing import Sequence

from dairyops.domain import aggregates
from dairyops.domain.entities import Record, SettingsStats
from dairyops.domain.rules import fixed_digits, matches, one_of, required
from dairyops.domain.schema import EntitySchema, Field

LANGUAGES = ("English", "हिन्दी", "తెలుగు", "Other")
THEMES = ("Light", "Dark", "System Default")
NOTIFICATIONS = ("Enabled", "Disabled")

# 8+ characters with at least one uppercase letter and one digit
PASSWORD_PATTERN = r"(?=.*[A-Z])(?=.*\d).{8,}"


def settings_statistics(records: Sequence[Record]) -> SettingsStats:
    return SettingsStats(total_profiles=aggregates.count(records))


SETTINGS_SCHEMA = EntitySchema(
    name="settings_profile",
    title="Settings Profile",
    command_name="settings",
    fields=(
        Field(
            "username",
            "Username",
            rules=(
                required("Username is required."),
                matches(
                    r"[A-Z][A-Za-z0-9]{4,19}",
                    "Username must start with a capital letter and be 5-20 letters/numbers.",
                ),
            ),
        ),
        Field(
            "email",
            "Email",
            rules=(
                required("Email is required."),
                matches(r"[\w.-]+@[\w.-]+\.\w{2,}", "Please enter a valid email address."),
            ),
        ),
        Field(
            "password",
            "Password",
            rules=(
                required("Password is required."),
                matches(
                    PASSWORD_PATTERN,
                    "Password must be at least 8 characters, include 1 uppercase letter and 1 number.",
                ),
            ),
            secret=True,
        ),
        Field(
            "language",
            "Language",
            rules=(
                required("Please select a language."),
                one_of(LANGUAGES, "Please select a language."),
            ),
            choices=LANGUAGES,
        ),
        Field(
            "theme",
            "Theme",
            rules=(required("Please select a theme."), one_of(THEMES, "Please select a theme.")),
            choices=THEMES,
        ),
        Field(
            "notifications",
            "Notifications",
            rules=(
                required("Please select notification preference."),
                one_of(NOTIFICATIONS, "Please select notification preference."),
            ),
            choices=NOTIFICATIONS,
        ),
        Field(
            "phone",
            "Phone",
            rules=(
                required("Phone number is required."),
                fixed_digits(10, "Enter a valid 10-digit phone number."),
            ),
        ),
        Field("address", "Address", rules=(required("Address is required."),)),
        Field("organization", "Organization", rules=(required("Organization is required."),)),
    ),
    statistics=settings_statistics,
)
