"""Per-route transforms from a validated person record to response bodies."""

from __future__ import annotations

from datetime import datetime, timezone

from randomuser_proxy.schemas import AddressSummary, LoginSummary, Person, PersonSummary


def person_summary(person: Person) -> PersonSummary:
    return PersonSummary(
        fullName=f"{person.name.first} {person.name.last}",
        country=person.location.country,
    )


def postcode_text(postcode: str | int | float) -> str:
    """Render a postcode as a string; integral numbers lose any ``.0``."""

    if isinstance(postcode, float) and postcode.is_integer():
        return str(int(postcode))
    return str(postcode)


def address_summary(person: Person) -> AddressSummary:
    return AddressSummary(
        city=person.location.city,
        postcode=postcode_text(person.location.postcode),
    )


def registration_day(timestamp: str) -> str:
    """Return the UTC calendar day of an ISO-8601 timestamp as ``YYYY-MM-DD``.

    Naive timestamps are taken to be UTC.

    Raises:
        ValueError: if ``timestamp`` is not ISO-8601.
    """

    parsed = datetime.fromisoformat(timestamp)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc).date().isoformat()


def login_summary(person: Person) -> LoginSummary:
    username = person.login.username
    registered = registration_day(person.registered.date)
    return LoginSummary(
        username=username,
        registeredDate=registered,
        summary=f"{username} (registered on {registered})",
    )
