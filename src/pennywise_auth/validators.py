"""Input validators for identifiers, email addresses and passwords.

Every check of a validator runs, and every failure is reported: callers
receive one ``Err`` whose ``details`` lists all problems found, never just
the first one.
"""

from __future__ import annotations

import logging
import re
from typing import Any, Awaitable, Callable

import dns.asyncresolver
import dns.exception
import dns.resolver
from disposable_email_domains import blocklist
from email_validator import EmailNotValidError
from email_validator import validate_email as check_email_format

from pennywise.domain.shared.result import Err, ErrorCode, Ok, Result

logger = logging.getLogger(__name__)

MxLookup = Callable[[str], Awaitable[list[str]]]

_POSITIVE_INTEGER = re.compile(r"[0-9]+")

PASSWORD_MIN_LENGTH = 8
PASSWORD_SYMBOLS = '!@#$%^&*(),.?":{}|<>'

EMAIL_FORMAT_MESSAGE = "Invalid email address format."
EMAIL_DISPOSABLE_MESSAGE = "Disposable or temporary email addresses are not allowed."
EMAIL_NO_MX_MESSAGE = "The email domain exists but cannot receive emails."
EMAIL_BAD_DOMAIN_MESSAGE = "The email domain is invalid or does not exist."

PASSWORD_TYPE_MESSAGE = "Password must be a string."
_PASSWORD_RULES: list[tuple[Callable[[str], bool], str]] = [
    (
        lambda p: len(p) >= PASSWORD_MIN_LENGTH,
        f"Password must be at least {PASSWORD_MIN_LENGTH} characters long.",
    ),
    (
        lambda p: re.search(r"[a-z]", p) is not None,
        "Password must contain at least one lowercase letter.",
    ),
    (
        lambda p: re.search(r"[A-Z]", p) is not None,
        "Password must contain at least one uppercase letter.",
    ),
    (
        lambda p: re.search(r"[0-9]", p) is not None,
        "Password must contain at least one digit.",
    ),
    (
        lambda p: any(c in PASSWORD_SYMBOLS for c in p),
        "Password must contain at least one symbol.",
    ),
]


def is_positive_integer(value: str) -> bool:
    """Return True if ``value`` consists only of ASCII digits.

    Signs, whitespace, decimal points and the empty string are rejected.

    Examples
    --------
    >>> is_positive_integer("42")
    True
    >>> is_positive_integer(" 42")
    False
    """
    return isinstance(value, str) and _POSITIVE_INTEGER.fullmatch(value) is not None


async def lookup_mx(domain: str) -> list[str]:
    """Resolve the MX hosts of a domain.

    Returns
    -------
    The exchange host names, or an empty list when the domain exists but
    publishes no MX record

    Raises
    ------
    dns.exception.DNSException
        If the domain does not exist or cannot be resolved
    """
    try:
        answer = await dns.asyncresolver.resolve(domain, "MX")
    except dns.resolver.NoAnswer:
        return []
    return [str(record.exchange).rstrip(".") for record in answer]


def _email_domain(email: str) -> str:
    local, sep, domain = email.strip().lower().rpartition("@")
    if not sep or not local:
        return ""
    return domain


def _is_disposable(domain: str) -> bool:
    # Match the domain itself or any parent (mail.tempmail.com -> tempmail.com)
    labels = domain.split(".")
    return any(".".join(labels[i:]) in blocklist for i in range(len(labels)))


async def _check_mx(domain: str, mx_lookup: MxLookup) -> str | None:
    if not domain:
        return EMAIL_BAD_DOMAIN_MESSAGE
    try:
        hosts = await mx_lookup(domain)
    except dns.exception.DNSException as e:
        logger.debug("MX lookup failed for %s: %s", domain, e)
        return EMAIL_BAD_DOMAIN_MESSAGE
    if not hosts:
        return EMAIL_NO_MX_MESSAGE
    return None


async def validate_email(
    email: str,
    mx_lookup: MxLookup = lookup_mx,
) -> Result[str]:
    """Validate an email address.

    Runs three independent checks: address format, disposable domain, and
    MX records of the domain. The MX lookup is the only network call.

    Parameters
    ----------
    email
        The raw address as submitted
    mx_lookup
        Coroutine resolving a domain to its MX hosts (see ``lookup_mx``)

    Returns
    -------
    ``Ok`` with the trimmed, lower-cased address, or ``Err(INVALID_EMAIL)``
    listing every failed check
    """
    if not isinstance(email, str):
        return Err(ErrorCode.INVALID_EMAIL, "Invalid email address.", [EMAIL_FORMAT_MESSAGE])

    details: list[str] = []

    try:
        check_email_format(email.strip(), check_deliverability=False)
    except EmailNotValidError:
        details.append(EMAIL_FORMAT_MESSAGE)

    domain = _email_domain(email)
    if domain and _is_disposable(domain):
        details.append(EMAIL_DISPOSABLE_MESSAGE)

    mx_problem = await _check_mx(domain, mx_lookup)
    if mx_problem:
        details.append(mx_problem)

    if details:
        return Err(ErrorCode.INVALID_EMAIL, "Invalid email address.", details)
    return Ok(email.strip().lower())


def validate_password(password: Any) -> Result[str]:
    """Check a password against the strength rules.

    All five rules are evaluated; each violated rule contributes one
    message. The password is returned unchanged on success.

    Examples
    --------
    >>> validate_password("Abcd123!")
    Ok(value='Abcd123!')
    >>> validate_password("abc").details[0]
    'Password must be at least 8 characters long.'
    """
    if not isinstance(password, str):
        return Err(ErrorCode.INVALID_PASSWORD, "Invalid password.", [PASSWORD_TYPE_MESSAGE])

    details = [message for rule, message in _PASSWORD_RULES if not rule(password)]
    if details:
        return Err(ErrorCode.INVALID_PASSWORD, "Invalid password.", details)
    return Ok(password)
