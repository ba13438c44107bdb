"""
Contact line parsing.

Extracts email, phone, LinkedIn/GitHub handles and a portfolio domain from a
single free-text contact string such as:

    jane@x.com | +1-555-123-4567 | linkedin.com/in/janedoe | github.com/janedoe
"""

import re
from typing import Optional

from resumetex.contexts.intake.extraction_patterns import ContactPatterns
from resumetex.contexts.intake.logger import _log_debug
from resumetex.contexts.intake.resume_fields import ContactInfo


def _first_match(pattern: re.Pattern, text: str, group: int = 0) -> Optional[str]:
    """Return the requested group of the first match, or None."""
    match = pattern.search(text)
    return match.group(group) if match else None


def parse_contact(text: Optional[str]) -> ContactInfo:
    """
    Extract contact fields from one free-text contact string.

    All five patterns run against the full original string, so the matches
    are independent of each other. Missing fields are None; nothing raises.

    Args:
        text: Raw contact field

    Returns:
        ContactInfo with whichever fields were found
    """
    if not text or not text.strip():
        return ContactInfo()

    email = _first_match(ContactPatterns.EMAIL, text)
    if email:
        email = email.rstrip(".")

    phone = _first_match(ContactPatterns.PHONE, text)
    if phone:
        phone = re.sub(r"\s+", "", phone)

    contact = ContactInfo(
        email=email,
        phone=phone,
        linkedin_handle=_first_match(ContactPatterns.LINKEDIN, text, group=1),
        github_handle=_first_match(ContactPatterns.GITHUB, text, group=1),
        portfolio_domain=_first_match(ContactPatterns.PORTFOLIO, text, group=1),
    )

    if contact.is_empty():
        _log_debug(f"No contact fields recognized in: '{text[:80]}'")
    return contact
