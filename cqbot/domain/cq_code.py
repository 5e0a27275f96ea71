"""CQ code markup helpers and endpoint extraction.

Pure Python, no framework dependencies.
"""

import re
from typing import Optional

from cqbot.domain.models import ExtractedEndpoint

# Marker every at-mention CQ code starts with: [CQ:at,qq=123]
AT_MENTION_MARKER = "[CQ:at"

# Any CQ code: [CQ:image,file=x.jpg], [CQ:face,id=1], ...
CQ_CODE_RE = re.compile(r"\[CQ[^\]]+\]")

# Four 1-3 digit groups and a 3-5 digit port, each pair separated by 1-3
# non-word characters (lazy). Ranges are not checked. ASCII classes, so CJK
# text between groups counts as a separator and full-width digits do not match.
ENDPOINT_RE = re.compile(
    r"(\d{1,3})\W{1,3}?(\d{1,3})\W{1,3}?(\d{1,3})\W{1,3}?(\d{1,3})\W{1,3}?(\d{3,5})",
    re.ASCII,
)


def has_at_mention(text: str) -> bool:
    """True if the raw message tags a specific user."""
    return AT_MENTION_MARKER in text


def strip_cq_codes(text: str) -> str:
    """Remove all CQ codes, leaving the plain text around them untouched."""
    return CQ_CODE_RE.sub("", text)


def extract_endpoint(text: str) -> Optional[ExtractedEndpoint]:
    """Return the first address:port found in already-sanitized text."""
    match = ENDPOINT_RE.search(text)
    if not match:
        return None
    g1, g2, g3, g4, port = match.groups()
    return ExtractedEndpoint(
        host=f"{g1}.{g2}.{g3}.{g4}",
        port=port,
        description=text,
    )
