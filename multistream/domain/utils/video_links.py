"""Google Drive share link detection for video sources."""

import re

GDRIVE_PATTERNS = (
    re.compile(r"drive\.google\.com/file/d/", re.IGNORECASE),
    re.compile(r"drive\.google\.com/open\?id=", re.IGNORECASE),
    re.compile(r"drive\.google\.com/uc\?id=", re.IGNORECASE),
    re.compile(r"docs\.google\.com/.*/d/", re.IGNORECASE),
)

GDRIVE_PERMISSIONS_GUIDANCE = """Google Drive links require specific sharing settings:
- Set sharing to "Anyone with the link" (public access)
- Private/restricted links will fail to load
- For video files, consider using the direct download link format
- Test the link in an incognito window to verify public access"""


def is_google_drive_link(url: str | None) -> bool:
    if not url or not isinstance(url, str):
        return False
    return any(pattern.search(url) for pattern in GDRIVE_PATTERNS)


def get_google_drive_permissions_guidance() -> str:
    return GDRIVE_PERMISSIONS_GUIDANCE
