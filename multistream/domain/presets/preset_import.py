"""Preset import from pasted text.

Presets are written as blocks wrapped in marker lines, one ``key: value``
pair per line::

    ---PRESET-BEGIN---
    Title: Cozy Fireplace Stream
    Video Link: https://drive.google.com/file/d/YOUR_FILE_ID/view
    Ingest URL: rtmp://a.rtmp.youtube.com/live2
    Stream Key: xxxx-xxxx-xxxx-xxxx
    ---PRESET-END---

Anything outside the markers is ignored, so a whole document can be pasted.
"""

from loguru import logger

from multistream.domain.platforms.platform_models import FieldValues, PlatformAdapter
from multistream.domain.platforms.validation import apply_field_defaults

from .preset_models import PresetParseResult, StreamPreset

PRESET_BEGIN = "---PRESET-BEGIN---"
PRESET_END = "---PRESET-END---"

NO_TEXT_ERROR = "No text provided"
UNTERMINATED_BLOCK_ERROR = "Found PRESET-BEGIN without matching PRESET-END"
NO_BLOCKS_ERROR = (
    f"No valid preset blocks found. Make sure to wrap presets with "
    f"{PRESET_BEGIN} and {PRESET_END} markers."
)

# Lower-cased line key -> StreamPreset attribute
KEY_SYNONYMS: dict[str, str] = {
    "title": "title",
    "video": "video_link",
    "videolink": "video_link",
    "video link": "video_link",
    "ingest": "ingest_url",
    "ingesturl": "ingest_url",
    "ingest url": "ingest_url",
    "rtmp": "ingest_url",
    "rtmp url": "ingest_url",
    "key": "stream_key",
    "streamkey": "stream_key",
    "stream key": "stream_key",
}

REQUIRED_PRESET_FIELDS = ("title", "video_link", "ingest_url", "stream_key")


def extract_preset_blocks(text: str) -> tuple[list[str], list[str]]:
    """Split text into trimmed block bodies.

    Returns:
        (blocks, errors) where errors holds the unterminated-marker error if
        scanning stopped on a PRESET-BEGIN with no PRESET-END after it.
    """
    blocks: list[str] = []
    errors: list[str] = []
    position = 0

    while True:
        begin = text.find(PRESET_BEGIN, position)
        if begin == -1:
            break

        end = text.find(PRESET_END, begin)
        if end == -1:
            errors.append(UNTERMINATED_BLOCK_ERROR)
            break

        blocks.append(text[begin + len(PRESET_BEGIN) : end].strip())
        position = end + len(PRESET_END)

    return blocks, errors


def parse_preset_block(block: str) -> StreamPreset | None:
    """Parse one block body. Returns None when any of the four fields is missing."""
    found: dict[str, str] = {}

    for raw_line in block.split("\n"):
        line = raw_line.strip()
        if not line:
            continue

        key, sep, value = line.partition(":")
        if not sep:
            continue

        value = value.strip()
        if not value:
            continue

        attr = KEY_SYNONYMS.get(key.strip().lower())
        if attr:
            found[attr] = value

    if all(found.get(name) for name in REQUIRED_PRESET_FIELDS):
        return StreamPreset(**found)

    return None


def parse_presets_from_text(text: str | None) -> PresetParseResult:
    """Parse every preset block in text.

    Problems are collected rather than raised: a bad block adds a message
    naming its 1-based position and the remaining blocks are still parsed.
    """
    result = PresetParseResult()

    if not text or not isinstance(text, str):
        result.errors.append(NO_TEXT_ERROR)
        return result

    blocks, scan_errors = extract_preset_blocks(text)
    result.errors.extend(scan_errors)

    if not blocks:
        result.errors.append(NO_BLOCKS_ERROR)
        return result

    for index, block in enumerate(blocks, start=1):
        try:
            preset = parse_preset_block(block)
        except Exception as exc:
            logger.warning(f"Preset block {index} failed to parse: {exc}")
            result.errors.append(f"Preset block {index}: {str(exc) or 'Parse error'}")
            continue

        if preset:
            result.presets.append(preset)
        else:
            result.errors.append(f"Preset block {index}: Missing required fields")

    logger.debug(
        f"Parsed {len(result.presets)} preset(s) from {len(blocks)} block(s) "
        f"with {len(result.errors)} error(s)"
    )

    return result


def format_preset_block(preset: StreamPreset) -> str:
    """Serialize a preset into the block format understood by the parser."""
    return "\n".join(
        [
            PRESET_BEGIN,
            f"Title: {preset.title}",
            f"Video Link: {preset.video_link}",
            f"Ingest URL: {preset.ingest_url}",
            f"Stream Key: {preset.stream_key}",
            PRESET_END,
        ]
    )


def preset_to_field_values(preset: StreamPreset, adapter: PlatformAdapter) -> FieldValues:
    """Copy a preset into a field value map for an RTMP-style adapter."""
    values: FieldValues = {
        "name": preset.title,
        "ingestUrl": preset.ingest_url,
        "streamKey": preset.stream_key,
    }
    return apply_field_defaults(adapter, values)


def get_preset_format_instructions() -> str:
    return f"""Copy and paste text in this exact format:

{PRESET_BEGIN}
Title: Cozy Fireplace Stream
Video Link: https://drive.google.com/file/d/YOUR_FILE_ID/view
Ingest URL: rtmp://a.rtmp.youtube.com/live2
Stream Key: xxxx-xxxx-xxxx-xxxx
{PRESET_END}

You can include multiple presets. Each preset must:
- Start with {PRESET_BEGIN}
- End with {PRESET_END}
- Include all four fields (Title, Video Link, Ingest URL, Stream Key)
- Use the exact field names shown above

Any text outside the markers will be ignored."""
