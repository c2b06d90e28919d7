from .platform_models import NumberField, PlatformAdapter, TextField

YOUTUBE_DEFAULT_INGEST_URL = "rtmp://a.rtmp.youtube.com/live2"

youtube_adapter = PlatformAdapter(
    id="youtube",
    display_name="YouTube",
    protocol="rtmp",
    fields=(
        TextField(
            id="name",
            label="Target Name",
            required=True,
            placeholder="e.g., My YouTube Channel",
            help_text="A friendly name to identify this output",
        ),
        TextField(
            id="ingestUrl",
            label="RTMP Ingest URL",
            required=True,
            placeholder=YOUTUBE_DEFAULT_INGEST_URL,
            help_text=f"YouTube RTMP server URL (usually {YOUTUBE_DEFAULT_INGEST_URL})",
        ),
        TextField(
            id="streamKey",
            label="Stream Key",
            required=True,
            sensitive=True,
            placeholder="xxxx-xxxx-xxxx-xxxx",
            help_text="Your YouTube stream key from YouTube Studio",
        ),
        NumberField(
            id="maxBitrate",
            label="Max Bitrate (kbps)",
            required=False,
            placeholder="4500",
            help_text="Maximum bitrate for the stream (optional, 0 for unlimited)",
            default_value=4500,
        ),
    ),
    default_categories=("youtube", "live"),
)
