"""Stream readiness checklist and network assessment."""

from .session_models import (
    NetworkAssessment,
    NetworkInfo,
    Output,
    OutputReadiness,
    Session,
    SessionReadiness,
)

LOW_BANDWIDTH_EFFECTIVE_TYPES = {"slow-2g", "2g"}
LOW_BANDWIDTH_DOWNLINK_MBPS = 1.0

LOW_BANDWIDTH_RECOMMENDATIONS = [
    "Switch to a faster network (WiFi or wired)",
    "Reduce stream bitrate settings",
    "Close other bandwidth-intensive applications",
]


def is_output_configured(output: Output) -> bool:
    return bool(output.url and output.stream_key)


def check_session_readiness(session: Session, outputs: list[Output]) -> SessionReadiness:
    """Checklist of what a session still needs before it can stream."""
    output_checks = [
        OutputReadiness(output_id=output.id, name=output.name, configured=is_output_configured(output))
        for output in outputs
    ]
    has_video_source = bool(session.video_source_url)
    has_outputs = bool(session.outputs)

    return SessionReadiness(
        session_id=session.id,
        has_video_source=has_video_source,
        has_outputs=has_outputs,
        outputs=output_checks,
        ready=has_video_source and has_outputs and all(o.configured for o in output_checks),
    )


def is_low_bandwidth(network: NetworkInfo) -> bool:
    if network.effective_type in LOW_BANDWIDTH_EFFECTIVE_TYPES:
        return True
    return network.downlink is not None and network.downlink < LOW_BANDWIDTH_DOWNLINK_MBPS


def assess_network(network: NetworkInfo) -> NetworkAssessment:
    low = is_low_bandwidth(network)
    return NetworkAssessment(
        network=network,
        is_low_bandwidth=low,
        recommendations=list(LOW_BANDWIDTH_RECOMMENDATIONS) if low else [],
    )
