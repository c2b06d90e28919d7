"""Quick start: create, configure and activate a session in one go."""

from loguru import logger

from multistream.domain.platforms.output_params import OutputParams
from multistream.utils.app_errors import AppError, AppErrorCode, HttpStatusCode

from .session_store import SessionStore

STEP_CREATE_SESSION = "create_session"
STEP_SET_VIDEO_SOURCE = "set_video_source"
STEP_ADD_OUTPUT = "add_output"
STEP_START_SESSION = "start_session"


class QuickStartError(AppError):
    """A quick start step failed. Earlier steps are left applied."""

    def __init__(self, session_id: str, failed_step: str, completed_steps: list[str], reason: str):
        super().__init__(
            errcode=AppErrorCode.E_SESSION_STORE_FAILURE,
            errmesg=f"Failed to start quick stream at step '{failed_step}': {reason}",
            status_code=HttpStatusCode.BAD_GATEWAY,
            details={
                "session_id": session_id,
                "failed_step": failed_step,
                "completed_steps": list(completed_steps),
            },
        )
        self.session_id = session_id
        self.failed_step = failed_step
        self.completed_steps = list(completed_steps)


class QuickStartOperations:
    """Runs the four session store calls that make up a quick start."""

    def __init__(self, store: SessionStore):
        self.store = store

    async def quick_start(
        self,
        session_id: str,
        title: str,
        video_source_url: str,
        output: OutputParams,
    ) -> str:
        """Create a session, set its video source, add one output and start it.

        Steps run strictly in order, each awaited before the next, because each
        depends on the session state left by the previous one. The first
        failure stops the flow; nothing already applied is rolled back.

        Args:
            session_id: Caller-generated session identifier
            title: Session title
            video_source_url: Video source URL
            output: Normalized output values

        Returns:
            The session_id, for navigation/display

        Raises:
            QuickStartError: naming the failed step and the completed ones
        """
        steps = (
            (STEP_CREATE_SESSION, lambda: self.store.create_session(session_id, title)),
            (
                STEP_SET_VIDEO_SOURCE,
                lambda: self.store.set_video_source(session_id, video_source_url),
            ),
            (
                STEP_ADD_OUTPUT,
                lambda: self.store.add_output(
                    session_id,
                    output.name,
                    output.protocol,
                    output.url,
                    output.stream_key,
                    output.max_bitrate,
                    list(output.categories),
                ),
            ),
            (STEP_START_SESSION, lambda: self.store.start_session(session_id)),
        )

        logger.info(
            f"Quick start session={session_id} output={output.name} protocol={output.protocol}"
        )

        completed: list[str] = []
        for step, call in steps:
            try:
                await call()
            except Exception as exc:
                logger.error(
                    f"Quick start session={session_id} failed at {step} "
                    f"(completed={completed}): {type(exc).__name__}: {exc}"
                )
                raise QuickStartError(
                    session_id=session_id,
                    failed_step=step,
                    completed_steps=completed,
                    reason=str(exc) or type(exc).__name__,
                ) from exc
            completed.append(step)
            logger.debug(f"Quick start session={session_id} step {step} done")

        logger.info(f"Quick start session={session_id} is live")
        return session_id
