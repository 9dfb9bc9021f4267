from dataclasses import dataclass

from .config.settings import Settings
from .domain.exceptions import SnapshotWriteError
from .domain.render_options import RenderOptions
from .infrastructure.logging import get_logger, setup_logging
from .snapshot import SnapshotWriter


@dataclass(frozen=True)
class App:
    """Application wiring container.

    Holds Settings and the snapshot writer they configure, so startup code
    and tests can pass explicit Settings instead of relying on globals.
    """

    settings: Settings
    snapshot_writer: SnapshotWriter

    def publish(self, options: RenderOptions) -> None:
        """Write the snapshot for `options`, logging instead of raising.

        Use `snapshot_writer.write` directly to handle the error yourself.
        """
        try:
            self.snapshot_writer.write(options)
        except SnapshotWriteError as exc:
            get_logger(__name__).warning(f"Continuing without snapshot: {exc}")


def create_app(settings: Settings | None = None) -> App:
    """Create an `App` with provided settings or defaults.

    Configures logging from the settings.
    """
    settings = settings or Settings()
    setup_logging(settings)
    return App(
        settings=settings,
        snapshot_writer=SnapshotWriter(
            path=settings.snapshot_path, logger=get_logger("render_config.snapshot")
        ),
    )
