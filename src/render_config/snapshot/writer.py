"""Snapshot of render options for external file watchers.

The snapshot is a one-way projection: it is written at startup and never
read back by this package. Tooling that watches the working directory uses
it to notice configuration changes.
"""

import typing as t
from pathlib import Path

from ..config.settings import DEFAULT_SNAPSHOT_PATH
from ..domain.exceptions import SnapshotWriteError
from ..domain.render_options import RenderOptions
from ..infrastructure.logging import get_logger

if t.TYPE_CHECKING:
    import loguru

SNAPSHOT_HEADER: t.Final = (
    "// This file is auto-generated. Changing it will have no effect on "
    "render_config. Change these by changing RenderOptions and rerunning"
)


def format_snapshot(options: RenderOptions) -> str:
    """Render options as a KDL-style block.

    Field order is fixed: pkg-path, environment, socket-address, reload-port.
    The bundle path is embedded verbatim between quotes; RenderOptions
    rejects paths containing quotes or control characters, so the block
    structure always holds.
    """
    lines = [
        SNAPSHOT_HEADER,
        "RenderOptions {",
        f'    pkg-path "{options.pkg_path}"',
        f'    environment "{options.environment.label}"',
        f'    socket-address "{options.socket_address}"',
        f"    reload-port {options.reload_port}",
        "}",
    ]
    return "\n".join(lines) + "\n"


class SnapshotWriter:
    """Writes render options snapshots to a fixed path.

    Each write replaces the file. There is no locking, so concurrent
    writers race and the last one wins.
    """

    def __init__(
        self,
        path: Path = DEFAULT_SNAPSHOT_PATH,
        logger: "loguru.Logger | None" = None,
    ) -> None:
        """
        Args:
            path: Snapshot file, relative paths resolve against the CWD
            logger: Logger for write outcomes (default: this module's logger)
        """
        self.path = Path(path)
        self._logger = logger if logger is not None else get_logger(__name__)

    def write(self, options: RenderOptions) -> Path:
        """Overwrite the snapshot file with `options`.

        Returns:
            The path that was written

        Raises:
            SnapshotWriteError: If the file cannot be written
        """
        content = format_snapshot(options)
        try:
            self.path.write_text(content, encoding="utf-8", newline="\n")
        except OSError as exc:
            self._logger.error(
                f"Failed to write render options snapshot to {self.path}: {exc}"
            )
            raise SnapshotWriteError(path=self.path, cause=exc) from exc

        self._logger.debug(f"Wrote render options snapshot to {self.path}")
        return self.path


def write_snapshot(
    options: RenderOptions, path: Path = DEFAULT_SNAPSHOT_PATH
) -> Path:
    """Write `options` to `path` (default ./.render_config.kdl).

    Raises:
        SnapshotWriteError: If the file cannot be written
    """
    return SnapshotWriter(path=path).write(options)
