"""One window-owning session: preferences, recorder and manager wired together."""

from types import TracebackType

from wordgoal.config import WindowConfig
from wordgoal.store import Preferences
from wordgoal.utils.logging import GeometryStats
from wordgoal.window.manager import WindowGeometryManager
from wordgoal.window.protocols import DisplayLayout, Scheduler, WindowHost
from wordgoal.window.recorder import GeometryRecorder


class GeometrySession:
    """Restores and tracks the document window for a single view.

    The stored geometry is read once, when the session is created.

    Example:
        with GeometrySession(prefs, queue, layout) as session:
            session.attach(view)
            queue.run_until_idle()
    """

    def __init__(
        self,
        preferences: Preferences,
        scheduler: Scheduler,
        displays: DisplayLayout,
        config: WindowConfig | None = None,
    ) -> None:
        config = config or WindowConfig()
        self.stats = GeometryStats()
        self.recorder = GeometryRecorder(
            preferences,
            min_size=config.min_persisted_size,
            stats=self.stats,
        )
        self.manager = WindowGeometryManager(
            initial_size=self.recorder.initial_size,
            initial_origin=self.recorder.initial_origin,
            on_size_change=self.recorder.on_size_change,
            on_origin_change=self.recorder.on_origin_change,
            scheduler=scheduler,
            displays=displays,
            default_visible_rect=config.default_visible_rect,
            stats=self.stats,
        )

    def attach(self, host: WindowHost) -> None:
        self.manager.attach(host)

    def close(self) -> None:
        self.manager.close()

    def __enter__(self) -> "GeometrySession":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
