"""Window geometry persistence for wordgoal.

This module restores the document window's size and position at launch and
records changes while it is open. Restored origins are clamped into the
visible frame of a connected display so the window is never off-screen.

Key classes:
- WindowGeometryManager: Attaches to a live window and reports its geometry
- GeometryRecorder: Persists reported geometry, ignoring undersized frames
- GeometrySession: Wires preferences, recorder and manager for one view
- DeferredQueue: FIFO scheduler for the UI-affine context
- StaticDisplayLayout: Fixed display layout

Key functions:
- select_visible_rect: Choose the display that should host an origin
- clamp_origin: Keep a frame inside a rectangle
- adjusted_origin: clamp_origin against a live display layout
"""

from wordgoal.window.manager import AttachState, WindowGeometryManager
from wordgoal.window.placement import (
    DEFAULT_VISIBLE_RECT,
    adjusted_origin,
    clamp,
    clamp_origin,
    select_visible_rect,
)
from wordgoal.window.protocols import (
    DisplayLayout,
    LiveWindow,
    Scheduler,
    Subscription,
    WindowEvent,
    WindowHost,
)
from wordgoal.window.recorder import GeometryRecorder
from wordgoal.window.scheduling import DeferredQueue, StaticDisplayLayout
from wordgoal.window.session import GeometrySession

__all__ = [
    # Placement
    "DEFAULT_VISIBLE_RECT",
    "adjusted_origin",
    "clamp",
    "clamp_origin",
    "select_visible_rect",
    # Manager classes
    "AttachState",
    "GeometryRecorder",
    "GeometrySession",
    "WindowGeometryManager",
    # Collaborators
    "DeferredQueue",
    "DisplayLayout",
    "LiveWindow",
    "Scheduler",
    "StaticDisplayLayout",
    "Subscription",
    "WindowEvent",
    "WindowHost",
]
