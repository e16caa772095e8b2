"""wordgoal - Word goals and window memory for a distraction-free editor.

wordgoal is the engine behind a single-document writing app: a dash-aware
word counter, a progress model that colors the goal bar, and window geometry
persistence that restores the editor where it was left without ever placing
it off-screen.

Example:
    $ wordgoal count draft.txt --limit 750
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
