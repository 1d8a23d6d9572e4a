"""gitprompt CLI commands."""
# pyright: reportUnusedCallResult=false

from cyclopts import App

from ._config import app as config_app
from ._prompt import head, load_snapshot, segment, state

__all__ = [
    "config_app",
    "head",
    "load_snapshot",
    "register_commands",
    "segment",
    "state",
]


def register_commands(app: App) -> None:
    app.default(segment)
    app.command(state, name="state")
    app.command(head, name="head")
    app.command(config_app)
