from tickcount.globalstate import AppState, GlobalState
from tickcount.module import TickCountServer

__all__ = ["AppState", "GlobalState", "TickCountServer", "create_app"]


def create_app(gstate=None):
    return TickCountServer(gstate=gstate).create_app()
