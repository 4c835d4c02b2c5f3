from fastapi import Request

from tickcount.globalstate import GlobalState


def get_gstate(request: Request) -> GlobalState:
    return request.app.state.gstate
