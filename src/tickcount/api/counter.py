from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse, RedirectResponse

from tickcount.api import get_gstate
from tickcount.globalstate import GlobalState

router = APIRouter(tags=["counter"])


@router.get("/", response_class=PlainTextResponse)
async def get_counter(gstate: GlobalState = Depends(get_gstate)) -> str:
    return str(gstate.gets(lambda st: st.tick_count))


@router.get("/plusone")
async def plus_one(
    gstate: GlobalState = Depends(get_gstate),
) -> RedirectResponse:
    gstate.modify_tick_count(lambda c: c + 1)
    return RedirectResponse(url="/", status_code=302)


@router.get("/plustwo")
async def plus_two(
    gstate: GlobalState = Depends(get_gstate),
) -> RedirectResponse:
    gstate.modify_tick_count(lambda c: c + 2)
    return RedirectResponse(url="/", status_code=302)
