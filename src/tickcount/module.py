from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

import uvicorn
from fastapi import FastAPI

from tickcount.api import counter
from tickcount.config import Config
from tickcount.globalstate import GlobalState
from tickcount.logger import log, setup_tick_logger
from tickcount.middleware import TickCountLogger


class TickCountServer:

    config: Config
    app: Optional[FastAPI] = None

    def __init__(self, config: Optional[Config] = None,
                 gstate: Optional[GlobalState] = None) -> None:
        self.config = config if config is not None else Config()
        self.gstate = gstate if gstate is not None else GlobalState()

    @asynccontextmanager
    async def _lifespan(self, app: FastAPI) -> AsyncIterator[None]:
        log.info("Startup tickcount, tick count = {}".format(
            self.gstate.counter))
        yield
        log.info("Shutdown tickcount, tick count = {}".format(
            self.gstate.counter))

    def create_app(self) -> FastAPI:
        app = FastAPI(title="tickcount", docs_url=None, redoc_url=None,
                      openapi_url=None, lifespan=self._lifespan)
        app.state.gstate = self.gstate
        setup_tick_logger()
        app.add_middleware(TickCountLogger, gstate=self.gstate)
        app.include_router(counter.router)
        self.app = app
        return app

    def serve(self) -> None:
        cfg = self.config
        log.info("Starting tickcount server on {}:{}".format(
            cfg.host, cfg.port))
        # uvicorn logs and exits non-zero if the port cannot be bound.
        uvicorn.run(self.create_app(), host=cfg.host, port=cfg.port,
                    log_level=cfg.log_level, access_log=cfg.access_log)
